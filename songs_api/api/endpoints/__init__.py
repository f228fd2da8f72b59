"""
API endpoints package initialization
"""
from . import songs, health

# Export all endpoint modules
__all__ = ['songs', 'health']
