"""
Utilities package - Common utilities for the memory game
"""

from .hybrid_logger import HybridLogger, ClassLogger, ColoredFormatter

__all__ = [
    'HybridLogger',
    'ClassLogger', 
    'ColoredFormatter'
]
