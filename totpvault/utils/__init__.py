# Utilities
"""
Shared helpers:
- Logging configuration - logger.py
"""

from .logger import setup_logger, get_logger

__all__ = ['setup_logger', 'get_logger']
