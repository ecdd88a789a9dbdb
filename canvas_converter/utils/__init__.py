"""
Utility modules for the converter.
"""

# Import key utilities for easy access
from canvas_converter.utils.config import Config, setup_logging_from_config
from canvas_converter.utils.logging import setup_logging, reset_logging, log_exception

__all__ = [
    'Config',
    'setup_logging_from_config',
    'setup_logging',
    'reset_logging',
    'log_exception',
]
