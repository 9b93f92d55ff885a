"""
Logger module for form_config.

This module provides a centralized logger that can be imported throughout the form_config
package without causing circular import issues.
"""

import logging

# Module-level logger
logger: logging.Logger = logging.getLogger('form_config')
logger.setLevel(logging.WARNING)  # Default to WARNING level to avoid spam

def get_logger() -> logging.Logger:
    """ Returns the current module logger. Look it up at call time so set_logger() is respected. """
    return logger

def set_logger(custom_logger: logging.Logger) -> None:
    """Allow users to provide their own logger."""
    global logger
    logger = custom_logger

def set_log_level(level: int) -> None:
    """Set the logging level for the module. 
    
    Args:
        level: logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, or logging.CRITICAL
    """
    logger.setLevel(level)
