"""
Logging configuration and utilities for the exchange application.
"""
from .config import configure_logging, get_command_logger, get_logger, log_command_outcome

__all__ = ["configure_logging", "get_logger", "get_command_logger", "log_command_outcome"]
