"""Utility modules for the Alien Invasion project."""

from .logger import get_logger, setup_logging, LogLevel, log_session_summary

__all__ = ['get_logger', 'setup_logging', 'LogLevel', 'log_session_summary']
