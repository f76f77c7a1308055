"""Custom exceptions for tasktrack."""

class TaskTrackError(Exception):
    """Base exception for tasktrack."""
    pass

class ConfigurationError(TaskTrackError):
    """Invalid configuration value."""
    pass
