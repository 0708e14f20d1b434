class AppError(Exception):
    """Base application error"""


class ConfigError(AppError):
    """Missing or invalid configuration"""


class InvalidColorInput(AppError, ValueError):
    """Color string is malformed or has out-of-range channels"""
