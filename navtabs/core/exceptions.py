# core/exceptions.py
"""
Exceptions raised by navtabs widgets
"""


class InvalidConfigError(Exception):
    """Raised when a widget receives an invalid configuration"""
