# core/__init__.py
"""
Bootstrap widgets and the HTML/view helpers they render with
"""

from .dropdown import Dropdown
from .exceptions import InvalidConfigError
from .js import JsExpression
from .nav import Nav
from .tabs import Tabs
from .view import View, current_view
from .widget import Widget

__all__ = [
    'Dropdown',
    'InvalidConfigError',
    'JsExpression',
    'Nav',
    'Tabs',
    'View',
    'Widget',
    'current_view',
]
