"""
navtabs - Bootstrap tabs, nav and dropdown widgets for Flask views
"""

__version__ = "1.0.0"

from .core import Dropdown, InvalidConfigError, JsExpression, Nav, Tabs, View, current_view
from .extension import NavTabs

__all__ = [
    'Dropdown',
    'InvalidConfigError',
    'JsExpression',
    'Nav',
    'NavTabs',
    'Tabs',
    'View',
    'current_view',
]
