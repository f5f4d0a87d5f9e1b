# core/widget.py
"""
Base class for Bootstrap widgets
"""

import logging
from typing import Any, Dict, Optional, Union

from markupsafe import Markup

from .js import encode_js
from .view import View, current_view

logger = logging.getLogger(__name__)


class Widget:
    """
    Base Bootstrap widget

    A widget renders its markup in run() and registers the assets and
    client-side code it needs with its view.
    """

    def __init__(self,
                 view: Optional[View] = None,
                 options: Optional[Dict[str, Any]] = None,
                 client_options: Union[Dict[str, Any], bool, None] = None,
                 client_events: Optional[Dict[str, Any]] = None):
        """
        Args:
            view: view receiving assets and scripts; defaults to the view of
                the current request, or a standalone one outside Flask
            options: HTML attributes of the widget container
            client_options: options for the Bootstrap plugin, or False to
                skip the plugin call
            client_events: event name mapped to a handler, or to a
                (selector, handler) pair for delegated events
        """
        self.view = view or current_view() or View()
        self.options = dict(options or {})
        self.client_options = {} if client_options is None else client_options
        self.client_events = dict(client_events or {})

        if 'id' not in self.options:
            self.options['id'] = self.view.next_widget_id()

    @property
    def id(self) -> str:
        return self.options['id']

    @classmethod
    def widget(cls, **config) -> Markup:
        """Create a widget and return its rendering result"""
        return cls(**config).run()

    def run(self) -> Markup:
        raise NotImplementedError

    def register_plugin(self, name: str) -> None:
        """
        Register a Bootstrap plugin and the widget's client events

        Args:
            name: plugin name, e.g. 'dropdown'
        """
        self.view.register_asset_bundle('bootstrap-plugin')

        if self.client_options is not False:
            options = encode_js(self.client_options) if self.client_options else ''
            self.view.register_js(f"jQuery('#{self.id}').{name}({options});")

        self.register_client_events()

    def register_client_events(self) -> None:
        """Register JS handlers listed in client_events"""
        if not self.client_events:
            return

        js = []
        for event, handler in self.client_events.items():
            if isinstance(handler, (list, tuple)) and len(handler) == 2:
                selector, callback = handler
                js.append(f"jQuery('#{self.id}').on('{event}', '{selector}', {callback});")
            else:
                js.append(f"jQuery('#{self.id}').on('{event}', {handler});")

        self.view.register_js('\n'.join(js))
        logger.debug(f"Client events registered for #{self.id}: {', '.join(self.client_events)}")
