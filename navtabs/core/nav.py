# core/nav.py
"""
Bootstrap nav widget
"""

import logging
from typing import Any, Dict, List, Optional, Type

from flask import has_request_context, request
from markupsafe import Markup

from .dropdown import Dropdown
from .exceptions import InvalidConfigError
from .html import a, add_css_class, encode, tag, to_url
from .widget import Widget

logger = logging.getLogger(__name__)


class Nav(Widget):
    """
    Renders a Bootstrap nav as an unordered list

    Items are either pre-rendered strings, emitted as-is, or dicts with:

    - label: str, required
    - url: link target, a string or an (endpoint, params) pair
    - visible: bool, defaults to True
    - active: bool; when omitted the item is active if its URL matches
      the current request path
    - encode: bool, overrides encode_labels
    - disabled: bool
    - options: HTML attributes of the list item
    - link_options: HTML attributes of the link
    - items: dropdown menu items, see Dropdown
    """

    def __init__(self,
                 items: Optional[List[Any]] = None,
                 encode_labels: bool = True,
                 activate_items: bool = True,
                 dropdown_class: Type[Dropdown] = Dropdown,
                 **kwargs):
        super().__init__(**kwargs)
        self.items = list(items or [])
        self.encode_labels = encode_labels
        self.activate_items = activate_items
        self.dropdown_class = dropdown_class
        add_css_class(self.options, widget='nav')

    def run(self) -> Markup:
        return self.render_items()

    def render_items(self) -> Markup:
        items = []
        for item in self.items:
            if isinstance(item, str):
                items.append(item)
                continue
            if not item.get('visible', True):
                continue
            items.append(self.render_item(item))

        return tag('ul', '\n'.join(items), self.options)

    def render_item(self, item: Dict[str, Any]) -> Markup:
        """
        Render a single nav item

        Raises:
            InvalidConfigError: if the item has no label
        """
        if 'label' not in item:
            raise InvalidConfigError("The 'label' option is required.")

        encode_label = item.get('encode', self.encode_labels)
        label = encode(item['label']) if encode_label else item['label']
        options = dict(item.get('options', {}))
        link_options = dict(item.get('link_options', {}))
        add_css_class(options, widget='nav-item')
        add_css_class(link_options, widget='nav-link')

        url = item.get('url', '#')
        menu = ''
        if item.get('items'):
            add_css_class(options, 'dropdown')
            add_css_class(link_options, 'dropdown-toggle')
            link_options.setdefault('data-toggle', 'dropdown')
            menu = "\n" + self.dropdown_class.widget(
                items=item['items'],
                encode_labels=self.encode_labels,
                client_options=False,
                view=self.view
            )

        if self.is_item_active(item):
            add_css_class(link_options, 'active')
        if item.get('disabled'):
            add_css_class(link_options, 'disabled')
            link_options['tabindex'] = '-1'
            link_options['aria-disabled'] = 'true'

        return tag('li', a(label, url, link_options) + Markup(menu), options)

    def is_item_active(self, item: Dict[str, Any]) -> bool:
        """Explicit 'active' flag, else a match against the request path"""
        if 'active' in item:
            return bool(item['active'])
        if not self.activate_items or not has_request_context():
            return False

        url = item.get('url')
        if url is None or item.get('items'):
            return False
        return to_url(url) == request.path
