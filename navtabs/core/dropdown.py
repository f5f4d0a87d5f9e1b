# core/dropdown.py
"""
Bootstrap dropdown menu widget
"""

import logging
from typing import Any, Dict, List, Optional

from markupsafe import Markup

from .exceptions import InvalidConfigError
from .html import a, add_css_class, class_list, encode, tag
from .widget import Widget

logger = logging.getLogger(__name__)


class Dropdown(Widget):
    """
    Renders a Bootstrap dropdown menu

    Each item is either a string ('-' for a divider, anything else is
    emitted as-is) or a dict with the keys:

    - label: str, required
    - url: link target; without it the label renders as a menu header
    - visible: bool, defaults to True
    - encode: bool, overrides encode_labels
    - active: bool
    - disabled: bool
    - options / link_options: HTML attributes of the item link
    """

    def __init__(self,
                 items: Optional[List[Any]] = None,
                 encode_labels: bool = True,
                 **kwargs):
        super().__init__(**kwargs)
        self.items = list(items or [])
        self.encode_labels = encode_labels
        add_css_class(self.options, widget='dropdown-menu')

    def run(self) -> Markup:
        html = self.render_items(self.items, self.options)
        self.register_plugin('dropdown')
        return html

    def render_items(self, items: List[Any], options: Dict[str, Any]) -> Markup:
        """
        Render menu items

        Raises:
            InvalidConfigError: if an item has no label
        """
        lines = []
        for item in items:
            if isinstance(item, str):
                if item == '-':
                    lines.append(tag('div', '', {'class': 'dropdown-divider'}))
                else:
                    lines.append(item)
                continue

            if not item.get('visible', True):
                continue
            if 'label' not in item:
                raise InvalidConfigError("The 'label' option is required.")

            encode_label = item.get('encode', self.encode_labels)
            label = encode(item['label']) if encode_label else item['label']

            if item.get('url') is None:
                lines.append(tag('h6', label, {'class': 'dropdown-header'}))
                continue

            link_options = dict(item.get('link_options', {}))
            add_css_class(link_options, widget='dropdown-item')

            item_options = dict(item.get('options', {}))
            add_css_class(link_options, *class_list(item_options.pop('class', None)))
            for name, value in item_options.items():
                link_options.setdefault(name, value)

            if item.get('active'):
                add_css_class(link_options, 'active')
            if item.get('disabled'):
                add_css_class(link_options, 'disabled')
                link_options['tabindex'] = '-1'
                link_options['aria-disabled'] = 'true'

            lines.append(a(label, item['url'], link_options))

        logger.debug(f"Dropdown #{self.id} rendered with {len(lines)} entries")
        return tag('div', '\n'.join(lines), options)
