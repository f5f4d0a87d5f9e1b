# core/tabs.py
"""
Bootstrap tabs widget

Renders a nav header plus the matching tab panes from a declarative list
of tab descriptors. Example:

    Tabs.widget(items=[
        {'label': 'One', 'content': 'Anim pariatur cliche...', 'active': True},
        {'label': 'Two', 'content': '...', 'options': {'id': 'my-pane'}},
        {'label': 'Example', 'url': 'http://www.example.com'},
        {'label': 'Dropdown', 'items': [
            {'label': 'DropdownA', 'content': 'DropdownA, Anim pariatur...'},
            {'label': 'External Link', 'url': 'http://www.example.com'},
        ]},
    ])
"""

import copy
import logging
from typing import Any, Dict, List, Optional, Type

from markupsafe import Markup

from .dropdown import Dropdown
from .exceptions import InvalidConfigError
from .html import a, add_css_class, encode, tag
from .js import JsExpression
from .nav import Nav
from .widget import Widget

logger = logging.getLogger(__name__)

SHOWN_EVENT = 'shown.bs.tab'

# Keeps a single tab link active when tabs live inside a dropdown menu
DROPDOWN_FIX_JS = JsExpression("""function (e) {
    var btn = $(this), dropDown = btn.parents('.dropdown-menu:first');
    btn.parents('.nav:first').find('[data-toggle="tab"]').not(btn).removeClass('active');
    if (dropDown.length) {
        dropDown.siblings('.dropdown-toggle').addClass('active');
    }
}""")


class Tabs(Widget):
    """
    Renders a Bootstrap tabs component

    Tab descriptor keys:

    - label: str, required, the tab header label
    - encode: bool, overrides encode_labels for this label
    - header_options: HTML attributes of the header list item
    - link_options: HTML attributes of the header link
    - content: str, the pane HTML
    - url: str, an external URL; the header then links there instead of
      toggling a pane
    - options: HTML attributes of the pane; 'tag' picks the pane element
    - active: bool; when no tab is active the first visible one is
    - visible: bool, defaults to True
    - items: dropdown sub-items; each takes either 'content' (plus
      optional 'content_options' and 'active') or 'url'
    """

    def __init__(self,
                 items: Optional[List[Dict[str, Any]]] = None,
                 item_options: Optional[Dict[str, Any]] = None,
                 header_options: Optional[Dict[str, Any]] = None,
                 link_options: Optional[Dict[str, Any]] = None,
                 encode_labels: bool = True,
                 nav_type: str = 'nav-tabs',
                 render_tab_content: bool = True,
                 tab_content_options: Optional[Dict[str, Any]] = None,
                 dropdown_class: Type[Dropdown] = Dropdown,
                 **kwargs):
        super().__init__(**kwargs)
        self.items = copy.deepcopy(list(items or []))
        self.item_options = dict(item_options or {})
        self.header_options = dict(header_options or {})
        self.link_options = dict(link_options or {})
        self.encode_labels = encode_labels
        self.nav_type = nav_type
        self.render_tab_content = render_tab_content
        self.tab_content_options = dict(tab_content_options or {})
        self.dropdown_class = dropdown_class
        self.has_dropdown = False

        self.options['role'] = 'tablist'
        add_css_class(self.options, self.nav_type, widget='nav')
        add_css_class(self.tab_content_options, 'tab-content')
        add_css_class(self.header_options, 'nav-item')
        add_css_class(self.link_options, 'nav-link')

    def run(self) -> Markup:
        html = self.render_items()
        self.register_plugin('tab')
        return html

    def render_items(self) -> Markup:
        """
        Render the nav header and the tab panes

        Raises:
            InvalidConfigError: if a visible tab has no label or a dropdown
                sub-item does not have exactly one of content/url
        """
        headers = []
        panes: List[str] = []

        if not self.has_active_tab():
            self.activate_first_visible_tab()

        for n, item in enumerate(self.items):
            if not item.pop('visible', True):
                continue
            if 'label' not in item:
                raise InvalidConfigError("The 'label' option is required.")

            encode_label = item.get('encode', self.encode_labels)
            label = encode(item['label']) if encode_label else item['label']
            header_options = {**self.header_options, **item.get('header_options', {})}
            link_options = {**self.link_options, **item.get('link_options', {})}

            if item.get('items') is not None:
                add_css_class(link_options, widget='dropdown-toggle')
                if self.render_dropdown(n, item['items'], panes):
                    add_css_class(link_options, 'active')
                link_options.setdefault('data-toggle', 'dropdown')

                header = a(label, '#', link_options) + Markup("\n") + self.dropdown_class.widget(
                    items=item['items'],
                    encode_labels=self.encode_labels,
                    client_options=False,
                    view=self.view
                )
                self.has_dropdown = True
            else:
                options = {**self.item_options, **item.get('options', {})}
                options['id'] = options.get('id') or f"{self.id}-tab{n}"

                add_css_class(options, widget='tab-pane')
                if item.pop('active', None):
                    add_css_class(options, 'active show')
                    add_css_class(link_options, 'active')

                if item.get('url') is not None:
                    header = a(label, item['url'], link_options)
                else:
                    link_options.setdefault('data-toggle', 'tab')
                    header = a(label, f"#{options['id']}", link_options)

                if self.render_tab_content:
                    pane_tag = options.pop('tag', 'div')
                    panes.append(tag(pane_tag, item.get('content', ''), options))

            headers.append(tag('li', header, header_options))

        logger.debug(f"Tabs #{self.id} rendered {len(headers)} headers and {len(panes)} panes")
        return self.render_nav_tabs(headers, self.options) + self.render_panes(panes)

    def has_active_tab(self) -> bool:
        """Whether any visible tab, or visible dropdown sub-item, is explicitly active"""
        for item in self.items:
            if not item.get('visible', True):
                continue
            if item.get('active') is True:
                return True
            for sub_item in item.get('items') or []:
                if (isinstance(sub_item, dict) and sub_item.get('visible', True)
                        and sub_item.get('active') is True):
                    return True
        return False

    def activate_first_visible_tab(self) -> None:
        """
        Activate the first visible tab not explicitly set to inactive

        Dropdown tabs are skipped since their header has no pane of its own.
        """
        for item in self.items:
            if item.get('visible', True) and item.get('active') is not False and item.get('items') is None:
                item['active'] = True
                return

    def render_dropdown(self, item_number: int, items: List[Any], panes: List[str]) -> bool:
        """
        Turn dropdown sub-items into tab toggles and collect their panes

        The 'content' and 'content_options' keys are removed from each
        sub-item, whose url then points at the pane it toggles.

        Args:
            item_number: index of the dropdown tab
            items: dropdown sub-items, modified in place
            panes: rendered panes, appended to

        Returns:
            Whether any of the sub-items is active

        Raises:
            InvalidConfigError: if a sub-item does not have exactly one of
                'content' and 'url'
        """
        item_active = False

        for n, item in enumerate(items):
            if isinstance(item, str):
                continue
            if not item.get('visible', True):
                continue
            if ('content' in item) == ('url' in item):
                raise InvalidConfigError(
                    "Either the 'content' or the 'url' option is required, but only one can be set."
                )
            if 'url' in item:
                continue

            content = item.pop('content')
            options = dict(item.pop('content_options', {}))
            add_css_class(options, widget='tab-pane')
            if item.pop('active', None):
                add_css_class(options, 'active')
                item['options'] = dict(item.get('options', {}))
                add_css_class(item['options'], 'active')
                item_active = True

            options['id'] = options.get('id') or f"{self.id}-dd{item_number}-tab{n}"
            item['url'] = f"#{options['id']}"
            item['link_options'] = dict(item.get('link_options', {}))
            item['link_options'].setdefault('data-toggle', 'tab')
            panes.append(tag('div', content, options))

        return item_active

    def render_panes(self, panes: List[str]) -> Markup:
        """Wrap the panes in the tab-content container"""
        if not self.render_tab_content:
            return Markup('')
        return Markup("\n") + tag('div', '\n'.join(panes), self.tab_content_options)

    def render_nav_tabs(self, headers: List[str], options: Dict[str, Any]) -> Markup:
        return Nav.widget(items=headers, options=options, view=self.view)

    def register_plugin(self, name: str) -> None:
        """
        Register the tab plugin assets and client events

        When a dropdown was rendered, a shown.bs.tab handler keeps the
        active state consistent across the nav and the dropdown toggles,
        unless the caller configured their own handler for that event.
        """
        self.view.register_asset_bundle('bootstrap-plugin')

        if self.has_dropdown and SHOWN_EVENT not in self.client_events:
            self.client_events[SHOWN_EVENT] = ('a', DROPDOWN_FIX_JS)
            logger.debug(f"Dropdown active-state handler registered for #{self.id}")

        self.register_client_events()
