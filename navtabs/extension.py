# extension.py
"""
Flask integration for navtabs widgets

Exposes the widgets and the page asset renderers to Jinja templates:

    <head>{{ navtabs_head() }}</head>
    <body>
    {{ navtabs_body_begin() }}
    {{ tabs(items=[{'label': 'One', 'content': 'First pane'}]) }}
    {{ navtabs_scripts() }}
    </body>

Widgets usually render after the <head> block, so the head and
body-begin helpers emit placeholders that are filled in once the
response is complete.
"""

import logging
from typing import Any, Optional, Type

from flask import Flask, Response, current_app
from markupsafe import Markup

from .core.dropdown import Dropdown
from .core.nav import Nav
from .core.tabs import Tabs
from .core.view import current_view
from .core.widget import Widget

logger = logging.getLogger(__name__)

HEAD_PLACEHOLDER = '<![CDATA[NAVTABS-BLOCK-HEAD]]>'
BODY_BEGIN_PLACEHOLDER = '<![CDATA[NAVTABS-BLOCK-BODY-BEGIN]]>'

DEFAULT_SETTINGS = {
    'NAVTABS_NAV_TYPE': 'nav-tabs',
    'NAVTABS_ENCODE_LABELS': True,
    'NAVTABS_AUTO_ID_PREFIX': 'w',
    'NAVTABS_JQUERY_URL': None,
    'NAVTABS_BOOTSTRAP_CSS_URL': None,
    'NAVTABS_BOOTSTRAP_JS_URL': None,
}


class NavTabs:
    """Flask extension registering the widget helpers with Jinja"""

    def __init__(self, app: Optional[Flask] = None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        for key, value in DEFAULT_SETTINGS.items():
            app.config.setdefault(key, value)

        app.extensions['navtabs'] = self
        app.jinja_env.globals.update(
            tabs=self.tabs,
            nav=self.nav,
            dropdown=self.dropdown,
            navtabs_head=self.render_head,
            navtabs_body_begin=self.render_body_begin,
            navtabs_scripts=self.render_scripts,
        )
        app.after_request(self.fill_placeholders)
        logger.info("navtabs widgets registered with Jinja environment")

    def _render(self, widget_class: Type[Widget], **config: Any) -> Markup:
        config.setdefault('encode_labels', current_app.config['NAVTABS_ENCODE_LABELS'])
        return widget_class.widget(**config)

    def tabs(self, **config: Any) -> Markup:
        """Render a Tabs widget with the app's default nav type"""
        config.setdefault('nav_type', current_app.config['NAVTABS_NAV_TYPE'])
        return self._render(Tabs, **config)

    def nav(self, **config: Any) -> Markup:
        return self._render(Nav, **config)

    def dropdown(self, **config: Any) -> Markup:
        return self._render(Dropdown, **config)

    def render_head(self) -> Markup:
        return Markup(HEAD_PLACEHOLDER)

    def render_body_begin(self) -> Markup:
        return Markup(BODY_BEGIN_PLACEHOLDER)

    def render_scripts(self) -> Markup:
        """Script files and inline scripts registered so far"""
        return current_view().render_body_end()

    def fill_placeholders(self, response: Response) -> Response:
        """Replace the head and body-begin placeholders of HTML responses"""
        if response.mimetype != 'text/html' or response.is_streamed or response.direct_passthrough:
            return response

        html = response.get_data(as_text=True)
        if HEAD_PLACEHOLDER not in html and BODY_BEGIN_PLACEHOLDER not in html:
            return response

        view = current_view()
        html = html.replace(HEAD_PLACEHOLDER, view.render_head())
        html = html.replace(BODY_BEGIN_PLACEHOLDER, view.render_body_begin())
        response.set_data(html)
        return response
