# core/view.py
"""
Per-request view context
Collects the asset bundles and inline scripts registered by widgets and
renders them into the page
"""

import hashlib
import logging
from enum import Enum
from typing import Dict, List, Optional

from flask import current_app, g, has_app_context
from markupsafe import Markup

from .assets import AssetBundle, default_bundles
from .exceptions import InvalidConfigError
from .html import tag

logger = logging.getLogger(__name__)


class JsPosition(Enum):
    """Where a registered script ends up in the page"""
    HEAD = "head"      # inside <head>
    BEGIN = "begin"    # right after <body>
    END = "end"        # right before </body>
    READY = "ready"    # wrapped in jQuery(document).ready
    LOAD = "load"      # wrapped in jQuery(window).on('load')


POS_HEAD = JsPosition.HEAD
POS_BEGIN = JsPosition.BEGIN
POS_END = JsPosition.END
POS_READY = JsPosition.READY
POS_LOAD = JsPosition.LOAD


class View:
    """
    Collects page assets for a single render

    One instance lives for the duration of a request; widget ids are
    allocated from its counter so they stay unique within the page.
    """

    def __init__(self,
                 bundles: Optional[Dict[str, AssetBundle]] = None,
                 auto_id_prefix: str = 'w'):
        self.bundles = bundles if bundles is not None else default_bundles()
        self.auto_id_prefix = auto_id_prefix
        self.registered_bundles: List[str] = []
        self.js: Dict[JsPosition, Dict[str, str]] = {position: {} for position in JsPosition}
        self._counter = 0

    def next_widget_id(self) -> str:
        """Allocate the next automatic widget id"""
        widget_id = f"{self.auto_id_prefix}{self._counter}"
        self._counter += 1
        return widget_id

    def register_asset_bundle(self, name: str) -> AssetBundle:
        """
        Register a bundle and, before it, everything it depends on

        Raises:
            InvalidConfigError: if the bundle is unknown
        """
        if name not in self.bundles:
            raise InvalidConfigError(f"Unknown asset bundle: {name}")

        bundle = self.bundles[name]
        if name not in self.registered_bundles:
            for dependency in bundle.depends:
                self.register_asset_bundle(dependency)
            self.registered_bundles.append(name)
            logger.debug(f"Asset bundle registered: {name}")
        return bundle

    def register_js(self, js: str,
                    position: JsPosition = POS_READY,
                    key: Optional[str] = None) -> None:
        """
        Register an inline script

        Args:
            js: script body
            position: where to place the script
            key: identifies the script; registering the same key again
                replaces the earlier script. Defaults to the script's hash,
                so identical snippets are emitted once.
        """
        key = key or hashlib.md5(js.encode('utf-8')).hexdigest()
        self.js[position][key] = js

    def _scripts(self, position: JsPosition) -> List[str]:
        return list(self.js[position].values())

    def _bundle_files(self, kind: str) -> List[str]:
        files = []
        for name in self.registered_bundles:
            for url in getattr(self.bundles[name], kind):
                if url not in files:
                    files.append(url)
        return files

    def render_head(self) -> Markup:
        """Stylesheet links and head scripts"""
        lines = [
            tag('link', options={'href': url, 'rel': 'stylesheet'})
            for url in self._bundle_files('css')
        ]
        scripts = self._scripts(POS_HEAD)
        if scripts:
            lines.append(tag('script', '\n'.join(scripts)))
        return Markup('\n'.join(lines))

    def render_body_begin(self) -> Markup:
        """Scripts placed at the start of the body"""
        scripts = self._scripts(POS_BEGIN)
        return tag('script', '\n'.join(scripts)) if scripts else Markup('')

    def render_body_end(self) -> Markup:
        """Script files followed by end, ready and load scripts"""
        lines = [tag('script', options={'src': url}) for url in self._bundle_files('js')]

        code = self._scripts(POS_END)
        ready = self._scripts(POS_READY)
        if ready:
            code.append("jQuery(function ($) {\n" + '\n'.join(ready) + "\n});")
        load = self._scripts(POS_LOAD)
        if load:
            code.append("jQuery(window).on('load', function () {\n" + '\n'.join(load) + "\n});")
        if code:
            lines.append(tag('script', '\n'.join(code)))

        return Markup('\n'.join(lines))


def current_view() -> Optional[View]:
    """
    Return the view of the current application context

    The view is created on first use with bundles built from the app
    config. Returns None outside an application context.
    """
    if not has_app_context():
        return None

    view = g.get('navtabs_view')
    if view is None:
        view = View(
            bundles=default_bundles(current_app.config),
            auto_id_prefix=current_app.config.get('NAVTABS_AUTO_ID_PREFIX', 'w')
        )
        g.navtabs_view = view
    return view
