# core/assets.py
"""
Asset bundles required by the Bootstrap widgets
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

JQUERY_URL = 'https://code.jquery.com/jquery-3.7.1.min.js'
BOOTSTRAP_CSS_URL = 'https://cdn.jsdelivr.net/npm/bootstrap@4.6.2/dist/css/bootstrap.min.css'
BOOTSTRAP_JS_URL = 'https://cdn.jsdelivr.net/npm/bootstrap@4.6.2/dist/js/bootstrap.bundle.min.js'


@dataclass
class AssetBundle:
    """A named group of stylesheets and scripts"""
    name: str
    js: List[str] = field(default_factory=list)
    css: List[str] = field(default_factory=list)
    depends: List[str] = field(default_factory=list)


def default_bundles(config: Optional[Mapping[str, Any]] = None) -> Dict[str, AssetBundle]:
    """
    Build the jQuery and Bootstrap bundles

    Args:
        config: optional mapping (usually Flask's app.config) overriding
            the CDN URLs via NAVTABS_JQUERY_URL, NAVTABS_BOOTSTRAP_CSS_URL
            and NAVTABS_BOOTSTRAP_JS_URL
    """
    config = config or {}
    bundles = [
        AssetBundle(
            name='jquery',
            js=[config.get('NAVTABS_JQUERY_URL') or JQUERY_URL]
        ),
        AssetBundle(
            name='bootstrap',
            css=[config.get('NAVTABS_BOOTSTRAP_CSS_URL') or BOOTSTRAP_CSS_URL]
        ),
        AssetBundle(
            name='bootstrap-plugin',
            js=[config.get('NAVTABS_BOOTSTRAP_JS_URL') or BOOTSTRAP_JS_URL],
            depends=['jquery', 'bootstrap']
        ),
    ]
    return {bundle.name: bundle for bundle in bundles}
