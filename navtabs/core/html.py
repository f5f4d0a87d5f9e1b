# core/html.py
"""
HTML helpers for widget rendering
Tag and attribute rendering, HTML encoding and CSS class manipulation
"""

import json
from typing import Any, Dict, List, Optional, Union

from flask import has_app_context, url_for
from markupsafe import Markup, escape

from .exceptions import InvalidConfigError

# Attributes rendered first, in this order
ATTRIBUTE_ORDER = [
    'type', 'id', 'class', 'name', 'value',
    'href', 'src', 'for', 'title', 'alt', 'role'
]

# Attributes whose dict values expand into prefixed attributes
DATA_ATTRIBUTES = ['data', 'aria']

VOID_ELEMENTS = {
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'source', 'track', 'wbr'
}

ClassValue = Union[str, List[str], Dict[Any, str]]


def encode(value: Any) -> Markup:
    """
    HTML-encode a value, quotes included

    Markup instances are considered safe and come back unchanged; None
    encodes to an empty string.
    """
    if value is None:
        return Markup('')
    return escape(value)


def _class_map(value: Optional[ClassValue]) -> Dict[Any, str]:
    """Normalize a class value into an ordered {key: class} mapping"""
    if value is None:
        return {}
    if isinstance(value, str):
        return dict(enumerate(value.split()))
    if isinstance(value, dict):
        return dict(value)
    return dict(enumerate(value))


def class_list(value: Optional[ClassValue]) -> List[str]:
    """Return the classes of a class value as a flat list"""
    return [css_class for entry in _class_map(value).values() for css_class in entry.split()]


def _merge_classes(existing: Dict[Any, str], additional: Dict[Any, str]) -> Dict[Any, str]:
    for key, css_class in additional.items():
        if isinstance(key, int):
            if css_class not in existing.values():
                positions = [k for k in existing if isinstance(k, int)]
                existing[max(positions) + 1 if positions else 0] = css_class
        elif key not in existing:
            existing[key] = css_class

    # keep the first occurrence of each class
    unique: Dict[Any, str] = {}
    for key, css_class in existing.items():
        if css_class not in unique.values():
            unique[key] = css_class
    return unique


def _pack_classes(classes: Dict[Any, str]) -> ClassValue:
    if any(not isinstance(key, int) for key in classes):
        return classes
    return list(classes.values())


def add_css_class(options: Dict[str, Any], *classes: str, **named: str) -> None:
    """
    Add CSS classes to the 'class' entry of an options dict

    Args:
        options: HTML attributes, modified in place
        classes: classes appended unless already present
        named: classes stored under a name; a named class is only added
            when nothing with the same name has been set yet
    """
    if not classes and not named:
        return

    additional: Dict[Any, str] = dict(named)
    for index, css_class in enumerate(classes):
        additional[index] = css_class

    if 'class' not in options or options['class'] is None:
        if not named and len(classes) == 1:
            options['class'] = classes[0]
        else:
            options['class'] = _pack_classes(_merge_classes({}, additional))
        return

    existing = options['class']
    merged = _merge_classes(_class_map(existing), additional)
    if isinstance(existing, str):
        options['class'] = ' '.join(merged.values())
    else:
        options['class'] = _pack_classes(merged)


def remove_css_class(options: Dict[str, Any], *classes: str) -> None:
    """Remove CSS classes from the 'class' entry of an options dict"""
    if 'class' not in options:
        return

    existing = options['class']
    remaining = {
        key: css_class
        for key, css_class in _class_map(existing).items()
        if css_class not in classes
    }
    if not remaining:
        del options['class']
    elif isinstance(existing, str):
        options['class'] = ' '.join(remaining.values())
    else:
        options['class'] = _pack_classes(remaining)


def css_style(style: Union[str, Dict[str, Any]]) -> str:
    """Convert a dict of CSS properties into an inline style string"""
    if isinstance(style, str):
        return style
    return ' '.join(f"{name}: {value};" for name, value in style.items())


def _attribute(name: str, value: Any) -> str:
    if value is None or value is False:
        return ''
    if value is True:
        return f" {name}"
    if isinstance(value, (list, dict)):
        value = json.dumps(value)
    return f' {name}="{escape(value)}"'


def render_tag_attributes(attributes: Optional[Dict[str, Any]]) -> str:
    """
    Render HTML tag attributes

    Known attributes come first in a fixed order, the rest keep their
    insertion order. None and False values are skipped, True renders a
    bare attribute.

    Returns:
        Attribute string with a leading space, or an empty string
    """
    if not attributes:
        return ''

    ordered: Dict[str, Any] = {}
    for name in ATTRIBUTE_ORDER:
        if name in attributes:
            ordered[name] = attributes[name]
    for name, value in attributes.items():
        ordered.setdefault(name, value)

    rendered = []
    for name, value in ordered.items():
        if name in DATA_ATTRIBUTES and isinstance(value, dict):
            for sub_name, sub_value in value.items():
                rendered.append(_attribute(f"{name}-{sub_name}", sub_value))
        elif name == 'class' and value is not None and not isinstance(value, str):
            classes = ' '.join(_class_map(value).values())
            rendered.append(_attribute(name, classes))
        elif name == 'style' and isinstance(value, dict):
            rendered.append(_attribute(name, css_style(value)))
        else:
            rendered.append(_attribute(name, value))

    return ''.join(rendered)


def tag(name: str, content: Any = '', options: Optional[Dict[str, Any]] = None) -> Markup:
    """
    Render an HTML element

    Args:
        name: tag name
        content: inner HTML, inserted without encoding
        options: HTML attributes

    Returns:
        Rendered element as Markup
    """
    attributes = render_tag_attributes(options)
    if content is None:
        content = ''
    if name.lower() in VOID_ELEMENTS:
        return Markup(f"<{name}{attributes}>")
    return Markup(f"<{name}{attributes}>{content}</{name}>")


def to_url(url: Any) -> Optional[str]:
    """
    Resolve a link target

    A string is used as-is. An (endpoint, params) pair is resolved with
    Flask's url_for, which needs an application context.

    Raises:
        InvalidConfigError: if the route is empty
    """
    if url is None or isinstance(url, str):
        return url
    if isinstance(url, (list, tuple)):
        if not url:
            raise InvalidConfigError("A route needs at least an endpoint.")
        endpoint = url[0]
        params = dict(url[1]) if len(url) > 1 and url[1] else {}
        if not has_app_context():
            raise RuntimeError(f"Cannot resolve route '{endpoint}' outside an application context")
        return url_for(endpoint, **params)
    return str(url)


def a(text: Any, url: Any = None, options: Optional[Dict[str, Any]] = None) -> Markup:
    """Render a hyperlink"""
    options = dict(options or {})
    if url is not None:
        options['href'] = to_url(url)
    return tag('a', text, options)
