# core/js.py
"""
JavaScript encoding helpers
"""

import json
import uuid
from typing import Any, Dict


class JsExpression(str):
    """Raw JavaScript code that is embedded without quoting"""


def encode_js(value: Any) -> str:
    """
    Encode a value as a JavaScript literal

    Values are JSON-encoded except JsExpression instances, which are
    inserted verbatim wherever they appear in the structure.
    """
    expressions: Dict[str, str] = {}

    def replace(item: Any) -> Any:
        if isinstance(item, JsExpression):
            token = f"__js_expression_{uuid.uuid4().hex}__"
            expressions[f'"{token}"'] = str(item)
            return token
        if isinstance(item, dict):
            return {key: replace(val) for key, val in item.items()}
        if isinstance(item, (list, tuple)):
            return [replace(val) for val in item]
        return item

    encoded = json.dumps(replace(value))
    for token, expression in expressions.items():
        encoded = encoded.replace(token, expression)
    return encoded
