"""
Model placeholder resolution.

Schema authors refer to other models with ``{{model: Name}}`` placeholders,
for example ``{"$ref": "{{model: Pet}}"}``. This module rewrites them into
local references (``#/components/schemas/Pet``). Other references, such as
absolute URLs, are left untouched.
"""

import re
from typing import Any, Optional

SCHEMA_REF_PREFIX = "#/components/schemas/"

_PLACEHOLDER = re.compile(r"^\{\{\s*model\s*:\s*([\-\w.]+)\s*\}\}$")


def model_ref(model_name: str) -> str:
    return f"{SCHEMA_REF_PREFIX}{model_name}"


def model_ref_schema(model_name: str) -> dict:
    return {"$ref": model_ref(model_name)}


def parse_placeholder(value: Any) -> Optional[str]:
    """Return the model name of a placeholder string, or None.

    Args:
        value: Any schema value

    Returns:
        Optional[str]: The referenced model name if value is a placeholder
    """
    if not isinstance(value, str):
        return None
    match = _PLACEHOLDER.match(value.strip())
    return match.group(1) if match else None


def resolve_placeholders(node: Any) -> Any:
    """Recursively rewrite placeholders in a schema tree.

    A placeholder held by a ``$ref`` key becomes the reference string itself;
    a placeholder anywhere else becomes a ``{"$ref": ...}`` object. The input
    tree is not modified.

    Args:
        node: Schema tree (mapping, list or scalar)

    Returns:
        A new tree with all placeholders resolved
    """
    if isinstance(node, dict):
        result = {}
        for key, value in node.items():
            model_name = parse_placeholder(value)
            if model_name is None:
                result[key] = resolve_placeholders(value)
            elif key == "$ref":
                result[key] = model_ref(model_name)
            else:
                result[key] = model_ref_schema(model_name)
        return result

    if isinstance(node, list):
        return [resolve_placeholders(item) for item in node]

    model_name = parse_placeholder(node)
    if model_name is not None:
        return model_ref_schema(model_name)
    return node
