"""
Request body parsing for Rails-style nested form fields.

An HTML form posts ``post[message]=Hello``; a JSON client posts
``{"post": {"message": "Hello"}}``. Both come out as ``{"message": "Hello"}``
for the ``post`` root. Which of those keys are permitted is decided by the
form DTOs, not here.
"""

import re
from typing import Any

from fastapi import Request

_NESTED_KEY = re.compile(r"^(?P<root>\w+)\[(?P<field>\w+)\]$")


class ParameterMissingError(Exception):
    """Raised when the body has no fields under the required root key."""

    def __init__(self, root: str):
        super().__init__(f"param is missing or the value is empty: {root}")
        self.root = root


def _nested_from_form(items: list[tuple[str, Any]], root: str) -> dict[str, str]:
    params: dict[str, str] = {}
    for key, value in items:
        match = _NESTED_KEY.match(key)
        if match and match.group("root") == root and isinstance(value, str):
            params[match.group("field")] = value
    return params


def _nested_from_json(body: Any, root: str) -> dict[str, str]:
    section = body.get(root) if isinstance(body, dict) else None
    if not isinstance(section, dict):
        return {}
    return {k: v for k, v in section.items() if isinstance(v, str)}


async def require_params(request: Request, root: str) -> dict[str, str]:
    """
    Return the fields nested under ``root``.

    Raises:
        ParameterMissingError: If the body carries nothing under ``root``
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            body = None
        params = _nested_from_json(body, root)
    else:
        form = await request.form()
        params = _nested_from_form(list(form.multi_items()), root)

    if not params:
        raise ParameterMissingError(root)
    return params
