from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .data.models import EDITABLE_FIELDS, ProductDraft


def widget_key(field: str) -> str:
    return f"draft_{field}"


def draft_widget_updates(
    draft: ProductDraft,
    widget_values: Optional[Mapping[str, Any]] = None,
) -> Dict[str, str]:
    """Widget keys and values needed for the form to show `draft`.

    With `widget_values` (the current session values by widget key) only
    the fields that differ are returned; without it every field is
    returned, which rewrites text typed into the form but never submitted.
    """
    updates = {}
    for field in EDITABLE_FIELDS:
        key = widget_key(field)
        value = getattr(draft, field)
        if widget_values is None or widget_values.get(key) != value:
            updates[key] = value
    return updates
