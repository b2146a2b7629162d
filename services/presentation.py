"""
services.presentation - Last-step display remap before values hit the page.
"""

from __future__ import annotations

from collections.abc import Mapping

from schema.fields import FieldKind

BOOL_LABELS = {"true": "Yes", "false": "No"}


def present(values: Mapping[str, str], kinds: Mapping[str, FieldKind]) -> dict[str, str]:
    """Swap boolean fields' "true"/"false" for "Yes"/"No"; others unchanged."""
    return {
        name: BOOL_LABELS.get(text, text) if kinds.get(name) is FieldKind.BOOL else text
        for name, text in values.items()
    }
