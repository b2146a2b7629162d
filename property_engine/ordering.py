"""
property_engine.ordering - Per-session field visibility and display order.

The store remembers every field name it has ever seen.  Switching to a
category that lacks a field only takes it out of scope; its entry (and
the user's visibility choice) stays put for when the category comes back.
"""

from __future__ import annotations

from collections.abc import Iterable

from schema.categories import CategoryTag
from schema.registry import DEFAULT_TAG, part_field_names


class OrderingStore:

    def __init__(self, names: Iterable[str] = ()):
        self._entries: dict[str, bool] = {}     # name → visible, in order
        self.merge(names)

    @classmethod
    def for_category(cls, tag: str | CategoryTag = DEFAULT_TAG) -> "OrderingStore":
        """Fresh session state: every field of the category, visible."""
        return cls(part_field_names(tag))

    # ── Queries ────────────────────────────────────────────────────────

    def visible_and_ordered_fields(self, scope: Iterable[str]) -> list[str]:
        """Visible names within scope, in recorded order."""
        scope = set(scope)
        return [n for n, visible in self._entries.items()
                if visible and n in scope]

    def entries(self, scope: Iterable[str] | None = None) -> list[tuple[str, bool]]:
        """(name, visible) pairs, optionally limited to scope."""
        if scope is None:
            return list(self._entries.items())
        scope = set(scope)
        return [(n, v) for n, v in self._entries.items() if n in scope]

    def is_visible(self, name: str) -> bool:
        return self._entries.get(name, False)

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    # ── Mutations ──────────────────────────────────────────────────────

    def merge(self, names: Iterable[str]) -> list[str]:
        """Append unseen names as visible.  Returns the names appended."""
        appended = []
        for name in names:
            if name not in self._entries:
                self._entries[name] = True
                appended.append(name)
        return appended

    def set_visibility(self, name: str, visible: bool) -> None:
        if name not in self._entries:
            raise KeyError(name)
        self._entries[name] = bool(visible)

    def set_order(self, names: Iterable[str]) -> None:
        """
        Move the listed names to the front in the given order.  Entries
        not listed follow in their previous relative order; names never
        seen before are added visible.
        """
        reordered: dict[str, bool] = {}
        for name in names:
            reordered[name] = self._entries.get(name, True)
        for name, visible in self._entries.items():
            reordered.setdefault(name, visible)
        self._entries = reordered

    def to_dict(self) -> dict:
        return {"entries": [{"name": n, "visible": v}
                            for n, v in self._entries.items()]}
