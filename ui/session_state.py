"""
ui.session_state - Per-browser-session UI state.

A UiSession owns everything the single-page UI keeps between requests:
the category picked in the filter panel, the ordering store, the
create-form edit buffer, the parts ticked for comparison and the
favorites.  Route handlers receive it explicitly through
current_ui_session(); nothing in property_engine knows it exists.

Sessions live for the lifetime of the process in a SessionRegistry
held in app.extensions, keyed by a random id in the Flask cookie.
"""

from __future__ import annotations

import logging
import secrets
import threading
from collections import OrderedDict
from dataclasses import dataclass, field

from flask import current_app, session

import config
from property_engine.buffer import EditBuffer
from property_engine.differ import CategorySwitch, switch_category
from property_engine.ordering import OrderingStore
from schema.categories import CategoryTag
from schema.registry import DEFAULT_TAG, TagLookup, lookup_tag, part_field_names

EXTENSION_KEY = "pcpc_sessions"
COOKIE_KEY = "ui_sid"

logger = logging.getLogger(__name__)


@dataclass
class UiSession:
    selected_category: CategoryTag = DEFAULT_TAG
    ordering: OrderingStore = field(default_factory=OrderingStore.for_category)
    edit_buffer: EditBuffer = field(default_factory=EditBuffer.fresh)
    selected_parts: list[str] = field(default_factory=list)
    favorites: list[str] = field(default_factory=list)

    # ── Filter panel ───────────────────────────────────────────────────

    def scope(self) -> list[str]:
        """Field names of the category selected in the filter panel."""
        return part_field_names(self.selected_category)

    def select_category(self, text: str) -> TagLookup:
        lookup = lookup_tag(text)
        self.selected_category = lookup.tag
        self.ordering.merge(part_field_names(lookup.tag))
        return lookup

    # ── Create form ────────────────────────────────────────────────────

    def switch_edit_category(self, text: str) -> CategorySwitch:
        result = switch_category(self.edit_buffer, text, self.ordering)
        self.edit_buffer = result.buffer
        return result

    def reset_edit_buffer(self) -> None:
        self.edit_buffer = EditBuffer.fresh(self.edit_buffer.category)

    # ── Part marks ─────────────────────────────────────────────────────

    @staticmethod
    def _mark(marks: list[str], part_id: str, on: bool) -> None:
        if on and part_id not in marks:
            marks.append(part_id)
        elif not on and part_id in marks:
            marks.remove(part_id)

    def set_selected(self, part_id: str, selected: bool) -> None:
        self._mark(self.selected_parts, part_id, selected)

    def set_favorite(self, part_id: str, favorite: bool) -> None:
        self._mark(self.favorites, part_id, favorite)


class SessionRegistry:
    """
    Thread-safe map of session id → UiSession, capped at `limit`.
    The least recently used session is dropped when a new one would
    exceed the cap; its browser starts over with a fresh UiSession.
    """

    def __init__(self, limit: int):
        if limit < 1:
            raise ValueError(f"session limit must be positive, got {limit}")
        self.limit = limit
        self._lock = threading.Lock()
        self._sessions: OrderedDict[str, UiSession] = OrderedDict()

    def get(self, sid: str) -> UiSession:
        with self._lock:
            ui = self._sessions.get(sid)
            if ui is not None:
                self._sessions.move_to_end(sid)
                return ui
            ui = self._sessions[sid] = UiSession()
            while len(self._sessions) > self.limit:
                evicted, _ = self._sessions.popitem(last=False)
                logger.debug("Evicted UI session %s", evicted)
            return ui

    def drop(self, sid: str) -> None:
        with self._lock:
            self._sessions.pop(sid, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, sid: str) -> bool:
        with self._lock:
            return sid in self._sessions


def init_sessions(app) -> SessionRegistry:
    registry = SessionRegistry(config.UI_SESSION_LIMIT)
    app.extensions[EXTENSION_KEY] = registry
    return registry


def current_ui_session() -> UiSession:
    """UiSession for the requesting browser; issues a cookie id if needed."""
    sid = session.get(COOKIE_KEY)
    if not sid:
        sid = session[COOKIE_KEY] = secrets.token_hex(16)
    return current_app.extensions[EXTENSION_KEY].get(sid)
