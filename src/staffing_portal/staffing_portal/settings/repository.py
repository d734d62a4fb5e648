from __future__ import annotations

from typing import Any, Mapping

from ..core.constants import SETTINGS_COLLECTION, SETTINGS_DOC_ID
from ..documents.store import DocumentStore


class SettingsRepository:
    """The single ``settings/appSettings`` document."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def load(self) -> dict[str, Any]:
        doc = self._store.get(SETTINGS_COLLECTION, SETTINGS_DOC_ID)
        return dict(doc.data) if doc else {}

    def merge(self, changes: Mapping[str, Any]) -> None:
        self._store.set(SETTINGS_COLLECTION, SETTINGS_DOC_ID, dict(changes), merge=True)
