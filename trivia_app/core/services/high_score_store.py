"""Durable key-value storage used for the persisted high score."""

from __future__ import annotations

from typing import Protocol

from PySide6.QtCore import QSettings

from trivia_app.constants.about import APP_NAME, APP_ORGANIZATION


class KeyValueStore(Protocol):
    """Minimal string key-value capability."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryStore:
    """Dictionary-backed store for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class QSettingsStore:
    """Store backed by the platform's native Qt settings location."""

    def __init__(self, settings: QSettings | None = None) -> None:
        self._settings = settings or QSettings(APP_ORGANIZATION, APP_NAME)

    def get(self, key: str) -> str | None:
        value = self._settings.value(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)
        self._settings.sync()
