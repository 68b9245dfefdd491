"""Preferences store interface.

Persistence is owned by the host application; the workout only needs
load/save primitives. The in-memory store backs the CLI and tests.
"""

from typing import Protocol

from loguru import logger

from plankflow.preferences.models import Preferences


class PreferencesStore(Protocol):
    def load(self) -> Preferences: ...

    def save(self, preferences: Preferences) -> None: ...


class InMemoryPreferencesStore:
    """Keeps preferences for the lifetime of the process."""

    def __init__(self, initial: Preferences | None = None) -> None:
        self._preferences = initial or Preferences()

    def load(self) -> Preferences:
        return self._preferences

    def save(self, preferences: Preferences) -> None:
        self._preferences = preferences
        logger.debug(f"Preferences saved: {preferences.model_dump()}")
