"""Error message templates and the translation hook.

Messages are looked up by category and rendered with ``{placeholder}``
substitution. The default translator performs substitution only; install
a real one with :func:`set_translator`.
"""

from __future__ import annotations

from typing import Protocol

DEFAULT_CATEGORY = "AssetPublisher"

DIRECTORY_NOT_FOUND = (
    "{class_name} - Error: Couldn't find assets to publish. Please make sure "
    'the directory "{dir_name}" exists and is readable.'
)
SYSTEM_MANAGER_NOT_FOUND = (
    "{class_name} - Error: The system asset manager could not be found."
)
NAMED_MANAGER_NOT_FOUND = (
    '{class_name} - Error: The asset manager named "{manager_name}" could not be found.'
)
OWNER_NOT_ATTACHED = (
    'AssetPublisher - Error: No owner is attached; cannot publish "{dir_name}".'
)


class Translator(Protocol):
    """Callable that renders *message* for *category* with *params*."""

    def __call__(self, category: str, message: str, params: dict[str, str]) -> str: ...


def _substitute(category: str, message: str, params: dict[str, str]) -> str:
    return message.format(**params)


_translator: Translator = _substitute


def set_translator(translator: Translator | None) -> None:
    """Install *translator*, or restore the default when None."""
    global _translator
    _translator = translator or _substitute


def translate(category: str, message: str, params: dict[str, str] | None = None) -> str:
    """Render *message* through the active translator."""
    return _translator(category, message, params or {})
