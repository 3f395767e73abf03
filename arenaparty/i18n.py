"""Interface text in the player's chosen language."""

from __future__ import annotations

import enum
import logging
import os
import plistlib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from arenaparty.userdata import UserDefaults

_log = logging.getLogger(__name__)


class Language(enum.IntEnum):
    ENGLISH = 0
    CHINESE = 1


_LANGUAGE_FILES = {
    Language.ENGLISH: Path("language") / "English.xml",
    Language.CHINESE: Path("language") / "Chinese.xml",
}


@dataclass(frozen=True)
class Translations:
    """A table of interface strings keyed by their English identifiers."""

    entries: Mapping[str, str] = field(default_factory=dict)

    def text(self, key: str) -> str:
        try:
            return self.entries[key]
        except KeyError:
            raise KeyError(f"no translation for {key!r}") from None

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)


def load_translations(path: str | os.PathLike[str]) -> Translations:
    """Read a property-list dictionary of strings."""
    with open(path, "rb") as fh:
        data = plistlib.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a dictionary at the top level")
    return Translations({str(key): str(value) for key, value in data.items()})


def translations_for(store: UserDefaults, resource_dir: str | os.PathLike[str]) -> Translations:
    """Load the translations for the language stored under ``language``."""
    code = store.get_int("language")
    try:
        language = Language(code)
    except ValueError:
        raise ValueError(f"no language file for language code {code}") from None
    path = Path(resource_dir) / _LANGUAGE_FILES[language]
    translations = load_translations(path)
    _log.debug("%s translations loaded from %s", language.name.title(), path)
    return translations