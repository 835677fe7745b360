from __future__ import annotations

import json
from pathlib import Path
from typing import Any

_LOCALES_DIR = Path(__file__).resolve().parent / "locales"
_FALLBACK_LOCALE = "en"


class JsonMessageCatalog:
    """Operator-facing text loaded from ``locales/<locale>.json``.

    Unknown locales and missing keys fall back to English; a key missing
    from English too is returned as-is so a typo never aborts a run.
    """

    def __init__(self, locale: str = _FALLBACK_LOCALE, *, locales_dir: str | None = None) -> None:
        directory = Path(locales_dir) if locales_dir else _LOCALES_DIR
        self._fallback = self._load(directory / f"{_FALLBACK_LOCALE}.json")
        path = directory / f"{locale}.json"
        if locale != _FALLBACK_LOCALE and path.is_file():
            self._messages = self._load(path)
            self._locale = locale
        else:
            self._messages = self._fallback
            self._locale = _FALLBACK_LOCALE

    @property
    def locale(self) -> str:
        return self._locale

    def text(self, key: str, **params: Any) -> str:
        template = self._lookup(key)
        if not isinstance(template, str):
            return key
        try:
            return template.format(**params)
        except (KeyError, IndexError):
            return template

    def tokens(self, key: str) -> tuple[str, ...]:
        value = self._lookup(key)
        if isinstance(value, str):
            return (value,)
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        return ()

    def _lookup(self, key: str) -> Any:
        if key in self._messages:
            return self._messages[key]
        return self._fallback.get(key)

    @staticmethod
    def _load(path: Path) -> dict[str, Any]:
        if not path.is_file():
            return {}
        return json.loads(path.read_text(encoding="utf-8"))
