"""Message catalog for user-visible strings, one JSON file per locale."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

LOCALES_DIR = Path(__file__).with_name("locales")


class I18nService:
    def __init__(self, *, locales_path: str | Path | None = None, default_locale: str = "en") -> None:
        self.locales_path = Path(locales_path or LOCALES_DIR)
        self.default_locale = _normalize(default_locale)

    def gettext(self, key: str, *, locale: str | None = None, **kwargs: Any) -> str:
        template = self._resolve(key, _normalize(locale) if locale else self.default_locale)
        if not kwargs:
            return template
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError):
            # Catalog entry and caller disagree on placeholders; show the raw template.
            return template

    def _resolve(self, key: str, locale: str) -> str:
        for candidate in (locale, self.default_locale):
            text = self._catalog(candidate).get(key)
            if text is not None:
                return text
        return key

    @lru_cache(maxsize=16)
    def _catalog(self, locale: str) -> dict[str, str]:
        file_path = self.locales_path / f"{locale}.json"
        if not file_path.exists():
            return {}
        with file_path.open("r", encoding="utf-8") as fp:
            return json.load(fp)


def _normalize(locale: str) -> str:
    # "en-US" / "en_US" both resolve to the "en" catalog
    return locale.replace("_", "-").split("-", 1)[0].lower()


__all__ = ["I18nService", "LOCALES_DIR"]
