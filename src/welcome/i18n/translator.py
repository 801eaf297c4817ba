"""
Translator

Active-language cell over a shared Catalog. One Translator exists per
visitor session; views subscribe to it and redraw on language change.
"""

import html
import logging
from typing import Callable

from welcome.i18n.catalog import Catalog, MissingKeyPolicy, MissingTranslationError

logger = logging.getLogger(__name__)

LanguageListener = Callable[[str], None]

# (language, key) pairs already reported, so a missing key warns once per process
_reported_missing: set[tuple[str, str]] = set()


class _KeepMissing(dict):
    """format_map helper that leaves unknown placeholders as-is."""

    def __missing__(self, name: str) -> str:
        return "{" + name + "}"


class Translator:
    """
    Translation lookup under a single active language.

    - translate() never fails under the default policy: unknown keys come
      back as the key itself
    - change_language() ignores unknown codes and keeps the current language
    - subscribers are called synchronously after every actual change
    """

    def __init__(self, catalog: Catalog, language: str | None = None):
        self.catalog = catalog
        self._language = (
            language if catalog.has_language(language) else catalog.default_language
        )
        self._listeners: list[LanguageListener] = []

    @property
    def language(self) -> str:
        return self._language

    @property
    def languages(self) -> tuple[str, ...]:
        return self.catalog.languages

    def exists(self, key: str) -> bool:
        return self.catalog.lookup(self._language, key) is not None

    def translate(self, key: str, **values) -> str:
        text = self.catalog.lookup(self._language, key)
        if text is None:
            return self._missing(key)
        if not values:
            return text
        if self.catalog.escape_value:
            values = {name: html.escape(str(v)) for name, v in values.items()}
        return text.format_map(_KeepMissing(values))

    t = translate

    def _missing(self, key: str) -> str:
        if self.catalog.missing_key == MissingKeyPolicy.RAISE:
            raise MissingTranslationError(self._language, key)
        if (self._language, key) not in _reported_missing:
            _reported_missing.add((self._language, key))
            logger.warning(
                "Missing translation, rendering key",
                extra={"language": self._language, "key": key},
            )
        return key

    def change_language(self, language: str) -> bool:
        """
        Switch the active language.

        Returns False (and changes nothing) for an unsupported code.
        Switching to the current language is accepted without notifying.
        The switch stands even if a listener raises: all listeners still run
        and the first exception is re-raised afterwards.
        """
        if not self.catalog.has_language(language):
            logger.debug(
                "Ignoring unsupported language",
                extra={"requested": language, "language": self._language},
            )
            return False
        if language == self._language:
            return True

        self._language = language
        error: Exception | None = None
        for listener in list(self._listeners):
            try:
                listener(language)
            except Exception as e:
                logger.exception(
                    "Language listener failed", extra={"language": language}
                )
                if error is None:
                    error = e
        if error is not None:
            raise error
        return True

    def subscribe(self, listener: LanguageListener) -> Callable[[], None]:
        """Register a language-change listener. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
