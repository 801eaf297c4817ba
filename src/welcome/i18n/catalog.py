"""
Translation Catalog

Read-only dictionary set loaded once at startup. Validates that every
locale defines the same message keys so a broken resource table fails
the boot instead of leaking placeholders into rendered pages.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Resource table is not a valid translation configuration."""


class MissingTranslationError(KeyError):
    """Message key has no translation in the active language."""

    def __init__(self, language: str, key: str):
        super().__init__(key)
        self.language = language
        self.key = key

    def __str__(self) -> str:
        return f"No translation for '{self.key}' in language '{self.language}'"


class MissingKeyPolicy(str, Enum):
    """What translate() does with an unknown message key"""

    KEY = "key"  # render the key itself
    RAISE = "raise"


def _flatten(
    language: str,
    table: Mapping[str, Any],
    separator: str | None,
    prefix: str = "",
    flat: dict[str, str] | None = None,
) -> dict[str, str]:
    if flat is None:
        flat = {}
    for key, value in table.items():
        full_key = f"{prefix}{separator}{key}" if prefix else key
        if isinstance(value, Mapping):
            if separator is None:
                raise CatalogError(
                    f"Nested messages under '{full_key}' in language '{language}' "
                    "require a key separator"
                )
            _flatten(language, value, separator, full_key, flat)
        elif isinstance(value, str):
            # "a.b" and {"a": {"b": ...}} collide once flattened
            if full_key in flat:
                raise CatalogError(
                    f"Message '{full_key}' is defined twice in language '{language}'"
                )
            flat[full_key] = value
        else:
            raise CatalogError(
                f"Message '{full_key}' in language '{language}' must be a string, "
                f"got {type(value).__name__}"
            )
    return flat


class Catalog:
    """
    Immutable set of per-language dictionaries.

    Options mirror the usual localization-library init flags:
    - key_separator: None keeps keys flat; a separator flattens nested tables
    - escape_value: HTML-escape interpolated values
    - missing_key: fallback behavior for unknown keys
    """

    def __init__(
        self,
        resources: Mapping[str, Mapping[str, Any]],
        default_language: str = "en",
        key_separator: str | None = None,
        escape_value: bool = False,
        missing_key: MissingKeyPolicy | str = MissingKeyPolicy.KEY,
    ):
        if not resources:
            raise CatalogError("At least one language must be configured")

        self.key_separator = key_separator
        self.escape_value = escape_value
        try:
            self.missing_key = MissingKeyPolicy(missing_key)
        except ValueError:
            raise CatalogError(f"Unknown missing-key policy: '{missing_key}'")

        for language, table in resources.items():
            if not isinstance(table, Mapping):
                raise CatalogError(
                    f"Messages for language '{language}' must be a mapping, "
                    f"got {type(table).__name__}"
                )

        self._dictionaries: Mapping[str, Mapping[str, str]] = MappingProxyType(
            {
                language: MappingProxyType(_flatten(language, table, key_separator))
                for language, table in resources.items()
            }
        )
        self._keys = self._check_parity()

        if default_language not in self._dictionaries:
            raise CatalogError(
                f"Default language '{default_language}' is not configured. "
                f"Available: {', '.join(self.languages)}"
            )
        self.default_language = default_language

    def _check_parity(self) -> frozenset[str]:
        """Every language must define the same message keys."""
        all_keys = frozenset().union(*(d.keys() for d in self._dictionaries.values()))
        problems = []
        for language, dictionary in self._dictionaries.items():
            missing = sorted(all_keys - dictionary.keys())
            if missing:
                problems.append(f"'{language}' is missing {', '.join(missing)}")
        if problems:
            raise CatalogError("Incomplete translations: " + "; ".join(problems))
        return all_keys

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(self._dictionaries)

    @property
    def keys(self) -> frozenset[str]:
        return self._keys

    def has_language(self, language: str | None) -> bool:
        return language in self._dictionaries

    def dictionary(self, language: str) -> Mapping[str, str]:
        """Read-only dictionary for a language. Raises KeyError if unknown."""
        return self._dictionaries[language]

    def lookup(self, language: str, key: str) -> str | None:
        dictionary = self._dictionaries.get(language)
        if dictionary is None:
            return None
        return dictionary.get(key)


def build_catalog(settings) -> Catalog:
    """Build the application catalog from the bundled resources."""
    from welcome.i18n.messages import RESOURCES

    catalog = Catalog(
        RESOURCES,
        default_language=settings.DEFAULT_LANGUAGE,
        key_separator=settings.KEY_SEPARATOR,
        escape_value=settings.ESCAPE_VALUE,
        missing_key=settings.MISSING_KEY_POLICY,
    )
    logger.info(
        "Translation catalog loaded",
        extra={
            "languages": list(catalog.languages),
            "keys": len(catalog.keys),
            "default_language": catalog.default_language,
        },
    )
    return catalog
