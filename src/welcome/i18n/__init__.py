from welcome.i18n.catalog import (
    Catalog,
    CatalogError,
    MissingKeyPolicy,
    MissingTranslationError,
    build_catalog,
)
from welcome.i18n.messages import LANGUAGE_NAMES, RESOURCES
from welcome.i18n.translator import Translator

__all__ = [
    "Catalog",
    "CatalogError",
    "MissingKeyPolicy",
    "MissingTranslationError",
    "Translator",
    "build_catalog",
    "LANGUAGE_NAMES",
    "RESOURCES",
]
