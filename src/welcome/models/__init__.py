"""
Models package initialization
"""

from welcome.models.i18n import (
    DictionaryResponse,
    LanguageControlItem,
    LanguageInfo,
    LanguagesResponse,
    LanguageSwitchRequest,
    LanguageSwitchResponse,
    ViewState,
)

__all__ = [
    "DictionaryResponse",
    "LanguageControlItem",
    "LanguageInfo",
    "LanguagesResponse",
    "LanguageSwitchRequest",
    "LanguageSwitchResponse",
    "ViewState",
]
