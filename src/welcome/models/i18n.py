"""
Localization Models

Pydantic models for the language switching API.
"""

from pydantic import BaseModel, Field


class LanguageInfo(BaseModel):
    """A supported language"""

    code: str = Field(..., description="Language code")
    name: str = Field(..., description="Language name shown on its switch")
    default: bool = Field(default=False, description="Whether this is the default")


class LanguagesResponse(BaseModel):
    """Supported languages"""

    default_language: str
    languages: list[LanguageInfo]


class DictionaryResponse(BaseModel):
    """All messages of one language"""

    language: str
    messages: dict[str, str]


class LanguageSwitchRequest(BaseModel):
    """Request to change the active language"""

    language: str = Field(
        ...,
        description="Requested language code (unsupported codes are ignored)",
    )


class LanguageControlItem(BaseModel):
    """One language switch as rendered"""

    language: str
    label: str
    active: bool = False
    style: str | None = None


class ViewState(BaseModel):
    """Rendered welcome view"""

    language: str
    heading: str
    controls: list[LanguageControlItem]


class LanguageSwitchResponse(BaseModel):
    """Result of a language switch"""

    accepted: bool = Field(..., description="False if the language is unsupported")
    view: ViewState
