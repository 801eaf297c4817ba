"""
API Dependencies

Dependency injection for FastAPI routes. The catalog is owned by the
application; each request gets its own Translator and view.
"""

from typing import Iterator

from fastapi import Depends, Request, Response

from welcome.api.templates import templates
from welcome.core.config import Environment, settings
from welcome.i18n import Catalog, Translator
from welcome.ui.view import WelcomeView


def detect_language(
    catalog: Catalog,
    lang_param: str | None,
    lang_cookie: str | None,
    accept_language: str | None,
) -> str:
    """Detect language priority: Query > Cookie > Header > Default"""
    if catalog.has_language(lang_param):
        return lang_param
    if catalog.has_language(lang_cookie):
        return lang_cookie
    if accept_language:
        # Primary entry only, e.g. "hi-IN,hi;q=0.9,en;q=0.8" -> "hi"
        primary = accept_language.split(",")[0].split(";")[0].strip().lower()
        tag = primary.split("-")[0]
        if catalog.has_language(tag):
            return tag
    return catalog.default_language


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def get_translator(
    request: Request,
    lang: str | None = None,
    catalog: Catalog = Depends(get_catalog),
) -> Translator:
    language = detect_language(
        catalog,
        lang,
        request.cookies.get(settings.LANG_COOKIE_NAME),
        request.headers.get("accept-language"),
    )
    return Translator(catalog, language)


def get_view(translator: Translator = Depends(get_translator)) -> Iterator[WelcomeView]:
    view = WelcomeView(translator, templates.env)
    try:
        yield view
    finally:
        view.close()


def remember_language(response: Response, language: str) -> None:
    """Store the active language in a browser-session cookie (no max_age)."""
    response.set_cookie(
        key=settings.LANG_COOKIE_NAME,
        value=language,
        httponly=True,
        samesite="lax",
        secure=settings.ENVIRONMENT == Environment.PRODUCTION,
    )
