"""
Localization API Router

JSON endpoints used by the page script to switch language in place.
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from welcome.core.config import settings
from welcome.i18n import LANGUAGE_NAMES, Catalog
from welcome.api.deps import get_catalog, get_view, remember_language
from welcome.api.metrics import record_language_switch
from welcome.api.middleware.rate_limiter import limiter
from welcome.models.i18n import (
    DictionaryResponse,
    LanguageInfo,
    LanguagesResponse,
    LanguageSwitchRequest,
    LanguageSwitchResponse,
    ViewState,
)
from welcome.ui.view import WelcomeView

router = APIRouter()


@router.get("/i18n/languages", response_model=LanguagesResponse)
async def list_languages(catalog: Catalog = Depends(get_catalog)):
    """Supported languages, in display order"""
    return LanguagesResponse(
        default_language=catalog.default_language,
        languages=[
            LanguageInfo(
                code=code,
                name=LANGUAGE_NAMES.get(code, code),
                default=code == catalog.default_language,
            )
            for code in catalog.languages
        ],
    )


@router.post("/i18n/language", response_model=LanguageSwitchResponse)
@limiter.limit(settings.RATE_LIMIT_SWITCH)
async def switch_language(
    request: Request,
    body: LanguageSwitchRequest,
    view: WelcomeView = Depends(get_view),
):
    """
    Change the visitor's language and return the redrawn view.

    An unsupported language is ignored: the response carries
    accepted=false and the unchanged view.
    """
    accepted = view.activate(body.language)
    record_language_switch(body.language, accepted)

    payload = LanguageSwitchResponse(accepted=accepted, view=ViewState(**view.state()))
    resp = JSONResponse(content=payload.model_dump())
    if accepted:
        remember_language(resp, view.translator.language)
    return resp


@router.get("/i18n/{language}", response_model=DictionaryResponse)
async def get_dictionary(language: str, catalog: Catalog = Depends(get_catalog)):
    """All messages of one language"""
    if not catalog.has_language(language):
        raise HTTPException(status_code=404, detail=f"Unsupported language: {language}")
    return DictionaryResponse(
        language=language, messages=dict(catalog.dictionary(language))
    )
