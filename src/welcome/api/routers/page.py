"""Welcome UI Router - HTML page and the no-JavaScript language switch."""

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from welcome.core.config import settings
from welcome.api.deps import get_view, remember_language
from welcome.api.metrics import record_language_switch
from welcome.api.middleware.rate_limiter import limiter
from welcome.ui.view import WelcomeView

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
@limiter.limit(settings.RATE_LIMIT_PAGE)
async def welcome_page(
    request: Request,
    lang: str | None = None,
    view: WelcomeView = Depends(get_view),
):
    """Welcome Page"""
    resp = HTMLResponse(view.render())
    if lang is not None and lang == view.translator.language:
        remember_language(resp, lang)
    return resp


@router.post("/language")
@limiter.limit(settings.RATE_LIMIT_SWITCH)
async def switch_language(
    request: Request,
    language: str = Form(...),
    view: WelcomeView = Depends(get_view),
):
    """Form target of the language buttons; redirects back to the page."""
    accepted = view.activate(language)
    record_language_switch(language, accepted)

    resp = RedirectResponse(url="/", status_code=303)
    if accepted:
        remember_language(resp, view.translator.language)
    return resp
