"""Welcome view rendering and redraw on language change."""

import pytest

from welcome.i18n import Catalog, MissingTranslationError, Translator
from welcome.ui.view import WelcomeView


@pytest.fixture
def view(translator, template_env):
    view = WelcomeView(translator, template_env)
    yield view
    view.close()


def test_state_in_english(view):
    state = view.state()
    assert state["language"] == "en"
    assert state["heading"] == "Welcome to my website !"
    labels = [c["label"] for c in state["controls"]]
    assert labels == ["Change Language (English)", "Change Language (हिन्दी)"]


def test_second_control_has_margin(view):
    controls = view.controls()
    assert controls[0].style is None
    assert controls[1].style == "margin: 10px"


def test_active_control(view):
    assert [c.active for c in view.controls()] == [True, False]
    view.activate("hi")
    assert [c.active for c in view.controls()] == [False, True]


def test_render_html(view):
    html = view.render()
    assert '<html lang="en">' in html
    assert "<h1 id=\"welcome-message\">Welcome to my website !</h1>" in html
    assert 'value="hi"' in html
    assert 'style="margin: 10px"' in html


def test_render_is_cached(view):
    first = view.render()
    assert view.render() is first
    assert view.render_count == 1


def test_redraws_on_language_change(view):
    view.render()
    view.activate("hi")
    # invalidated only; the template runs again on the next render()
    assert view.render_count == 1
    html = view.render()
    assert "मेरी वेबसाइट पर आपका स्वागत है !" in html
    assert "भाषा बदलें (English)" in html
    assert view.render_count == 2
    view.render()
    assert view.render_count == 2


def test_switch_without_render_skips_template(view):
    view.activate("hi")
    assert view.state()["heading"] == "मेरी वेबसाइट पर आपका स्वागत है !"
    assert view.render_count == 0


def test_unknown_language_does_not_redraw(view):
    view.render()
    assert view.activate("fr") is False
    assert view.render_count == 1
    assert "Welcome to my website !" in view.render()


def test_close_stops_redraws(view):
    html = view.render()
    view.close()
    view.translator.change_language("hi")
    assert view.render() is html
    assert view.render_count == 1


def test_switch_under_raise_policy_fails_on_render_only(template_env):
    strict = Catalog(
        {"en": {"welcome_message": "Hi"}, "hi": {"welcome_message": "नमस्ते"}},
        missing_key="raise",
    )
    view = WelcomeView(Translator(strict), template_env)
    assert view.activate("hi") is True
    assert view.translator.language == "hi"
    with pytest.raises(MissingTranslationError):
        view.render()


def test_output_is_escaped(template_env):
    unsafe = Catalog(
        {
            "en": {
                "welcome_message": "<script>alert(1)</script>",
                "change_language": "Change",
            }
        }
    )
    view = WelcomeView(Translator(unsafe), template_env)
    html = view.render()
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html
