"""
Welcome View

Renders the welcome heading and one language switch per supported
language. The view subscribes to its Translator and redraws as soon as
the active language changes.
"""

from dataclasses import asdict, dataclass
from typing import Any, Mapping

from jinja2 import Environment

from welcome.i18n.messages import LANGUAGE_NAMES
from welcome.i18n.translator import Translator


@dataclass
class LanguageControl:
    """One language switch button."""

    language: str
    label: str
    active: bool = False
    style: str | None = None


class WelcomeView:
    template_name = "welcome.html"

    def __init__(
        self,
        translator: Translator,
        environment: Environment,
        language_names: Mapping[str, str] = LANGUAGE_NAMES,
    ):
        self.translator = translator
        self.language_names = language_names
        self._template = environment.get_template(self.template_name)
        self._html: str | None = None
        self.render_count = 0
        self._unsubscribe = translator.subscribe(self._on_language_changed)

    def controls(self) -> list[LanguageControl]:
        label = self.translator.translate("change_language")
        controls = []
        for index, language in enumerate(self.translator.languages):
            name = self.language_names.get(language, language)
            controls.append(
                LanguageControl(
                    language=language,
                    label=f"{label} ({name})",
                    active=language == self.translator.language,
                    style="margin: 10px" if index > 0 else None,
                )
            )
        return controls

    def state(self) -> dict[str, Any]:
        """View model shared by the HTML template and the JSON API."""
        return {
            "language": self.translator.language,
            "heading": self.translator.translate("welcome_message"),
            "controls": [asdict(c) for c in self.controls()],
        }

    def render(self) -> str:
        if self._html is None:
            self._html = self._template.render(view=self.state())
            self.render_count += 1
        return self._html

    def activate(self, language: str) -> bool:
        """Handle a language control being triggered."""
        return self.translator.change_language(language)

    def _on_language_changed(self, language: str) -> None:
        # Rebuilt by the next render(); JSON callers only need state()
        self._html = None

    def close(self) -> None:
        self._unsubscribe()
