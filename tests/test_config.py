"""Test settings parsing and validation."""

from types import SimpleNamespace

import pytest

from welcome.core.config import Environment, _get_environment, _validate_required


class TestEnvironment:
    def test_required(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        with pytest.raises(RuntimeError, match="ENVIRONMENT is required"):
            _get_environment()

    def test_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "Production")
        assert _get_environment() == Environment.PRODUCTION

    def test_invalid(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "staging")
        with pytest.raises(RuntimeError, match="Invalid ENVIRONMENT"):
            _get_environment()


class TestValidateRequired:
    def test_skipped_in_tests(self):
        _validate_required(
            SimpleNamespace(ENVIRONMENT=Environment.TEST, MISSING_KEY_POLICY="bogus")
        )

    def test_rejects_unknown_policy(self):
        with pytest.raises(RuntimeError, match="MISSING_KEY_POLICY"):
            _validate_required(
                SimpleNamespace(
                    ENVIRONMENT=Environment.PRODUCTION, MISSING_KEY_POLICY="bogus"
                )
            )

    @pytest.mark.parametrize("policy", ["key", "raise"])
    def test_accepts_known_policies(self, policy):
        _validate_required(
            SimpleNamespace(ENVIRONMENT=Environment.PRODUCTION, MISSING_KEY_POLICY=policy)
        )


def test_defaults():
    from welcome.core.config import settings

    assert settings.ENVIRONMENT == Environment.TEST
    assert settings.DEFAULT_LANGUAGE == "en"
    assert settings.MISSING_KEY_POLICY == "key"
    assert settings.ESCAPE_VALUE is False
    assert settings.KEY_SEPARATOR is None
    assert settings.LANG_COOKIE_NAME == "lang"
    assert (settings.TEMPLATE_DIR / "welcome.html").exists()
