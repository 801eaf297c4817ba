"""Import smoke tests."""


def test_import_settings():
    from welcome.core.config import settings

    assert settings is not None


def test_import_app():
    from welcome.api.main import app

    assert app is not None
    assert app.state.catalog.languages == ("en", "hi")
