"""Translation catalog loading and validation."""

import pytest

from welcome.i18n import RESOURCES, Catalog, CatalogError, MissingKeyPolicy


class TestBundledResources:
    def test_languages_in_order(self, catalog):
        assert catalog.languages == ("en", "hi")

    def test_every_language_has_same_keys(self):
        keys = {frozenset(table) for table in RESOURCES.values()}
        assert keys == {frozenset({"welcome_message", "change_language"})}

    def test_lookup(self, catalog):
        assert catalog.lookup("en", "welcome_message") == "Welcome to my website !"
        assert catalog.lookup("hi", "change_language") == "भाषा बदलें"

    def test_lookup_unknown(self, catalog):
        assert catalog.lookup("en", "nope") is None
        assert catalog.lookup("fr", "welcome_message") is None

    def test_has_language(self, catalog):
        assert catalog.has_language("hi")
        assert not catalog.has_language("fr")
        assert not catalog.has_language(None)


class TestImmutability:
    def test_dictionary_is_read_only(self, catalog):
        with pytest.raises(TypeError):
            catalog.dictionary("en")["welcome_message"] = "changed"

    def test_source_mutation_does_not_leak(self):
        resources = {"en": {"a": "A"}}
        catalog = Catalog(resources)
        resources["en"]["a"] = "changed"
        assert catalog.lookup("en", "a") == "A"


class TestValidation:
    def test_empty_resources(self):
        with pytest.raises(CatalogError):
            Catalog({})

    def test_key_parity_violation_names_missing_keys(self):
        resources = {
            "en": {"welcome_message": "Hi", "change_language": "Change"},
            "hi": {"welcome_message": "नमस्ते"},
        }
        with pytest.raises(CatalogError) as exc_info:
            Catalog(resources)
        assert "'hi' is missing change_language" in str(exc_info.value)

    def test_unknown_default_language(self):
        with pytest.raises(CatalogError):
            Catalog({"en": {"a": "A"}}, default_language="fr")

    def test_non_string_value(self):
        with pytest.raises(CatalogError):
            Catalog({"en": {"a": 1}})

    def test_nested_without_separator(self):
        with pytest.raises(CatalogError):
            Catalog({"en": {"messages": {"welcome": "Welcome"}}})

    def test_unknown_missing_key_policy(self):
        with pytest.raises(CatalogError):
            Catalog({"en": {"a": "A"}}, missing_key="explode")

    def test_language_table_not_a_mapping(self):
        with pytest.raises(CatalogError, match="'en' must be a mapping"):
            Catalog({"en": "Welcome"})


class TestKeySeparator:
    def test_flat_keys_keep_dots(self):
        catalog = Catalog({"en": {"messages.welcome": "Welcome"}})
        assert catalog.lookup("en", "messages.welcome") == "Welcome"

    def test_nested_tables_are_flattened(self):
        catalog = Catalog(
            {"en": {"messages": {"welcome": "Welcome", "bye": {"short": "Bye"}}}},
            key_separator=".",
        )
        assert catalog.keys == frozenset({"messages.welcome", "messages.bye.short"})
        assert catalog.lookup("en", "messages.bye.short") == "Bye"

    def test_flat_and_nested_keys_collide(self):
        with pytest.raises(CatalogError, match="defined twice"):
            Catalog(
                {"en": {"messages.welcome": "Welcome", "messages": {"welcome": "Hi"}}},
                key_separator=".",
            )


def test_policy_accepts_string(catalog):
    assert catalog.missing_key == MissingKeyPolicy.KEY
    assert Catalog(RESOURCES, missing_key="raise").missing_key == MissingKeyPolicy.RAISE
