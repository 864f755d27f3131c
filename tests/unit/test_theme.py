"""
Tests for the theme context and toggle.

Checked behaviour:
1. init/read/write/teardown lifecycle over an injected storage mapping
2. Invalid or missing stored values fall back to the default
3. Toggle flips between light and dark and persists
"""

import pytest

from config import config
from portal.components.theme_toggle import THEME_ICONS, ThemeToggle, apply_theme, toggle_theme, toggle_title
from portal.theme import (
    DARK,
    LIGHT,
    ThemeContext,
    ThemeContextError,
    other_theme,
    theme_class,
)


class TestThemeContextLifecycle:

    def test_init_uses_default_and_persists_it(self):
        storage = {}
        context = ThemeContext(storage)

        assert context.init() == LIGHT
        assert storage == {"theme": LIGHT}

    def test_init_reads_stored_theme(self):
        context = ThemeContext({"theme": DARK})
        assert context.init() == DARK
        assert context.read() == DARK

    def test_init_replaces_invalid_stored_value(self):
        storage = {"theme": "sepia"}
        context = ThemeContext(storage, default=DARK)

        assert context.init() == DARK
        assert storage["theme"] == DARK

    def test_custom_storage_key(self):
        storage = {"portal-theme": DARK}
        context = ThemeContext(storage, storage_key="portal-theme")
        assert context.init() == DARK

    def test_read_before_init_raises(self):
        with pytest.raises(ThemeContextError):
            ThemeContext({}).read()

    def test_write_before_init_raises(self):
        with pytest.raises(ThemeContextError):
            ThemeContext({}).write(DARK)

    def test_teardown_keeps_storage(self):
        storage = {}
        context = ThemeContext(storage)
        context.init()
        context.write(DARK)
        context.teardown()

        assert not context.active
        assert storage == {"theme": DARK}
        with pytest.raises(ThemeContextError):
            context.read()

    def test_context_manager(self):
        storage = {}
        with ThemeContext(storage) as context:
            assert context.active
            context.toggle()
        assert not context.active
        assert storage["theme"] == DARK

    def test_invalid_default_rejected(self):
        with pytest.raises(ValueError):
            ThemeContext({}, default="blue")


class TestThemeContextWrites:

    def test_write_persists(self):
        storage = {}
        context = ThemeContext(storage)
        context.init()

        assert context.write(DARK) == DARK
        assert context.read() == DARK
        assert storage["theme"] == DARK

    def test_write_invalid_theme_rejected(self):
        storage = {}
        context = ThemeContext(storage)
        context.init()

        with pytest.raises(ValueError):
            context.write("system")
        assert context.read() == LIGHT
        assert storage["theme"] == LIGHT

    def test_toggle_flips_both_ways(self):
        context = ThemeContext({})
        context.init()

        assert context.toggle() == DARK
        assert context.toggle() == LIGHT


class TestThemeHelpers:

    def test_other_theme(self):
        assert other_theme(LIGHT) == DARK
        assert other_theme(DARK) == LIGHT

    def test_theme_class(self):
        assert "dark" in theme_class(DARK).split()
        assert "light" in theme_class(LIGHT).split()

    def test_theme_class_rejects_unknown(self):
        with pytest.raises(ValueError):
            theme_class("neon")


class TestThemeToggle:

    def test_light_theme_offers_dark_mode(self):
        button = ThemeToggle(LIGHT)
        assert button.title == "Switch to dark mode"
        assert button.children.className == THEME_ICONS[LIGHT]

    def test_dark_theme_offers_light_mode(self):
        button = ThemeToggle(DARK)
        assert button.title == toggle_title(DARK) == "Switch to light mode"
        assert button.children.className == "fas fa-sun"


class TestThemeCallbacks:
    """Toggle and apply callbacks called with store data."""

    def test_toggle_flips_stored_theme(self):
        assert toggle_theme(1, {"theme": LIGHT}) == {"theme": DARK}
        assert toggle_theme(2, {"theme": DARK}) == {"theme": LIGHT}

    def test_toggle_with_empty_store_starts_from_default(self):
        assert toggle_theme(1, None) == {"theme": DARK}

    def test_apply_mirrors_theme_onto_page(self):
        root_class, icon_class, title = apply_theme({"theme": DARK})
        assert root_class == theme_class(DARK)
        assert icon_class == "fas fa-sun"
        assert title == "Switch to light mode"

    def test_misconfigured_default_is_logged_and_raised(self, monkeypatch, caplog):
        monkeypatch.setattr(config, "DEFAULT_THEME", "sepia")

        with pytest.raises(ValueError):
            toggle_theme(1, {"theme": LIGHT})

        errors = [r for r in caplog.records if r.levelname == "ERROR"]
        assert errors[0].getMessage().startswith("ERROR in toggle_theme")
        assert errors[0].exc_info is not None
