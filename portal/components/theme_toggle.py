"""
Theme toggle for the Meridian Portal.

The preference is kept in a browser-local ``dcc.Store`` and read and
written through a ``ThemeContext`` built per callback invocation.
"""

import logging
from typing import Any, Dict, Optional, Tuple
from dash import html, dcc, callback, Input, Output, State

from config import config
from portal.theme import ThemeContext, ThemeContextError, other_theme, theme_class, validate_theme
from portal.utils.logging_utils import log_callback_trigger, log_error_with_context

logger = logging.getLogger(__name__)

THEME_STORE_ID = "theme-store"
THEME_TOGGLE_ID = "theme-toggle"
THEME_ICON_ID = "theme-toggle-icon"
PAGE_ROOT_ID = "page-root"

THEME_ICONS = {
    "dark": "fas fa-sun",
    "light": "fas fa-moon",
}


def toggle_title(theme: str) -> str:
    return f"Switch to {other_theme(theme)} mode"


def ThemeToggle(theme: Optional[str] = None) -> html.Button:
    """
    Create the light/dark toggle button.

    Args:
        theme: Theme shown before the stored preference is applied

    Returns:
        Icon button component
    """
    theme = validate_theme(theme or config.DEFAULT_THEME)
    return html.Button(
        html.I(id=THEME_ICON_ID, className=THEME_ICONS[theme]),
        id=THEME_TOGGLE_ID,
        n_clicks=0,
        title=toggle_title(theme),
        className="btn btn-outline-secondary btn-sm",
        **{"aria-label": "Toggle theme"}
    )


def ThemeStore() -> dcc.Store:
    """Browser-local store holding the theme preference."""
    return dcc.Store(
        id=THEME_STORE_ID,
        storage_type="local",
        data={config.THEME_STORAGE_KEY: config.DEFAULT_THEME}
    )


def _context(data: Optional[Dict[str, Any]]) -> Tuple[ThemeContext, Dict[str, Any]]:
    storage = dict(data or {})
    context = ThemeContext(storage, storage_key=config.THEME_STORAGE_KEY, default=config.DEFAULT_THEME)
    return context, storage


@callback(
    Output(THEME_STORE_ID, "data"),
    Input(THEME_TOGGLE_ID, "n_clicks"),
    State(THEME_STORE_ID, "data"),
    prevent_initial_call=True
)
def toggle_theme(n_clicks, data):
    """Flip the stored theme."""
    try:
        context, storage = _context(data)
        with context:
            theme = context.toggle()
    except (ValueError, ThemeContextError) as e:
        log_error_with_context(e, "toggle_theme", {"data": data})
        raise
    log_callback_trigger("toggle_theme", {"theme": theme})
    return storage


@callback(
    [Output(PAGE_ROOT_ID, "className"),
     Output(THEME_ICON_ID, "className"),
     Output(THEME_TOGGLE_ID, "title")],
    Input(THEME_STORE_ID, "data")
)
def apply_theme(data):
    """Mirror the stored theme onto the page root and the toggle."""
    context, _ = _context(data)
    with context:
        theme = context.read()
    return theme_class(theme), THEME_ICONS[theme], toggle_title(theme)
