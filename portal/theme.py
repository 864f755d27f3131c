"""
Light/dark display preference for the Meridian Portal.

The preference lives in a ``ThemeContext`` created by whoever owns the
storage (a Dash store, a session, a dict in tests) and is passed in
explicitly. Formatting and table rendering never consult it.
"""

import logging
from typing import Any, MutableMapping, Optional

logger = logging.getLogger(__name__)

LIGHT = "light"
DARK = "dark"
THEMES = (LIGHT, DARK)

DEFAULT_STORAGE_KEY = "theme"

ROOT_CLASSES = {
    LIGHT: "portal-root light bg-light text-dark",
    DARK: "portal-root dark bg-dark text-light",
}


class ThemeContextError(RuntimeError):
    """Raised when a ThemeContext is used outside its init/teardown window."""
    pass


def validate_theme(theme: Any) -> str:
    if theme not in THEMES:
        raise ValueError(f"Unknown theme: {theme!r} (expected one of {THEMES})")
    return theme


def other_theme(theme: str) -> str:
    return LIGHT if validate_theme(theme) == DARK else DARK


def theme_class(theme: str) -> str:
    """CSS classes mirrored onto the page root for ``theme``."""
    return ROOT_CLASSES[validate_theme(theme)]


class ThemeContext:
    """
    Holds the current theme and persists it to a storage mapping.

    Lifecycle: ``init()`` loads the stored value (falling back to the
    default and writing it back), ``read()``/``write()``/``toggle()``
    work on the loaded value, ``teardown()`` releases it. Usable as a
    context manager.
    """

    def __init__(
        self,
        storage: MutableMapping[str, Any],
        storage_key: str = DEFAULT_STORAGE_KEY,
        default: str = LIGHT
    ):
        self.storage = storage
        self.storage_key = storage_key
        self.default = validate_theme(default)
        self._theme: Optional[str] = None

    @property
    def active(self) -> bool:
        return self._theme is not None

    def init(self) -> str:
        stored = self.storage.get(self.storage_key)
        if stored in THEMES:
            theme = stored
        else:
            if stored is not None:
                logger.warning(f"Ignoring stored theme {stored!r}, using {self.default}")
            theme = self.default
            self.storage[self.storage_key] = theme

        self._theme = theme
        logger.debug(f"Theme context initialized with {theme}")
        return theme

    def _require_active(self) -> None:
        if not self.active:
            raise ThemeContextError("Theme context is not initialized")

    def read(self) -> str:
        self._require_active()
        return self._theme

    def write(self, theme: str) -> str:
        self._require_active()
        theme = validate_theme(theme)
        self.storage[self.storage_key] = theme
        self._theme = theme
        return theme

    def toggle(self) -> str:
        """Switch between light and dark; returns the new theme."""
        return self.write(other_theme(self.read()))

    def teardown(self) -> None:
        """Release the loaded theme. Stored preference is kept."""
        self._theme = None

    def __enter__(self) -> "ThemeContext":
        self.init()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()
