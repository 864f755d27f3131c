"""Components package for Meridian Portal."""

from .cards import MetricCard
from .layouts import PortalHeader, PageContainer
from .loading import EmptyState
from .tables import (
    PortalTable,
    PortalTableCard,
    TableGrid,
    render_table,
    register_row_click
)
from .theme_toggle import ThemeToggle, ThemeStore, PAGE_ROOT_ID

__all__ = [
    # Cards
    "MetricCard",
    # Layouts
    "PortalHeader",
    "PageContainer",
    # Empty states
    "EmptyState",
    # Tables
    "PortalTable",
    "PortalTableCard",
    "TableGrid",
    "render_table",
    "register_row_click",
    # Theme
    "ThemeToggle",
    "ThemeStore",
    "PAGE_ROOT_ID"
]
