"""
Layout components for the Meridian Portal.
Provides consistent page structure and navigation.
"""

import logging
from typing import List, Optional
from dash import html
import dash_bootstrap_components as dbc

from .theme_toggle import ThemeToggle

logger = logging.getLogger(__name__)


def PortalHeader(title: str = "Meridian Portal") -> html.Div:
    """
    Create the portal header with navigation and the theme toggle.

    Args:
        title: Application title

    Returns:
        Header component with navigation
    """
    return html.Div([
        dbc.Navbar([
            dbc.Container([
                dbc.NavbarBrand([
                    html.I(className="fas fa-circle-nodes me-2"),
                    title
                ], href="/", className="fw-bold font-monospace"),

                dbc.Nav([
                    dbc.NavItem(dbc.NavLink("Dashboard", href="/")),
                    dbc.NavItem(ThemeToggle(), className="ms-3 d-flex align-items-center")
                ], navbar=True, className="ms-auto")
            ], fluid=True)
        ], className="border-bottom mb-4")
    ])


def PageContainer(
    children: List,
    title: Optional[str] = None,
    subtitle: Optional[str] = None,
    fluid: bool = True
) -> html.Div:
    """
    Create a standard page container with optional title.

    Args:
        children: Page content components
        title: Optional page title
        subtitle: Optional page subtitle
        fluid: Whether to use fluid container

    Returns:
        Page container component
    """
    container_content = []

    if title:
        header_content = [html.H1(title, className="h3 mb-2")]
        if subtitle:
            header_content.append(
                html.P(subtitle, className="text-muted")
            )
        container_content.append(
            html.Div(header_content, className="mb-4")
        )

    container_content.extend(children)

    return dbc.Container(
        container_content,
        fluid=fluid,
        className="p-4"
    )
