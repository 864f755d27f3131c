"""
Empty state components for the Meridian Portal.
"""

import logging
from typing import Optional
from dash import html
import dash_bootstrap_components as dbc

logger = logging.getLogger(__name__)


def EmptyState(
    message: str = "No data available",
    icon: str = "fas fa-inbox",
    description: Optional[str] = None,
    action_label: Optional[str] = None,
    action_href: Optional[str] = None
) -> html.Div:
    """
    Create an empty state component.

    Args:
        message: Empty state message
        icon: FontAwesome icon class
        description: Optional secondary text
        action_label: Optional label of a call-to-action button
        action_href: Link target of the call-to-action button

    Returns:
        Empty state component
    """
    components = [
        html.I(className=f"{icon} fa-2x text-muted mb-3"),
        html.H6(message, className="text-muted text-uppercase font-monospace mb-2")
    ]

    if description:
        components.append(html.P(description, className="small text-muted mb-3"))

    if action_label:
        components.append(
            dbc.Button(action_label, href=action_href, color="secondary", size="sm", outline=True)
        )

    return html.Div(components, className="portal-empty-state text-center py-5 px-3")
