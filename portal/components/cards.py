"""
Reusable card components for the Meridian Portal.
"""

import logging
from typing import Optional
from dash import html
import dash_bootstrap_components as dbc

logger = logging.getLogger(__name__)


def MetricCard(
    title: str,
    value: str,
    icon: str = "fas fa-chart-bar",
    color: str = "primary",
    subtitle: Optional[str] = None
) -> dbc.Card:
    """
    Create a metric display card.

    Args:
        title: Card title/metric name
        value: Already formatted metric value
        icon: FontAwesome icon class
        color: Bootstrap color theme
        subtitle: Optional subtitle text (e.g. "Updated 5m ago")

    Returns:
        Dash Bootstrap Card component
    """
    card_content = [
        html.Div([
            html.Small(title, className="text-muted text-uppercase font-monospace"),
            html.I(className=f"{icon} text-{color}")
        ], className="d-flex justify-content-between align-items-center mb-2"),
        html.H4(value, className="mb-1 font-monospace")
    ]

    if subtitle:
        card_content.append(
            html.Small(subtitle, className="text-muted")
        )

    return dbc.Card([
        dbc.CardBody(card_content)
    ], className="shadow-sm h-100")
