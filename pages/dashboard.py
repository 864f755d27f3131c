"""
Dashboard page for Meridian Portal.
Shows reserve metrics and recent mint/burn operations.
"""

import logging
import time
from zoneinfo import ZoneInfo
import dash
from dash import html, Output
import dash_bootstrap_components as dbc

from config import config
from portal.components import (
    PageContainer,
    MetricCard,
    PortalTableCard,
    register_row_click
)
from portal.models import ColumnSpec
from portal.utils import (
    format_address,
    format_compact_number,
    format_currency,
    format_percentage,
    format_time_ago,
    format_timestamp,
    format_with_precision
)

logger = logging.getLogger(__name__)

dash.register_page(__name__, path="/", title=f"Dashboard - {config.APP_TITLE}")

OPERATIONS_TABLE_ID = "operations-table"
OPERATION_DETAIL_ID = "operation-detail"

STATUS_COLORS = {
    "completed": "success",
    "pending": "warning",
    "failed": "danger",
}


def get_reserve_summary() -> dict:
    """Reserve figures shown in the metric cards."""
    return {
        "total_reserves": "148250000.42",
        "circulating_supply": "145900311.07",
        "reserve_ratio": "101.61",
        "holders": 18342,
        "updated_at": int(time.time()) - 300,
    }


def get_recent_operations() -> list:
    """Most recent mint and burn operations, newest first."""
    now = int(time.time())
    return [
        {
            "id": "op-1042",
            "type": "mint",
            "amount": "250000.00",
            "currency": "USD",
            "wallet": "0x8ba1f109551bD432803012645Ac136ddd64DBA72",
            "status": "completed",
            "timestamp": now - 420,
        },
        {
            "id": "op-1041",
            "type": "burn",
            "amount": "-18500.5",
            "currency": "EUR",
            "wallet": "0xAb5801a7D398351b8bE11C439e05C5B3259aeC9B",
            "status": "pending",
            "timestamp": now - 5400,
        },
        {
            "id": "op-1040",
            "type": "mint",
            "amount": "not-settled",
            "currency": "GBP",
            "wallet": "0x1Db3439a222C519ab44bb1144fC28167b4Fa6EE6",
            "status": "failed",
            "timestamp": now - 190000,
        },
    ]


def get_operation_columns() -> list:
    """Column schema for the operations table."""
    return [
        ColumnSpec(header="Operation", accessor=lambda row: row["id"], class_name="font-monospace"),
        ColumnSpec(header="Type", accessor=lambda row: row["type"].upper()),
        ColumnSpec(
            header="Amount",
            accessor=lambda row: format_currency(row["amount"], row["currency"], config.DEFAULT_PRECISION),
            align="right"
        ),
        ColumnSpec(header="Wallet", accessor=lambda row: format_address(row["wallet"]), class_name="font-monospace"),
        ColumnSpec(
            header="Status",
            accessor=lambda row: dbc.Badge(row["status"], color=STATUS_COLORS.get(row["status"], "secondary")),
            align="center"
        ),
        ColumnSpec(header="Age", accessor=lambda row: format_time_ago(row["timestamp"]), align="right"),
    ]


def show_operation_detail(row: dict) -> html.Div:
    """Detail panel for a clicked operation row."""
    tz = ZoneInfo(config.DISPLAY_TIMEZONE)
    return html.Div([
        html.H6(f"Operation {row['id']}", className="font-monospace"),
        html.P(f"Wallet: {row['wallet']}", className="small mb-1"),
        html.P(f"Amount: {format_with_precision(row['amount'], config.DEFAULT_PRECISION)} {row['currency']}",
               className="small mb-1"),
        html.P(f"Submitted: {format_timestamp(row['timestamp'], tz)}", className="small mb-0")
    ])


register_row_click(OPERATIONS_TABLE_ID, show_operation_detail, Output(OPERATION_DETAIL_ID, "children"))


def layout():
    """
    Define the layout for the dashboard page.

    Returns:
        Dash layout components
    """
    summary = get_reserve_summary()
    updated = f"Updated {format_time_ago(summary['updated_at'])}"

    return PageContainer(
        title="Reserves Dashboard",
        subtitle="Reserve backing and recent stablecoin operations",
        children=[
            dbc.Row([
                dbc.Col(MetricCard(
                    title="Total Reserves",
                    value=format_currency(summary["total_reserves"], config.DEFAULT_CURRENCY),
                    icon="fas fa-vault",
                    subtitle=updated
                ), width=12, md=6, lg=3),
                dbc.Col(MetricCard(
                    title="Circulating Supply",
                    value=format_compact_number(summary["circulating_supply"]),
                    icon="fas fa-coins"
                ), width=12, md=6, lg=3),
                dbc.Col(MetricCard(
                    title="Reserve Ratio",
                    value=format_percentage(summary["reserve_ratio"]),
                    icon="fas fa-scale-balanced",
                    color="success"
                ), width=12, md=6, lg=3),
                dbc.Col(MetricCard(
                    title="Holders",
                    value=format_with_precision(summary["holders"], 0),
                    icon="fas fa-users"
                ), width=12, md=6, lg=3),
            ], className="g-4 mb-4"),

            PortalTableCard(
                title="Recent Operations",
                columns=get_operation_columns(),
                data=get_recent_operations(),
                table_id=OPERATIONS_TABLE_ID,
                clickable=True,
                empty_message=config.TABLE_EMPTY_MESSAGE
            ),

            html.Div(id=OPERATION_DETAIL_ID, className="mt-3")
        ]
    )
