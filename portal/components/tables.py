"""
Reusable table components for the Meridian Portal.

``render_table`` projects a column schema and a list of rows onto a
plain ``TableGrid``; ``PortalTable`` turns that grid into Bootstrap
table markup. Accessors are called once per cell, in column order,
and whatever they raise reaches the caller untouched.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union
from dash import html, dcc, callback, ctx, Input, Output, State, ALL
from dash.development.base_component import Component
from dash.exceptions import PreventUpdate
import dash_bootstrap_components as dbc

from portal.models import ColumnSpec, TableSpec
from portal.utils.logging_utils import log_callback_trigger, log_component_render, log_error_with_context
from .loading import EmptyState

logger = logging.getLogger(__name__)

DEFAULT_EMPTY_MESSAGE = "No data available"

ALIGN_CLASSES = {
    "left": "text-start",
    "center": "text-center",
    "right": "text-end",
}

ColumnInput = Union[ColumnSpec, Dict[str, Any]]


@dataclass(frozen=True)
class HeaderCell:
    text: str
    align: str = "left"
    class_name: Optional[str] = None


@dataclass(frozen=True)
class BodyCell:
    text: str
    align: str = "left"
    class_name: Optional[str] = None
    # Raw accessor output, kept so components render as components
    value: Any = field(default=None, compare=False)


@dataclass(frozen=True)
class TableGrid:
    """Rendered header and body cells of one table, in schema order."""
    header: Tuple[HeaderCell, ...]
    body: Tuple[Tuple[BodyCell, ...], ...]
    empty_message: Optional[str] = None
    dense: bool = False
    rows: Tuple[Any, ...] = field(default=(), compare=False)
    on_row_click: Optional[Callable[[Any], Any]] = field(default=None, compare=False)

    @property
    def header_labels(self) -> List[str]:
        return [cell.text for cell in self.header]

    @property
    def body_text(self) -> List[List[str]]:
        return [[cell.text for cell in row] for row in self.body]

    @property
    def is_empty(self) -> bool:
        return self.empty_message is not None

    def activate_row(self, index: int, on_row_click: Optional[Callable[[Any], Any]] = None) -> Any:
        """Hand the full row at ``index`` to the row-click callback (the table's own by default)."""
        return activate_row(self.rows, index, on_row_click or self.on_row_click)


def activate_row(
    rows: Sequence[Any],
    index: int,
    on_row_click: Optional[Callable[[Any], Any]]
) -> Any:
    """
    Invoke ``on_row_click`` once with the row object at ``index``.

    Args:
        rows: Rows as they were given to the table
        index: Position of the activated row
        on_row_click: Row-click callback, may be None

    Returns:
        Whatever the callback returns, None without a callback
    """
    if on_row_click is None:
        return None
    return on_row_click(rows[index])


def cell_text(value: Any) -> str:
    """Display text for an accessor result."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def render_table(
    columns: Sequence[ColumnInput],
    rows: Sequence[Any],
    dense: bool = False,
    empty_message: str = DEFAULT_EMPTY_MESSAGE,
    on_row_click: Optional[Callable[[Any], Any]] = None
) -> TableGrid:
    """
    Render rows against a column schema.

    Column order and row order are kept exactly as given. With no rows
    the grid carries the header and a single no-data message.

    Args:
        columns: Column specs (or dicts with the same fields)
        rows: Row objects passed to each column accessor
        dense: Compact spacing; never changes content
        empty_message: Text shown when there are no rows
        on_row_click: Callback used by ``TableGrid.activate_row``

    Returns:
        TableGrid with header and body cells
    """
    spec = TableSpec(
        columns=list(columns),
        rows=list(rows),
        dense=dense,
        on_row_click=on_row_click,
        empty_message=empty_message
    )

    header = tuple(
        HeaderCell(text=column.header, align=column.align, class_name=column.class_name)
        for column in spec.columns
    )

    if not spec.rows:
        return TableGrid(
            header=header,
            body=(),
            empty_message=spec.empty_message,
            dense=spec.dense,
            on_row_click=spec.on_row_click
        )

    body = []
    for row in spec.rows:
        cells = []
        for column in spec.columns:
            value = column.accessor(row)
            cells.append(BodyCell(
                text=cell_text(value),
                align=column.align,
                class_name=column.class_name,
                value=value
            ))
        body.append(tuple(cells))

    return TableGrid(
        header=header,
        body=tuple(body),
        dense=spec.dense,
        rows=tuple(spec.rows),
        on_row_click=spec.on_row_click
    )


def _cell_class(align: str, class_name: Optional[str], padding: str) -> str:
    classes = [padding, ALIGN_CLASSES[align]]
    if class_name:
        classes.append(class_name)
    return " ".join(classes)


def row_id(table_id: str, index: int) -> Dict[str, Any]:
    """Pattern-matching id of a clickable table row."""
    return {"type": f"{table_id}-row", "index": index}


def rows_store_id(table_id: str) -> str:
    return f"{table_id}-rows"


def PortalTable(
    columns: Sequence[ColumnInput],
    data: Sequence[Any],
    table_id: str = "portal-table",
    clickable: bool = False,
    empty_message: str = DEFAULT_EMPTY_MESSAGE,
    dense: bool = False,
    class_name: Optional[str] = None
) -> html.Div:
    """
    Create a schema-driven Bootstrap table.

    Args:
        columns: Column specs (header, accessor, align, class_name)
        data: Row objects; must be JSON-serialisable when ``clickable``
        table_id: Unique table ID
        clickable: Emit clickable rows; pair with ``register_row_click``.
            The rows are copied into a ``dcc.Store``, so the row-click
            handler receives their JSON round-tripped form
        empty_message: Message shown when ``data`` is empty
        dense: Use compact cell padding
        class_name: Extra classes for the wrapper

    Returns:
        Table component wrapped in a scrollable div
    """
    grid = render_table(columns, data, dense=dense, empty_message=empty_message)
    log_component_render("PortalTable", {"table_id": table_id, "rows": len(grid.body)})

    header_padding = "px-2 py-1" if grid.dense else "px-3 py-2"
    body_padding = "px-2 py-1" if grid.dense else "px-3 py-3"

    header_row = html.Tr([
        html.Th(
            cell.text,
            className=_cell_class(
                cell.align,
                cell.class_name,
                f"{header_padding} text-uppercase small text-muted fw-medium font-monospace"
            )
        )
        for cell in grid.header
    ])

    if grid.is_empty:
        body_rows = [
            html.Tr(
                html.Td(
                    EmptyState(message=grid.empty_message),
                    colSpan=len(grid.header),
                    className="text-center"
                ),
                className="portal-table-empty"
            )
        ]
    else:
        body_rows = []
        for index, row in enumerate(grid.body):
            cells = [
                html.Td(
                    cell.value if isinstance(cell.value, Component) else cell.text,
                    className=_cell_class(cell.align, cell.class_name, body_padding)
                )
                for cell in row
            ]
            if clickable:
                body_rows.append(html.Tr(
                    cells,
                    id=row_id(table_id, index),
                    n_clicks=0,
                    style={"cursor": "pointer"}
                ))
            else:
                body_rows.append(html.Tr(cells))

    table_options = {"size": "sm"} if grid.dense else {}
    table = dbc.Table([
        html.Thead(header_row),
        html.Tbody(body_rows)
    ], id=table_id, striped=True, hover=clickable, responsive=True, className="mb-0", **table_options)

    children = [table]
    if clickable:
        children.append(dcc.Store(id=rows_store_id(table_id), data=list(grid.rows)))

    wrapper_class = "overflow-auto"
    if class_name:
        wrapper_class = f"{wrapper_class} {class_name}"
    return html.Div(children, className=wrapper_class)


def PortalTableCard(
    title: Optional[str] = None,
    action: Optional[Component] = None,
    **table_kwargs
) -> dbc.Card:
    """
    Create a table inside a card with an optional title and action.

    Args:
        title: Optional card title
        action: Optional component shown at the right of the header
        **table_kwargs: Arguments for ``PortalTable``

    Returns:
        Dash Bootstrap Card component
    """
    card_content = []

    if title or action:
        header_content = []
        if title:
            header_content.append(
                html.H6(title, className="mb-0 text-uppercase font-monospace")
            )
        if action is not None:
            header_content.append(action)
        card_content.append(dbc.CardHeader(
            html.Div(header_content, className="d-flex justify-content-between align-items-center")
        ))

    card_content.append(dbc.CardBody(PortalTable(**table_kwargs), className="p-0"))

    return dbc.Card(card_content, className="shadow-sm mb-4")


def register_row_click(
    table_id: str,
    handler: Callable[[Any], Any],
    output: Output
) -> Callable:
    """
    Register the callback that routes row clicks of a table to ``handler``.

    The handler gets the full row object, once per click, and its return
    value is written to ``output``. Register at import time, before the
    app serves requests.

    Args:
        table_id: ID given to the matching ``PortalTable``
        handler: Row-click callback
        output: Dash Output receiving the handler's result

    Returns:
        The registered callback function
    """
    @callback(
        output,
        Input({"type": f"{table_id}-row", "index": ALL}, "n_clicks"),
        State(rows_store_id(table_id), "data"),
        prevent_initial_call=True
    )
    def on_row_click(n_clicks, rows):
        return dispatch_row_click(table_id, rows, handler)

    return on_row_click


def dispatch_row_click(table_id: str, rows: Sequence[Any], handler: Callable[[Any], Any]) -> Any:
    """
    Route the row click that triggered the current Dash callback.

    Must run inside a callback context. Handler errors are logged with
    the row index and re-raised.

    Raises:
        PreventUpdate: When no row was actually clicked
    """
    triggered = ctx.triggered_id
    # Rows being (re)mounted report n_clicks=0 and are not clicks
    if not triggered or not ctx.triggered or not ctx.triggered[0]["value"]:
        raise PreventUpdate

    index = triggered["index"]
    log_callback_trigger(f"{table_id} row click", {"index": index})
    try:
        return activate_row(rows, index, handler)
    except Exception as e:
        log_error_with_context(e, f"{table_id} row click", {"index": index})
        raise
