"""
Main Dash application entry point for Meridian Portal.
"""

import logging
import dash
from dash import Dash, html, dcc
import dash_bootstrap_components as dbc

from config import config
from portal.components import PortalHeader, ThemeStore, PAGE_ROOT_ID
from portal.theme import theme_class

# Initialize logging
config.setup_logging()
logger = logging.getLogger(__name__)

# Initialize the Dash app with Bootstrap theme
app = Dash(
    __name__,
    use_pages=True,
    external_stylesheets=[
        dbc.themes.BOOTSTRAP,
        "https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.4.0/css/all.min.css"
    ],
    suppress_callback_exceptions=True,
    title=config.APP_TITLE
)

# Define the app layout
app.layout = html.Div([
    # Persisted light/dark preference
    ThemeStore(),

    PortalHeader(title=config.APP_TITLE),

    dcc.Location(id="url", refresh=False),

    # Main content area - pages will be rendered here
    dash.page_container
], id=PAGE_ROOT_ID, className=theme_class(config.DEFAULT_THEME), style={"minHeight": "100vh"})

logger.info(f"Pages registered: {len(dash.page_registry)}")

# Run the app
if __name__ == "__main__":
    logger.info("Starting Meridian Portal application...")
    app.run(debug=config.DEBUG, host=config.HOST, port=config.PORT)
