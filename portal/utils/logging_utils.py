"""
Logging utilities for the Meridian Portal.
Provides helper functions for logging component renders, callbacks and errors.
"""

import logging
from typing import Any, Dict


def log_component_render(component_name: str, props: Dict[str, Any] = None) -> None:
    """
    Log component rendering.

    Args:
        component_name: Name of the component being rendered
        props: Component properties
    """
    logger = logging.getLogger(__name__)
    logger.debug(f"RENDER {component_name}")
    if props:
        logger.debug(f"RENDER {component_name} props: {props}")


def log_callback_trigger(callback_name: str, inputs: Dict[str, Any] = None) -> None:
    """
    Log callback trigger.

    Args:
        callback_name: Name of the callback
        inputs: Input values that triggered the callback
    """
    logger = logging.getLogger(__name__)
    logger.info(f"CALLBACK {callback_name} triggered")
    if inputs:
        logger.debug(f"CALLBACK {callback_name} inputs: {inputs}")


def log_error_with_context(error: Exception, context: str, additional_data: Dict[str, Any] = None) -> None:
    """
    Log error with additional context.

    Args:
        error: Exception that occurred
        context: Context where the error occurred
        additional_data: Additional data for debugging
    """
    logger = logging.getLogger(__name__)
    logger.error(f"ERROR in {context}: {error}", exc_info=error)
    if additional_data:
        logger.error(f"ERROR {context} data: {additional_data}")
