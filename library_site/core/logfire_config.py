"""
Logfire Configuration Module

Logfire setup and instrumentation for library-site.

Usage:
    from library_site.core.logfire_config import initialize_logfire

    results = initialize_logfire(app)  # idempotent; safe to call at startup
    # results: {"configured": bool, "instrumentation": {...}}
"""

import logging
from typing import Any, Dict, Optional

import logfire
from fastapi import FastAPI, Request

from library_site.core.config import settings
from library_site.core.logger import setup_logfire_handler

SENSITIVE_VALUE_KEYS = frozenset({"password", "token", "secret", "authorization"})


class _LogfireState:
    """Internal state management for logfire configuration."""

    def __init__(self) -> None:
        self.configured = False
        self.sqlalchemy_instrumented = False


_state = _LogfireState()


def custom_request_attributes_mapper(
    request: Request, attributes: Dict[str, Any]
) -> Optional[Dict[str, Any]]:
    """
    Shape the attributes logfire records for each request.

    Login bodies carry the admin password, so matching values are redacted.

    Args:
        request: The incoming request
        attributes: Default attributes dictionary from logfire

    Returns:
        dict: Customized attributes
    """
    endpoint = str(request.url.path)
    request_id = request.headers.get("x-request-id")

    if attributes.get("errors"):
        return {
            "errors": attributes["errors"],
            "endpoint": endpoint,
            "method": request.method,
            "request_id": request_id,
        }

    filtered_values = {}
    for key, value in (attributes.get("values") or {}).items():
        if key.lower() in SENSITIVE_VALUE_KEYS:
            filtered_values[key] = "[REDACTED]"
        else:
            filtered_values[key] = value

    return {
        "values": filtered_values,
        "endpoint": endpoint,
        "method": request.method,
        "request_id": request_id,
    }


def setup_logfire() -> bool:
    """
    Set up basic logfire configuration.

    Returns:
        bool: True if logfire was successfully configured, False otherwise
    """
    logger = logging.getLogger("library_site.logfire")

    if not settings.logfire__enabled or _state.configured:
        return _state.configured

    try:
        config_kwargs: Dict[str, Any] = {
            "service_name": settings.logfire__service_name,
            "environment": settings.logfire__environment,
            "scrubbing": False if settings.logfire__disable_scrubbing else None,
        }
        if settings.logfire__token:
            config_kwargs["token"] = settings.logfire__token.get_secret_value()

        logfire.configure(**config_kwargs)
        logging.getLogger("library_site.startup").info(
            "Logfire initialized for service: %s", settings.logfire__service_name
        )

        setup_logfire_handler()

        _state.configured = True
        return True

    except Exception as e:
        logger.error("Failed to initialize logfire: %s", e)
        return False


def instrument_sqlalchemy() -> bool:
    """
    Instrument the application's SQLAlchemy engine.

    Returns:
        bool: True if the engine is instrumented
    """
    logger = logging.getLogger("library_site.logfire")

    if not settings.logfire__enabled or not settings.logfire__instrument__sqlalchemy:
        return False
    if _state.sqlalchemy_instrumented:
        return True

    try:
        from library_site.stores.database import engine

        logfire.instrument_sqlalchemy(engine=engine)
        _state.sqlalchemy_instrumented = True
        logger.info("Logfire SQLAlchemy instrumentation enabled")
        return True
    except Exception as e:
        logger.warning("Failed to instrument SQLAlchemy with logfire: %s", e)
        return False


def instrument_fastapi(app: FastAPI) -> bool:
    """
    Set up logfire instrumentation for FastAPI.

    Args:
        app: The FastAPI application instance

    Returns:
        bool: True if FastAPI was successfully instrumented, False otherwise
    """
    logger = logging.getLogger("library_site.logfire")

    if not settings.logfire__enabled or not settings.logfire__instrument__fastapi:
        return False

    try:
        logfire.instrument_fastapi(
            app,
            request_attributes_mapper=custom_request_attributes_mapper,
            capture_headers=False,
        )
        logger.info("FastAPI instrumented with logfire")
        return True

    except Exception as e:
        logger.error("Failed to instrument FastAPI with logfire: %s", e)
        return False


def initialize_logfire(app: Optional[FastAPI] = None) -> Dict[str, Any]:
    """
    Complete logfire initialization including configuration and instrumentation.

    Args:
        app: Optional FastAPI application instance for instrumentation

    Returns:
        dict: Initialization results with status for each component
    """
    results: Dict[str, Any] = {
        "configured": setup_logfire(),
        "instrumentation": {"sqlalchemy": False, "fastapi": False},
    }

    if results["configured"]:
        results["instrumentation"]["sqlalchemy"] = instrument_sqlalchemy()
        if app is not None:
            results["instrumentation"]["fastapi"] = instrument_fastapi(app)

    return results
