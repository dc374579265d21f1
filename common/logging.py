"""Logging helpers with request correlation."""

from __future__ import annotations

import logging
import time
import uuid

from flask import Flask, g, request

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
ROOT_LOGGER = "calc_server"


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


def install_request_logging(app: Flask) -> None:
    logger = get_logger()

    @app.before_request
    def _begin_request() -> None:
        g.request_id = uuid.uuid4().hex
        g.request_started = time.perf_counter()

    @app.after_request
    def _after_request(response):
        duration_ms = 0.0
        if hasattr(g, "request_started"):
            duration_ms = (time.perf_counter() - g.request_started) * 1000
        logger.info(
            "%s %s -> %s in %.2f ms [%s]",
            request.method,
            request.path,
            response.status_code,
            duration_ms,
            getattr(g, "request_id", "-"),
        )
        response.headers.setdefault("X-Request-ID", getattr(g, "request_id", ""))
        return response

    @app.teardown_request
    def _teardown_request(exc):  # pragma: no cover - flask hooks
        if exc is not None:
            logger.error(
                "request error on %s [%s]",
                request.path,
                getattr(g, "request_id", "-"),
                exc_info=exc,
            )


__all__ = ["get_logger", "install_request_logging"]
