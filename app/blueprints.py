"""Blueprint registration helpers."""

from __future__ import annotations

import importlib
from typing import Iterable

from flask import Blueprint, Flask

from common.logging import get_logger


def _plugin_blueprints(plugins: Iterable[str]) -> list[Blueprint]:
    blueprints: list[Blueprint] = []
    for dotted in plugins:
        module = importlib.import_module(f"{dotted}.api")
        blueprints.extend(getattr(module, "blueprints", None) or [])
    return blueprints


def register_plugin_blueprints(app: Flask, plugins: Iterable[str]) -> None:
    logger = get_logger()
    for bp in _plugin_blueprints(plugins):
        app.register_blueprint(bp)
        logger.debug("registered blueprint %s at %s", bp.name, bp.url_prefix)


__all__ = ["register_plugin_blueprints"]
