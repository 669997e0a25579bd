from __future__ import annotations

import logging

from flask import Flask, render_template

from ..core.exceptions import NotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    def _render(status: int, title: str, message: str):
        return render_template("errors/error.html", status=status, title=title, message=message), status

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        logger.info("Bad request: %s", e.message)
        return _render(400, "Bad request", e.message)

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        logger.warning("Not found: %s", e)
        return _render(404, "Not found", str(e))

    @app.errorhandler(StoreError)
    def handle_store_error(e: StoreError):
        logger.error("Store failure: %s", e, exc_info=e)
        return _render(500, "Server error", "The employee directory is temporarily unavailable.")
