from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .common.datetime_utils import Clock
from .container import build_container, storage_backend
from .core.exceptions import (
    AccessDeniedError,
    BreakInProgressError,
    BreakNotStartedError,
    DomainError,
    ShiftInProgressError,
    ShiftNotStartedError,
    StorageUnavailableError,
    UserAlreadyExistsError,
    UserNotFoundError,
    ValidationError,
)
from .reports.controller import register as register_reports
from .storage.json_file import resolve_path
from .timeclock.controller import register as register_timeclock
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (UserNotFoundError, 404),
    (UserAlreadyExistsError, 409),
    (AccessDeniedError, 403),
    (ShiftInProgressError, 409),
    (ShiftNotStartedError, 409),
    (BreakInProgressError, 409),
    (BreakNotStartedError, 409),
    (ValidationError, 400),
)

_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def data_base_dir() -> Path:
    """Directory that relative USERS_DB_PATH values are resolved against.

    The repository root when running from a checkout, the working directory
    when the package is installed into site-packages.
    """
    if (_PROJECT_ROOT / "pyproject.toml").is_file():
        return _PROJECT_ROOT
    return Path.cwd()


def resolve_store_config(store_config: dict, *, base: Optional[Path] = None) -> dict:
    resolved = dict(store_config)
    resolved["backend"] = storage_backend(resolved)
    if resolved["backend"] == "json":
        resolved["path"] = str(resolve_path(resolved.get("path"), base=base or data_base_dir()))
    return resolved


def status_for(error: DomainError) -> int:
    for error_cls, status in _STATUS_BY_ERROR:
        if isinstance(error, error_cls):
            return status
    return 400


def _error_body(error: Exception, message: str):
    return jsonify({"success": False, "error": type(error).__name__, "message": message})


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(error: DomainError):
        status = status_for(error)
        logger.info("request rejected (%s): %s", status, error)
        return _error_body(error, str(error)), status

    @app.errorhandler(StorageUnavailableError)
    def handle_storage_error(error: StorageUnavailableError):
        logger.error("storage unavailable", exc_info=error)
        if app.config["DEBUG"]:
            return _error_body(error, str(error)), 503
        return _error_body(error, "User database is unavailable"), 503

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return _error_body(error, error.description or error.name), error.code or 500


def create_app(
    *,
    settings_module: Optional[str] = None,
    store_config: Optional[dict] = None,
    clock: Optional[Clock] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    _configure_logging(str(getattr(settings, "LOG_LEVEL", "INFO")))

    store_config = resolve_store_config(store_config or getattr(settings, "STORE_CONFIG"))

    logger.info(
        "settings=%s storage=%s path=%s",
        settings_module,
        store_config["backend"],
        store_config.get("path", "-"),
    )

    container = build_container(store_config=store_config, clock=clock)
    app.extensions["time_clock"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_timeclock(app, container)
    register_reports(app, container)

    return app
