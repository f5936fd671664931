from __future__ import annotations

import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncContextManager

from fastapi import FastAPI

from taxcalc.config import Settings, get_settings
from taxcalc.core import income
from taxcalc.params import list_tax_params
from taxcalc.tax.calculator import CalcConfig

Hook = Callable[[FastAPI], Awaitable[None] | None]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def _index_tax_params(logger: logging.Logger) -> dict[int, list[str]]:
    """Return registered region codes per year.

    Raises ``ConfigurationError`` when a registered parameter set is invalid.
    """
    index: dict[int, list[str]] = {}
    for params in list_tax_params():
        CalcConfig(
            income_calc=income.Calculator(params.income_recipe),
            tax_formula=params.formula,
            contra_tax_formula=params.contra_formula,
        ).validate()
        index.setdefault(params.year, []).append(params.region.code)
    logger.debug("Validated tax params: %s", index)
    return index


def _open_log_sink(logger: logging.Logger, settings: Settings, app_label: str) -> logging.Handler | None:
    logs_dir = Path(settings.log_dir)
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Unable to create logs directory %s: %s", logs_dir, exc)
        return None
    handler = logging.FileHandler(logs_dir / f"{app_label}.log", encoding="utf-8")
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return handler


async def _invoke_hook(hook: Hook | None, app: FastAPI) -> None:
    if hook is None:
        return
    try:
        result = hook(app)
        if inspect.isawaitable(result):
            await result  # type: ignore[func-returns-value]
    except Exception:  # pragma: no cover - hooks are user provided
        logging.getLogger("taxcalc").exception("Application lifecycle hook failed")


def build_application_lifespan(
    app_label: str,
    *,
    startup_hook: Hook | None = None,
    shutdown_hook: Hook | None = None,
) -> Callable[[FastAPI], AsyncContextManager[None]]:
    base_logger = logging.getLogger("taxcalc")

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = get_settings()
        logger = base_logger.getChild(app_label)
        params_index = _index_tax_params(logger)
        log_handler = _open_log_sink(base_logger, settings, app_label) if settings.log_sink_enabled else None

        app.state.settings = settings
        app.state.tax_params_index = params_index
        app.state.log_handler = log_handler
        app.state.app_label = app_label

        logger.info(
            "Startup complete: default_tax_year=%s default_regions=%s tax_years=%s",
            settings.default_tax_year,
            ",".join(settings.default_regions),
            sorted(params_index),
        )

        try:
            await _invoke_hook(startup_hook, app)
            yield
        finally:
            await _invoke_hook(shutdown_hook, app)
            logger.info("Shutdown complete")
            if log_handler is not None:
                base_logger.removeHandler(log_handler)
                log_handler.close()
            for attr in ("settings", "tax_params_index", "log_handler", "app_label"):
                if hasattr(app.state, attr):
                    delattr(app.state, attr)

    return _lifespan
