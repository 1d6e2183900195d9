"""Boundary instrumentation for generator entry points."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable, List, TypeVar

from pydantic import BaseModel, ValidationError

from outfit_app.logging_config import log_event

LOGGER = logging.getLogger(__name__)
R = TypeVar("R")


def _error_locations(exc: ValidationError) -> List[str]:
    return [".".join(str(part) for part in error["loc"]) for error in exc.errors()]


def instrument_operation(
    operation: str,
    input_model: type[BaseModel] | None = None,
    on_validation_error: Callable[[ValidationError], R] | None = None,
) -> Callable[[Callable[..., R]], Callable[..., R]]:
    """Validate the raw ``payload`` keyword with ``input_model`` and log rejections and crashes.

    The wrapped callable receives the model instance as ``payload``; other
    keyword arguments pass through untouched. Start and finish events come from
    :func:`outfit_app.logging_config.generation_context`, not from here.
    """

    def decorator(func: Callable[..., R]) -> Callable[..., R]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> R:
            if input_model is not None:
                try:
                    kwargs["payload"] = input_model.model_validate(kwargs.get("payload"))
                except ValidationError as exc:
                    log_event(
                        LOGGER,
                        logging.WARNING,
                        "request_rejected",
                        operation=operation,
                        fields=_error_locations(exc),
                    )
                    if on_validation_error is None:
                        raise
                    return on_validation_error(exc)
            try:
                return func(*args, **kwargs)
            except Exception:
                log_event(LOGGER, logging.ERROR, "operation_failed", operation=operation, exc_info=True)
                raise

        return wrapper

    return decorator


__all__ = ["instrument_operation"]
