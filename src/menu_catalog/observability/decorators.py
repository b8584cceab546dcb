"""Tracing decorator for menu service operations."""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Span, Status, StatusCode

from menu_catalog.observability.config import SERVICE_NAME

F = TypeVar("F", bound=Callable[..., Any])


def _record_outcome(span: Span, result: Any) -> None:
    # Menu operations report expected failures as False or a result with success=False
    if isinstance(result, bool):
        span.set_attribute("menu.outcome", result)
    elif hasattr(result, "success"):
        span.set_attribute("menu.outcome", bool(result.success))
        if not result.success and getattr(result, "error_message", None):
            span.set_attribute("menu.rejection", result.error_message)


def traced(span_name: str | None = None) -> Callable[[F], F]:
    """Run each call of the decorated function inside a span.

    Expected failures (a False return, or a result whose ``success`` is
    False) leave the span OK and are recorded as ``menu.outcome``.
    Exceptions mark the span as an error, are recorded on it, and propagate.

    Args:
        span_name: Span name, defaults to the function's qualified name

    Example:
        @traced("menu.delete_dish")
        def delete_dish(self, item_id: str) -> bool:
            ...
    """

    def decorator(func: F) -> F:
        name = span_name or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            tracer = trace.get_tracer(SERVICE_NAME)
            with tracer.start_as_current_span(
                name, record_exception=False, set_status_on_exception=False
            ) as span:
                span.set_attribute("code.function", func.__qualname__)
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    span.record_exception(e)
                    span.set_status(Status(StatusCode.ERROR, f"{type(e).__name__}: {e}"))
                    raise

                _record_outcome(span, result)
                return result

        return wrapper  # type: ignore

    return decorator
