"""Fallback chain pattern for graceful degradation."""

from functools import partial
from typing import Any, Callable, Coroutine, TypeVar

import structlog

logger = structlog.get_logger()

T = TypeVar("T")


def describe(func: Callable[..., Any]) -> str:
    """Name a callable for logging, including bound partial arguments."""
    if isinstance(func, partial):
        args = ", ".join(str(a) for a in func.args)
        return f"{describe(func.func)}({args})"
    return getattr(func, "__name__", repr(func))


class FallbackChain:
    """Execute async functions in order until one succeeds.

    Useful for trying multiple data sources with graceful degradation.
    Only exceptions listed in ``fallback_on`` move the chain forward;
    anything else propagates immediately.
    """

    def __init__(
        self,
        *functions: Callable[..., Coroutine[Any, Any, T]],
        fallback_on: tuple[type[Exception], ...] = (Exception,),
    ):
        """Initialize fallback chain with ordered functions.

        Args:
            *functions: Async functions to try in order
            fallback_on: Exception types that trigger the next function
        """
        self.functions = functions
        self.fallback_on = fallback_on

    async def execute(self, *args: Any, **kwargs: Any) -> T:
        """Execute functions in order until one succeeds.

        Args:
            *args: Positional arguments passed to each function
            **kwargs: Keyword arguments passed to each function

        Returns:
            Result from first successful function

        Raises:
            Last exception if all functions fail
        """
        if not self.functions:
            raise ValueError("FallbackChain needs at least one function")

        last_error: Exception | None = None

        for i, func in enumerate(self.functions):
            try:
                result = await func(*args, **kwargs)
                if i > 0:
                    logger.info(
                        "fallback_used",
                        function=describe(func),
                        attempt=i + 1,
                        total_functions=len(self.functions),
                    )
                return result
            except self.fallback_on as e:
                last_error = e
                logger.warning(
                    "fallback_attempt_failed",
                    function=describe(func),
                    attempt=i + 1,
                    total_functions=len(self.functions),
                    error=str(e),
                )

        logger.error(
            "fallback_chain_exhausted",
            functions=[describe(f) for f in self.functions],
            final_error=str(last_error),
        )
        raise last_error  # type: ignore


async def with_default(
    func: Callable[..., Coroutine[Any, Any, T]],
    default: T,
    *args: Any,
    **kwargs: Any,
) -> T:
    """Execute function and return default value on failure.

    Args:
        func: Async function to execute
        default: Value to return if function fails
        *args: Positional arguments for function
        **kwargs: Keyword arguments for function

    Returns:
        Function result or default value
    """
    try:
        return await func(*args, **kwargs)
    except Exception as e:
        logger.warning(
            "using_default_value",
            function=describe(func),
            error_type=type(e).__name__,
            error=str(e),
        )
        return default
