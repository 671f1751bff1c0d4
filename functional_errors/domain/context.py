"""Helpers that attach context to failures as they cross boundaries.

Each helper wraps the previous failure (or exception) as the cause of a new
failure built by the caller, so the original is preserved, never mutated.

Usage:
    from functional_errors import attach_context, run_catching_with_context

    result = run_catching_with_context("could not read config", ConfigFailure, load)
    result = attach_context(result, "startup aborted", StartupFailure)
"""

from collections.abc import Awaitable, Callable
from typing import overload

from functional_errors.core.container import get_logger
from functional_errors.core.result import Err, Ok, Result
from functional_errors.domain.cause import Cause, ExceptionCause, FailureCause
from functional_errors.domain.failure import Failure

type FailureBuilder[F: Failure] = Callable[[str, Cause], F]


@overload
def attach_context[F: Failure](
    target: Failure | BaseException, message: str, build: FailureBuilder[F]
) -> F: ...


@overload
def attach_context[R, F: Failure](
    target: Result[R, Failure], message: str, build: FailureBuilder[F]
) -> Result[R, F]: ...


def attach_context(target, message, build):
    """Wrap a failure, an exception, or the error of a Result in a new failure.

    Args:
        target: A Failure, an exception, or a Result whose error is a Failure.
        message: Message of the new failure.
        build: Constructor of the new failure, called as
            ``build(message, cause)``; a dataclass with ``message`` and
            ``cause`` fields works as is.

    Returns:
        - Failure: ``build(message, FailureCause(target))`` for a failure
        - Failure: ``build(message, ExceptionCause(target))`` for an exception
        - Result: an ``Ok`` returned unchanged, or ``Err`` of the wrapped error
    """
    match target:
        case Ok():
            return target
        case Err(error=failure):
            return Err(error=attach_context(failure, message, build))
        case BaseException():
            return build(message, ExceptionCause(target))
        case _:
            return build(message, FailureCause(target))


def run_catching_with_context[R, F: Failure](
    message: str, build: FailureBuilder[F], body: Callable[[], R]
) -> Result[R, F]:
    """Run ``body`` and turn any exception it raises into a failure.

    Only ``Exception`` subclasses are trapped; ``KeyboardInterrupt``,
    ``SystemExit`` and other bare ``BaseException``s propagate.

    Args:
        message: Message of the failure built when ``body`` raises.
        build: Constructor of that failure, see ``attach_context()``.
        body: Zero-argument callable to run.

    Returns:
        Result[R, F]: ``Ok`` of the return value, or ``Err`` of a failure
            whose cause is ``ExceptionCause`` of the raised exception.
    """
    try:
        value = body()
    except Exception as error:
        _log_trapped(message, error)
        return Err(error=attach_context(error, message, build))
    return Ok(value=value)


async def run_catching_with_context_async[R, F: Failure](
    message: str, build: FailureBuilder[F], body: Callable[[], Awaitable[R]]
) -> Result[R, F]:
    """Await ``body()`` and turn any exception it raises into a failure.

    Same contract as ``run_catching_with_context()``. ``asyncio.CancelledError``
    is a ``BaseException`` and therefore propagates, so cancellation of the
    calling task keeps working.
    """
    try:
        value = await body()
    except Exception as error:
        _log_trapped(message, error)
        return Err(error=attach_context(error, message, build))
    return Ok(value=value)


def _log_trapped(message: str, error: Exception) -> None:
    get_logger().debug(
        "Exception converted to failure",
        context_message=message,
        error_type=type(error).__name__,
    )
