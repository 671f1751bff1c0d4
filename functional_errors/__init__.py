"""Functional error handling: chainable failures as values.

Usage:
    from dataclasses import dataclass

    from functional_errors import Cause, Err, Failure, Ok, attach_context

    @dataclass(frozen=True, slots=True)
    class FetchFailure(Failure):
        message: str | None
        cause: Cause | None = None
"""

from functional_errors.core.result import Err, Ok, Result, map_err, map_ok
from functional_errors.domain.cause import (
    Cause,
    ExceptionCause,
    FailureCause,
    nested_exception,
)
from functional_errors.domain.context import (
    FailureBuilder,
    attach_context,
    run_catching_with_context,
    run_catching_with_context_async,
)
from functional_errors.domain.failure import Failure
from functional_errors.domain.rendering import format_exception_chain, join_caused_by

__all__ = [
    "Cause",
    "Err",
    "ExceptionCause",
    "Failure",
    "FailureBuilder",
    "FailureCause",
    "Ok",
    "Result",
    "attach_context",
    "format_exception_chain",
    "join_caused_by",
    "map_err",
    "map_ok",
    "nested_exception",
    "run_catching_with_context",
    "run_catching_with_context_async",
]
