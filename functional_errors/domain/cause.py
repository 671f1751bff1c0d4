"""Cause union: what produced a Failure.

A failure is caused either by another failure or by an exception. The union
is closed; the set of failures is not.

Usage:
    from functional_errors.domain.cause import ExceptionCause, FailureCause

    match failure.cause:
        case FailureCause(inner):
            ...
        case ExceptionCause(error):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from functional_errors.domain.failure import Failure


@dataclass(frozen=True, slots=True)
class FailureCause:
    """Cause wrapping another failure.

    Attributes:
        failure: The failure that caused the outer one.
    """

    failure: Failure


@dataclass(frozen=True, slots=True)
class ExceptionCause:
    """Cause wrapping an exception.

    Attributes:
        error: The exception that caused the failure.
    """

    error: BaseException


type Cause = FailureCause | ExceptionCause


def nested_exception(error: BaseException) -> BaseException | None:
    """Return the exception that caused ``error``, if any.

    Follows the explicit ``raise ... from`` cause first, then the implicit
    context unless it was suppressed with ``from None``.
    """
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__
