"""Failure capability for non-exceptional errors.

A Failure is a plain value describing what went wrong. It is returned in the
`Err` branch of a Result, never raised. Each layer that forwards a failure
may wrap it in a new one, keeping the original as its cause, so the full
story can be printed like a stack trace.

Architecture:
- `Failure` is an open capability (Protocol): any type exposing
  ``message`` and ``cause`` participates
- Concrete failures subclass `Failure` explicitly to inherit the chain
  methods below; they are usually frozen dataclasses
- Causal chains may be cyclic, so every traversal is bounded by ``max_depth``

Usage:
    from dataclasses import dataclass

    from functional_errors import Cause, Failure

    @dataclass(frozen=True, slots=True)
    class StorageFailure(Failure):
        message: str | None
        cause: Cause | None = None

    print(failure.to_pretty_string())
    # LoadFailure: could not load profile
    # Caused by: StorageFailure: disk unavailable
    # Caused by: OSError: [Errno 28] No space left on device
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator
from functools import partial
from itertools import islice
from typing import Any, Protocol, TextIO

from functional_errors.core.config import get_settings
from functional_errors.core.container import get_logger
from functional_errors.domain.cause import (
    Cause,
    ExceptionCause,
    FailureCause,
    nested_exception,
)
from functional_errors.domain.rendering import format_exception_chain, join_caused_by


def _resolve_max_depth(max_depth: int | None) -> int:
    if max_depth is None:
        return get_settings().max_chain_length
    if max_depth < 0:
        raise ValueError("max_depth must be non-negative")
    return max_depth


class Failure(Protocol):
    """A structured, non-exceptional error with a message and optional cause.

    Attributes:
        message: Human-readable description, may be None.
        cause: What produced this failure, may be None.
    """

    message: str | None
    cause: Cause | None

    def iter_causes(self, stop_at_first_exception: bool | None = None) -> Iterator[Cause]:
        """Lazily yield causes from ``self.cause`` inwards.

        The iterator is unbounded for cyclic chains; bound it with
        ``causal_chain()`` or ``itertools.islice``.

        Args:
            stop_at_first_exception: End at the first ExceptionCause (True) or
                continue into the exception's own nested causes (False).
                Defaults to the ``stop_at_first_exception`` setting.

        Yields:
            Cause: Each cause, outermost first.
        """
        if stop_at_first_exception is None:
            stop_at_first_exception = get_settings().stop_at_first_exception

        current = self.cause
        while current is not None:
            yield current
            match current:
                case FailureCause(failure):
                    current = failure.cause
                case ExceptionCause(error):
                    if stop_at_first_exception:
                        return
                    nested = nested_exception(error)
                    current = ExceptionCause(nested) if nested is not None else None

    def causal_chain(
        self,
        stop_at_first_exception: bool | None = None,
        max_depth: int | None = None,
    ) -> list[Cause]:
        """Return the causes of this failure until the chain ends.

        By default the chain also stops at the first ExceptionCause, because
        an exception carries its own traceback and cause chain.

        Args:
            stop_at_first_exception: See ``iter_causes()``.
            max_depth: Maximum number of causes returned. Keeps traversal
                finite for self-referencing failures. Defaults to the
                ``max_chain_length`` setting.

        Returns:
            list[Cause]: Causes, outermost first. Never contains ``self``.

        Raises:
            ValueError: If ``max_depth`` is negative.
        """
        depth = _resolve_max_depth(max_depth)
        chain = list(islice(self.iter_causes(stop_at_first_exception), depth + 1))
        if len(chain) > depth:
            get_logger().debug(
                "Causal chain truncated",
                failure_type=type(self).__name__,
                max_depth=depth,
            )
            del chain[depth:]
        return chain

    def root_cause(
        self,
        stop_at_first_exception: bool | None = None,
        max_depth: int | None = None,
    ) -> Cause | None:
        """Return the last element of ``causal_chain()``, or None.

        If the failure is caused by an exception at some point, the result
        depends on ``stop_at_first_exception``:
        - True (default): that ExceptionCause is returned.
        - False: the innermost nested exception is returned as an ExceptionCause.
        """
        chain = self.causal_chain(stop_at_first_exception, max_depth)
        return chain[-1] if chain else None

    def to_simple_string(self) -> str:
        """Return ``"<TypeName>: <message>"``."""
        return f"{type(self).__name__}: {self.message}"

    def to_pretty_string(
        self,
        failure_to_string: Callable[[Failure], str] | None = None,
        exception_to_string: Callable[[BaseException], str] | None = None,
        join_strings: Callable[[Iterable[str]], str] | None = None,
        stop_at_first_exception: bool | None = None,
        max_depth: int | None = None,
    ) -> str:
        """Render this failure and its whole causal chain.

        Args:
            failure_to_string: Renders ``self`` and every FailureCause.
                Defaults to ``to_simple_string()``.
            exception_to_string: Renders every ExceptionCause. Defaults to
                ``format_exception_chain()``.
            join_strings: Joins the rendered entries. Defaults to joining with
                the ``chain_separator`` setting ("\\nCaused by: ").
            stop_at_first_exception: See ``iter_causes()``.
            max_depth: See ``causal_chain()``.

        Returns:
            str: Human-readable rendering of the chain.
        """
        if failure_to_string is None:
            failure_to_string = _simple_string
        if exception_to_string is None:
            exception_to_string = partial(
                format_exception_chain, max_depth=_resolve_max_depth(max_depth)
            )
        if join_strings is None:
            join_strings = join_caused_by

        strings = [failure_to_string(self)]
        for cause in self.causal_chain(stop_at_first_exception, max_depth):
            match cause:
                case FailureCause(failure):
                    strings.append(failure_to_string(failure))
                case ExceptionCause(error):
                    strings.append(exception_to_string(error))

        return join_strings(strings)

    def print_chain(self, file: TextIO | None = None, **kwargs: Any) -> None:
        """Write ``to_pretty_string(**kwargs)`` to ``file`` (stderr by default)."""
        print(self.to_pretty_string(**kwargs), file=file if file is not None else sys.stderr)


def _simple_string(failure: Failure) -> str:
    return failure.to_simple_string()
