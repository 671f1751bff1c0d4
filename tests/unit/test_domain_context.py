"""Unit tests for context-attaching helpers.

Tests cover:
- attach_context() on failures, exceptions, Ok and Err
- run_catching_with_context() (sync) and run_catching_with_context_async()
- Only Exception subclasses are trapped
"""

import asyncio
from unittest.mock import MagicMock, patch

import pytest

from functional_errors import (
    Err,
    ExceptionCause,
    FailureCause,
    Ok,
    attach_context,
    run_catching_with_context,
    run_catching_with_context_async,
)
from tests.fakes import OtherFailure, SomeFailure


@pytest.mark.unit
class TestAttachContext:
    """Test attach_context()."""

    def test_failure_wrapped_in_failure_cause(self):
        """Test a failure becomes the FailureCause of the new failure."""
        original = SomeFailure("Hi!")

        wrapped = attach_context(original, "Bye!", OtherFailure)

        assert wrapped == OtherFailure("Bye!", FailureCause(original))

    def test_exception_wrapped_in_exception_cause(self):
        """Test an exception becomes the ExceptionCause of the new failure."""
        error = ConnectionError("refused")

        wrapped = attach_context(error, "fetch failed", SomeFailure)

        assert wrapped.message == "fetch failed"
        assert wrapped.cause == ExceptionCause(error)

    def test_ok_passes_through(self):
        """Test an Ok is returned unchanged."""
        result = Ok(value="o.k.")

        assert attach_context(result, "Hi!", SomeFailure) is result

    def test_err_wrapped_exactly_once(self):
        """Test the error of an Err is wrapped once."""
        result = attach_context(Err(error=SomeFailure("Hi!")), "Bye!", OtherFailure)

        assert result == Err(error=OtherFailure("Bye!", FailureCause(SomeFailure("Hi!"))))

    def test_repeated_context_builds_chain(self):
        """Test each layer adds one entry to the chain."""
        result = Err(error=SomeFailure("disk full"))
        result = attach_context(result, "save failed", OtherFailure)
        result = attach_context(result, "request failed", SomeFailure)

        assert result.error.to_pretty_string().split("\n") == [
            "SomeFailure: request failed",
            "Caused by: OtherFailure: save failed",
            "Caused by: SomeFailure: disk full",
        ]

    def test_build_receives_message_and_cause(self):
        """Test the builder is called as build(message, cause)."""
        build = MagicMock(return_value=SomeFailure("built"))
        original = SomeFailure("Hi!")

        assert attach_context(original, "Bye!", build) == SomeFailure("built")
        build.assert_called_once_with("Bye!", FailureCause(original))


@pytest.mark.unit
class TestRunCatchingWithContext:
    """Test run_catching_with_context()."""

    def test_non_raising_body_returns_ok(self):
        """Test the body's return value becomes Ok."""
        assert run_catching_with_context("Hi!", SomeFailure, lambda: "o.k.") == Ok(
            value="o.k."
        )

    def test_raising_body_returns_err(self):
        """Test a raised exception becomes the cause of an Err failure."""

        def body():
            raise RuntimeError("Oh no!")

        result = run_catching_with_context("Hi!", SomeFailure, body)

        assert isinstance(result, Err)
        assert result.error.message == "Hi!"
        assert isinstance(result.error.cause, ExceptionCause)
        assert str(result.error.cause.error) == "Oh no!"

    def test_base_exceptions_propagate(self):
        """Test KeyboardInterrupt is not trapped."""

        def body():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            run_catching_with_context("Hi!", SomeFailure, body)

    def test_trapped_exception_logged(self):
        """Test trapping an exception emits a debug record."""
        mock_logger = MagicMock()

        def body():
            raise ValueError("bad")

        with patch(
            "functional_errors.domain.context.get_logger", return_value=mock_logger
        ):
            run_catching_with_context("parse failed", SomeFailure, body)

        mock_logger.debug.assert_called_once_with(
            "Exception converted to failure",
            context_message="parse failed",
            error_type="ValueError",
        )


@pytest.mark.unit
class TestRunCatchingWithContextAsync:
    """Test run_catching_with_context_async()."""

    @pytest.mark.asyncio
    async def test_non_raising_body_returns_ok(self):
        """Test the awaited value becomes Ok."""

        async def body():
            await asyncio.sleep(0)
            return "o.k."

        assert await run_catching_with_context_async("Hi!", SomeFailure, body) == Ok(
            value="o.k."
        )

    @pytest.mark.asyncio
    async def test_raising_body_returns_err(self):
        """Test an exception raised after suspension becomes an Err."""

        async def body():
            await asyncio.sleep(0)
            raise TimeoutError("slow")

        result = await run_catching_with_context_async("Hi!", SomeFailure, body)

        assert isinstance(result, Err)
        assert result.error.message == "Hi!"
        assert isinstance(result.error.cause.error, TimeoutError)

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self):
        """Test asyncio.CancelledError is not trapped."""

        async def body():
            raise asyncio.CancelledError

        with pytest.raises(asyncio.CancelledError):
            await run_catching_with_context_async("Hi!", SomeFailure, body)
