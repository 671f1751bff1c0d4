"""Default renderers used by Failure.to_pretty_string()."""

import traceback
from collections.abc import Iterable

from functional_errors.core.config import get_settings
from functional_errors.domain.cause import nested_exception


def join_caused_by(strings: Iterable[str], separator: str | None = None) -> str:
    """Join rendered chain entries with the configured separator."""
    if separator is None:
        separator = get_settings().chain_separator
    return separator.join(strings)


def format_exception_chain(
    error: BaseException,
    max_depth: int | None = None,
    separator: str | None = None,
) -> str:
    """Render an exception and its nested exceptions as stack-trace text.

    Each entry is the ``traceback.format_exception_only`` header followed by
    the exception's traceback frames when it was raised. Entries are joined
    with the chain separator so the result reads like the rest of a pretty
    failure string.

    Args:
        error: Exception to render.
        max_depth: Maximum number of exceptions rendered. Defaults to the
            ``max_chain_length`` setting.
        separator: Separator between entries. Defaults to the
            ``chain_separator`` setting.

    Returns:
        str: The rendered exception chain.
    """
    if max_depth is None:
        max_depth = get_settings().max_chain_length

    entries: list[str] = []
    seen: set[int] = set()
    current: BaseException | None = error
    # Exception chains can be cyclic (e.__cause__ = e)
    while current is not None and id(current) not in seen and len(entries) < max_depth:
        seen.add(id(current))
        header = "".join(traceback.format_exception_only(current)).rstrip("\n")
        frames = "".join(traceback.format_tb(current.__traceback__)).rstrip("\n")
        entries.append(f"{header}\n{frames}" if frames else header)
        current = nested_exception(current)

    return join_caused_by(entries, separator)
