"""Safe error message formatting utilities.

Ensures exceptions always have useful display messages, even when
their str() representation is empty (e.g., KeyboardInterrupt, TimeoutError).
"""

from __future__ import annotations

from rich.markup import escape as _escape_markup

from ..errors import SourceFinderError

# Friendly messages for specific exception types known to have empty str()
FRIENDLY_MESSAGES: dict[type, str] = {
    TimeoutError: "Operation timed out. A network filesystem may be unresponsive.",
    PermissionError: "Permission denied.",
    KeyboardInterrupt: "Operation interrupted by user.",
}


def format_error_message(e: BaseException, *, include_type: bool = True) -> str:
    """Format an exception into a useful display message.

    Finder errors already describe themselves, so their type name is omitted.

    Examples:
        >>> format_error_message(TimeoutError())
        'TimeoutError: Operation timed out. A network filesystem may be unresponsive.'

        >>> format_error_message(ValueError("invalid input"))
        'ValueError: invalid input'

        >>> format_error_message(ValueError("invalid input"), include_type=False)
        'invalid input'
    """
    error_str = str(e)
    error_type = type(e).__name__

    if error_str:
        if isinstance(e, SourceFinderError) or not include_type or error_type in error_str:
            return error_str
        return f"{error_type}: {error_str}"

    for exc_type, friendly_msg in FRIENDLY_MESSAGES.items():
        if isinstance(e, exc_type):
            return f"{error_type}: {friendly_msg}"

    return f"{error_type}: (no additional details)"


def format_error_chain(e: BaseException) -> str:
    """Format an exception followed by its explicit causes, one per line."""
    lines = [format_error_message(e)]
    cause = e.__cause__
    while cause is not None:
        lines.append(f"  caused by: {format_error_message(cause)}")
        cause = cause.__cause__
    return "\n".join(lines)


def escape_markup(value: object) -> str:
    """Escape a value for safe interpolation into Rich markup strings.

    Prevents Rich from interpreting brackets in exception messages,
    file paths, or other dynamic content as markup tags.
    """
    return _escape_markup(str(value))
