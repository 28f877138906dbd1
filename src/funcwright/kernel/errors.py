"""Error types raised by funcwright itself.

Errors raised by user callables are never wrapped; anything deriving from
FuncwrightError means the library rejected its own input.
"""

from __future__ import annotations


class FuncwrightError(Exception):
    """Base error for malformed curry/compose usage.

    Preserves the offending value for debugging.
    """

    def __init__(self, message: str, raw_value: object = None) -> None:
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({super().__str__()!r}, raw_value={self.raw_value!r})"


class InvalidArgumentError(FuncwrightError, TypeError):
    """A required argument failed its capability check at construction time."""

    def __init__(self, argument: str, message: str, raw_value: object = None) -> None:
        self.argument = argument
        super().__init__(f'"{argument}" {message}', raw_value)


class NotIterableError(FuncwrightError, TypeError):
    """A chain value had to be spread but does not support iteration."""

    def __init__(self, raw_value: object) -> None:
        super().__init__(
            f'"parameters" must be iterable, got {type(raw_value).__name__}',
            raw_value,
        )


class UnsupportedTypeError(FuncwrightError, TypeError):
    """An accessor has no rule for the value's type tag."""

    def __init__(self, tag: object, raw_value: object) -> None:
        self.tag = tag
        super().__init__(f'Getter for type "{tag}" is not implemented', raw_value)
