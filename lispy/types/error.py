"""First-class error values.

Language-level failures are ordinary values returned from evaluation, never
raised. Every failure kind is a subclass of ``Error`` so callers can test the
kind with ``isinstance`` while printing and equality only look at the message.
"""

from __future__ import annotations


class Error:
    """An error value carrying a human-readable message."""

    __slots__ = ("message",)

    type_name = "Error"

    def __init__(self, message: str):
        self.message = message

    def copy(self) -> Error:
        # Errors are immutable
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Error) and self.message == other.message

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def __str__(self) -> str:
        return self.message


class UnboundSymbol(Error):
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unbound Symbol '{name}'")


class WrongArgumentCount(Error):
    __slots__ = ("function", "got", "expected")

    def __init__(self, function: str, got: int, expected: int):
        self.function = function
        self.got = got
        self.expected = expected
        super().__init__(
            f"Function '{function}' passed incorrect number of arguments. "
            f"Got {got}, Expected {expected}."
        )


class WrongArgumentType(Error):
    __slots__ = ("function", "index", "got", "expected")

    def __init__(self, function: str, index: int, got: str, expected: str):
        self.function = function
        self.index = index
        self.got = got
        self.expected = expected
        super().__init__(
            f"Function '{function}' passed incorrect type for argument {index}. "
            f"Got {got}, Expected {expected}."
        )


class EmptyContainer(Error):
    __slots__ = ("function",)

    def __init__(self, function: str):
        self.function = function
        super().__init__(f"Function '{function}' passed {{}}!")


class DivisionByZero(Error):
    __slots__ = ()

    def __init__(self):
        super().__init__("Division By Zero!")


class UndefinedPower(Error):
    __slots__ = ()

    def __init__(self):
        super().__init__("0^0 is undefined!")


class TooManyArguments(Error):
    __slots__ = ("given", "total")

    def __init__(self, given: int, total: int):
        self.given = given
        self.total = total
        super().__init__(
            f"Function passed too many arguments. Got {given}, Expected {total}."
        )


class MalformedVariadic(Error):
    __slots__ = ()

    def __init__(self):
        super().__init__(
            "Function format invalid. Symbol '&' not followed by single symbol."
        )


class NotAFunction(Error):
    __slots__ = ("got",)

    def __init__(self, got: str):
        self.got = got
        super().__init__(
            f"S-Expression starts with incorrect type. Got {got}, Expected Function."
        )


class ParseFailure(Error):
    __slots__ = ()

    def __init__(self, message: str):
        super().__init__(f"Could not load Library {message}")


class UserError(Error):
    __slots__ = ()
