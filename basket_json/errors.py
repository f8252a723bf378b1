"""
Exceptions raised by basket-json.

Rejections inside the scope tree are plain booleans; only the parser and
the typed conversion layer raise.
"""

from typing import List


class IncompleteJsonError(Exception):
    """Base class for every basket-json error."""

    pass


class ParseError(IncompleteJsonError):
    """A character could not be consumed by the parser."""

    def __init__(self, message: str, char: str):
        super().__init__(message)
        self.char = char


class StructuralRejectError(ParseError):
    """The root scope refused a character."""

    def __init__(self, char: str):
        super().__init__(f"failed to parse the JSON string at {char!r}", char)


class AlreadyFinishedError(ParseError):
    """Non-whitespace input arrived after the root value was complete."""

    def __init__(self, char: str):
        super().__init__(f"parser is already finished, got {char!r}", char)


class EmptyInputError(IncompleteJsonError):
    """A value was requested before any input was observed."""

    def __init__(self):
        super().__init__("no input to parse")


class ConversionError(IncompleteJsonError):
    """The parsed value could not be converted into the requested type."""

    pass


class NullValueError(ConversionError):
    """The parsed value is null and cannot populate the requested type."""

    def __init__(self, target_name: str):
        super().__init__(f"cannot convert null into {target_name}")
        self.target_name = target_name


class MissingFieldsError(ConversionError):
    """Required fields are absent from the parsed object."""

    def __init__(self, fields: List[str]):
        super().__init__(f"missing required fields: {', '.join(fields)}")
        self.fields = fields


__all__ = [
    "IncompleteJsonError",
    "ParseError",
    "StructuralRejectError",
    "AlreadyFinishedError",
    "EmptyInputError",
    "ConversionError",
    "NullValueError",
    "MissingFieldsError",
]
