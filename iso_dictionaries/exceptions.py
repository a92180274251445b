"""
Code Errors
===========

The two failure classes of code resolution:

- InvalidCode: the raw value does not have the shape required for the form
- UnknownCode: the raw value is well-formed but no entity is assigned to it
"""

from typing import Any, Optional


class CodeError(ValueError):
    """Base class for code resolution failures."""

    def __init__(self, domain: str, raw: Any, form: Optional[str] = None,
                 message: Optional[str] = None):
        self.domain = domain
        self.raw = raw
        self.form = form
        if message is None:
            message = self.default_message()
        super().__init__(message)

    def default_message(self) -> str:
        return f"Invalid {self.domain} code: {self.raw!r}"


class InvalidCode(CodeError):
    """The raw input does not match the lexical shape of the requested form."""

    def default_message(self) -> str:
        if self.form:
            return f"Invalid {self.domain} {self.form} code: {self.raw!r}"
        return f"Invalid {self.domain} code: {self.raw!r}"


class UnknownCode(CodeError, LookupError):
    """The raw input is well-formed but not assigned to any entity."""

    def default_message(self) -> str:
        if self.form:
            return f"Unknown {self.domain} {self.form} code: {self.raw!r}"
        return f"Unknown {self.domain} code: {self.raw!r}"
