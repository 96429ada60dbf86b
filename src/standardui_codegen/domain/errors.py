#!/usr/bin/env python3

"""Generation errors.

Every error carries the name of the declaration or member that violated an
invariant so the driver can surface it verbatim.
"""


class CodegenError(Exception):
    """Base exception for all generation failures."""

    def __init__(self, message: str, subject: str | None = None) -> None:
        super().__init__(message)
        self.subject = subject


class NamingError(CodegenError):
    """Raised when a declaration name lacks the marker letter."""

    pass


class ConfigurationError(CodegenError):
    """Raised for malformed or unregistered configuration input."""

    pass


class StructuralError(CodegenError):
    """Raised when a declaration is structurally malformed."""

    pass
