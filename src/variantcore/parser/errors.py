"""Error types raised while splitting, resolving and validating tokens."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from variantcore.model.diagnostic import Diagnostic


class VariantError(Exception):
    """Base class for every error raised by variantcore."""


class TokenSyntaxError(VariantError):
    """Raised when a token is malformed (empty segment, unbalanced brackets)."""

    def __init__(self, token: str, reason: str) -> None:
        self.token = token
        self.reason = reason
        super().__init__(f"Malformed token {token!r}: {reason}")


class UnknownVariantError(VariantError):
    """Raised when a segment matches no standard, custom or breakpoint variant."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown variant: {name!r}")


class InvalidCombinationError(VariantError):
    """Raised when a combination breaks a mutual exclusion, cardinality or dependency rule."""

    def __init__(
        self, reason: str, diagnostics: list[Diagnostic] | None = None
    ) -> None:
        self.reason = reason
        self.diagnostics = list(diagnostics or [])
        super().__init__(reason)


class InvalidCustomVariantNameError(VariantError):
    """Raised when a custom variant name breaks the naming rule."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Invalid custom variant name {name!r}: use lowercase letters, digits "
            "and internal hyphens"
        )


class DeclarationError(VariantError):
    """Raised when a variant declaration file cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class ConfigError(VariantError):
    """Raised when a configuration file is missing keys or has bad values."""
