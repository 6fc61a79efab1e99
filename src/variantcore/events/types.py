"""Event types emitted by the registry and the engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CustomVariantRegistered:
    name: str
    version: int
    replaced: bool


@dataclass(frozen=True)
class CustomVariantUnregistered:
    name: str
    version: int


@dataclass(frozen=True)
class BreakpointChanged:
    name: str
    min_width: int | None
    version: int


@dataclass(frozen=True)
class TokenResolved:
    token: str
    specificity: int
    cached: bool


@dataclass(frozen=True)
class TokenRejected:
    token: str
    error: str
    message: str
    cached: bool


@dataclass(frozen=True)
class CacheCleared:
    entries: int
