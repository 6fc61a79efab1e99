"""Naming rule for custom variants."""

from __future__ import annotations

import re

from variantcore.parser.errors import InvalidCustomVariantNameError

__all__ = ["is_valid_variant_name", "validate_variant_name"]

# Lowercase ASCII letters and digits, hyphens allowed only inside.
_NAME_RE = re.compile(r"^[a-z0-9](?:[a-z0-9-]*[a-z0-9])?$")


def is_valid_variant_name(name: str) -> bool:
    """Return True if *name* may be registered as a custom variant."""
    return bool(_NAME_RE.fullmatch(name))


def validate_variant_name(name: str) -> str:
    """Return *name* unchanged, or raise :class:`InvalidCustomVariantNameError`."""
    if not is_valid_variant_name(name):
        raise InvalidCustomVariantNameError(name)
    return name
