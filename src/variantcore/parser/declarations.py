"""Reader for variant declaration files.

Two at-rules are understood, everything else is a syntax error::

    /* custom variants: a selector (``&`` is the element) or a media rule */
    @custom-variant theme-midnight (&:where([data-theme=midnight] *));
    @custom-variant pointer-fine (@media (pointer: fine));

    /* breakpoints; other theme variables are ignored */
    @theme {
      --breakpoint-3xl: 120rem;
      --breakpoint-tablet: 700px;
    }
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from variantcore.model.definition import CustomVariant
from variantcore.parser.errors import DeclarationError
from variantcore.registry.names import is_valid_variant_name

__all__ = ["Declarations", "parse_declarations", "load_declarations"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_BREAKPOINT_PREFIX = "--breakpoint-"
_REM_PX = 16


@dataclass(frozen=True)
class Declarations:
    """Custom variants and breakpoints read from a declaration file."""

    custom_variants: list[CustomVariant] = field(default_factory=list)
    breakpoints: dict[str, int] = field(default_factory=dict)


def _length_to_px(name: str, raw: str) -> int:
    """Convert a ``px`` or ``rem`` length to whole pixels."""
    value = raw.strip()
    try:
        if value.endswith("px"):
            px = float(value[:-2])
        elif value.endswith("rem"):
            px = float(value[:-3]) * _REM_PX
        else:
            raise ValueError(value)
    except ValueError:
        raise DeclarationError(
            f"Breakpoint {name!r} must be a px or rem length, got {value!r}"
        ) from None
    if px <= 0:
        raise DeclarationError(f"Breakpoint {name!r} must be positive, got {value!r}")
    return int(round(px))


def _custom_from_body(name: str, body: str) -> CustomVariant:
    """Build a custom variant from the parenthesised body of ``@custom-variant``."""
    if body.startswith("@media"):
        query = body[len("@media"):].strip()
        if not query:
            raise DeclarationError(f"Custom variant {name!r} has an empty @media rule")
        return CustomVariant(name=name, selector="", media_query=query)
    if body.startswith("@"):
        raise DeclarationError(
            f"Custom variant {name!r} uses an unsupported at-rule: {body.split()[0]}"
        )
    if not body:
        raise DeclarationError(f"Custom variant {name!r} has an empty selector")
    return CustomVariant(name=name, selector=body)


def _check_name(token: object, what: str, name: str | None = None) -> None:
    """Apply the variant naming rule, reporting the token's position."""
    name = str(token) if name is None else name
    if not is_valid_variant_name(name):
        raise DeclarationError(
            f"Invalid {what} name {name!r}: use lowercase letters, digits "
            "and internal hyphens",
            line=getattr(token, "line", None),
            column=getattr(token, "column", None),
        )


class DeclarationTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a declaration parse tree into :class:`Declarations`."""

    def group(self, items: list[object]) -> str:
        return "(" + "".join(str(item) for item in items) + ")"

    def custom_variant(self, items: list[object]) -> CustomVariant:
        _check_name(items[0], "custom variant")
        name = str(items[0])
        body = str(items[1])[1:-1].strip()
        return _custom_from_body(name, body)

    def declaration(self, items: list[Token]) -> tuple[Token, str]:
        return (items[0], str(items[1]).strip())

    def theme(self, items: list[tuple[Token, str]]) -> dict[str, int]:
        breakpoints: dict[str, int] = {}
        for prop, value in items:
            if not prop.startswith(_BREAKPOINT_PREFIX):
                logger.debug("Ignoring theme variable %s", prop)
                continue
            name = prop[len(_BREAKPOINT_PREFIX):]
            _check_name(prop, "breakpoint", name)
            breakpoints[name] = _length_to_px(name, value)
        return breakpoints

    def start(self, items: list[object]) -> Declarations:
        customs: list[CustomVariant] = []
        breakpoints: dict[str, int] = {}
        for item in items:
            if isinstance(item, CustomVariant):
                customs.append(item)
            elif isinstance(item, dict):
                breakpoints.update(item)
        return Declarations(custom_variants=customs, breakpoints=breakpoints)


@functools.lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_declarations(source: str) -> Declarations:
    """Parse declaration source text."""
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise DeclarationError(str(e), line=line, column=column) from e
    try:
        return DeclarationTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, DeclarationError):
            raise e.orig_exc from None
        raise


def load_declarations(path: str | Path) -> Declarations:
    """Read and parse a declaration file."""
    return parse_declarations(Path(path).read_text(encoding="utf-8"))
