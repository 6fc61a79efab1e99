"""Configuration: breakpoints, custom variants and cache settings.

Configuration comes from a JSON file::

    {
      "breakpoints": {"sm": 640, "md": 768, "tablet": 700},
      "custom_variants": [
        {"name": "hocus", "selector": ":hover", "specificity": 80}
      ],
      "declarations": "variants.css",
      "cache_size": 1024
    }

or directly from a declaration file (``.css``) read by
:mod:`variantcore.parser.declarations`.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from variantcore.engine.engine import VariantEngine
from variantcore.events.bus import EventBus
from variantcore.model.definition import CustomVariant
from variantcore.parser.declarations import load_declarations
from variantcore.parser.errors import ConfigError
from variantcore.registry.names import is_valid_variant_name
from variantcore.registry.registry import VariantRegistry
from variantcore.registry.standard import DEFAULT_BREAKPOINTS

logger = logging.getLogger(__name__)

_CUSTOM_KEYS = {"name", "selector", "media_query", "specificity", "combinable", "dependencies"}


@dataclass(frozen=True)
class EngineConfig:
    breakpoints: dict[str, int] = field(default_factory=lambda: dict(DEFAULT_BREAKPOINTS))
    custom_variants: tuple[CustomVariant, ...] = ()
    cache_size: int = 1024


def _parse_custom(entry: Any, index: int) -> CustomVariant:
    if not isinstance(entry, dict):
        raise ConfigError(f"custom_variants[{index}] must be an object")
    unknown = set(entry) - _CUSTOM_KEYS
    if unknown:
        raise ConfigError(
            f"custom_variants[{index}] has unknown keys: {', '.join(sorted(unknown))}"
        )
    if "name" not in entry:
        raise ConfigError(f"custom_variants[{index}] is missing 'name'")
    if not is_valid_variant_name(str(entry["name"])):
        raise ConfigError(f"invalid custom variant name {entry['name']!r}")
    dependencies = entry.get("dependencies", [])
    if not isinstance(dependencies, list):
        raise ConfigError(f"custom variant {entry['name']!r}: 'dependencies' must be a list")
    kwargs: dict[str, Any] = {
        "name": str(entry["name"]),
        "selector": str(entry.get("selector", "")),
        "media_query": entry.get("media_query") or None,
        "combinable": bool(entry.get("combinable", True)),
        "dependencies": tuple(str(dep) for dep in dependencies),
    }
    specificity = entry.get("specificity")
    if specificity is not None:
        if isinstance(specificity, bool) or not isinstance(specificity, int) or specificity < 0:
            raise ConfigError(
                f"custom variant {kwargs['name']!r} needs a non-negative integer specificity"
            )
        kwargs["specificity"] = specificity
    if not kwargs["selector"] and not kwargs["media_query"]:
        raise ConfigError(
            f"custom variant {kwargs['name']!r} needs a selector or a media_query"
        )
    return CustomVariant(**kwargs)


def _parse_breakpoints(raw: Any) -> dict[str, int]:
    if not isinstance(raw, dict):
        raise ConfigError("'breakpoints' must be an object of name -> pixels")
    breakpoints: dict[str, int] = {}
    for name, width in raw.items():
        if not is_valid_variant_name(str(name)):
            raise ConfigError(f"invalid breakpoint name {name!r}")
        if isinstance(width, bool) or not isinstance(width, (int, float)):
            raise ConfigError(f"breakpoint {name!r} must be a number of pixels")
        if int(width) <= 0:
            raise ConfigError(f"breakpoint {name!r} must be a positive width, got {width}")
        breakpoints[str(name)] = int(width)
    return breakpoints


def config_from_dict(data: dict[str, Any], base_dir: Path | None = None) -> EngineConfig:
    """Build an :class:`EngineConfig` from decoded JSON."""
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a JSON object")

    breakpoints = dict(DEFAULT_BREAKPOINTS)
    if "breakpoints" in data:
        breakpoints = _parse_breakpoints(data["breakpoints"])

    customs = [
        _parse_custom(entry, i) for i, entry in enumerate(data.get("custom_variants", []))
    ]

    declarations_path = data.get("declarations")
    if declarations_path:
        path = Path(declarations_path)
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
        decls = load_declarations(path)
        breakpoints.update(decls.breakpoints)
        customs.extend(decls.custom_variants)

    cache_size = data.get("cache_size", 1024)
    if isinstance(cache_size, bool) or not isinstance(cache_size, int) or cache_size < 0:
        raise ConfigError("'cache_size' must be a non-negative integer")

    return EngineConfig(
        breakpoints=breakpoints,
        custom_variants=tuple(customs),
        cache_size=cache_size,
    )


def load_config(path: str | Path) -> EngineConfig:
    """Load configuration from a JSON file or a ``.css`` declaration file."""
    config_path = Path(path)
    if config_path.suffix == ".css":
        decls = load_declarations(config_path)
        breakpoints = dict(DEFAULT_BREAKPOINTS)
        breakpoints.update(decls.breakpoints)
        return EngineConfig(
            breakpoints=breakpoints, custom_variants=tuple(decls.custom_variants)
        )
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{config_path}: invalid JSON: {exc}") from exc
    logger.debug("Loaded configuration from %s", config_path)
    return config_from_dict(data, base_dir=config_path.parent)


def build_registry(config: EngineConfig, event_bus: EventBus | None = None) -> VariantRegistry:
    """Create a registry holding the configured breakpoints and custom variants."""
    registry = VariantRegistry(config.breakpoints, event_bus=event_bus)
    for custom in config.custom_variants:
        registry.register(
            custom.name,
            custom.selector,
            media_query=custom.media_query,
            specificity=custom.specificity,
            combinable=custom.combinable,
            dependencies=custom.dependencies,
        )
    return registry


def build_engine(config: EngineConfig | None = None, event_bus: EventBus | None = None) -> VariantEngine:
    """Create an engine over a registry built from *config* (defaults if None)."""
    config = config or EngineConfig()
    registry = build_registry(config, event_bus=event_bus)
    return VariantEngine(registry, cache_size=config.cache_size or None)
