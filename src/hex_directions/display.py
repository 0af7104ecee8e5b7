from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib.resources import files as resource_files
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .directions import Direction, all_directions, from_label
from .exceptions import DirectionNotFound, DisplayConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayTags:
    container: str
    sprite: str


class DisplayConfig:
    """Display identifiers for each direction, as read by presentation code.

    Every direction always has an entry; anything not overridden falls back
    to the tags built into :class:`Direction`.
    """

    __slots__ = ("_tags",)

    def __init__(self, overrides: Optional[Mapping[Direction, DisplayTags]] = None) -> None:
        tags: Dict[Direction, DisplayTags] = {
            d: DisplayTags(container=d.display_tag, sprite=d.sprite_tag) for d in all_directions()
        }
        if overrides:
            for direction, entry in overrides.items():
                if not isinstance(direction, Direction):
                    raise DisplayConfigError(f"Display override key must be a Direction, got {direction!r}")
                if not isinstance(entry, DisplayTags):
                    raise DisplayConfigError(
                        f"Display override for {direction.label} must be DisplayTags, got {entry!r}"
                    )
                tags[direction] = entry
        self._tags = MappingProxyType(tags)

    @classmethod
    def defaults(cls) -> "DisplayConfig":
        return cls()

    @property
    def tags(self) -> Mapping[Direction, DisplayTags]:
        return self._tags

    def tags_for(self, direction: Direction) -> DisplayTags:
        return self._tags[direction]

    def container_for(self, direction: Direction) -> str:
        return self._tags[direction].container

    def sprite_for(self, direction: Direction) -> str:
        return self._tags[direction].sprite


def _read_text(path: Optional[str]) -> str:
    if path is None:
        data = resource_files("hex_directions.data").joinpath("display.yaml").read_text(encoding="utf-8")
        logger.debug("Loaded embedded display config resource")
        return data
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
    except OSError as exc:
        raise DisplayConfigError(f"Cannot read display config {path}: {exc}") from exc
    logger.debug("Loaded display config from path: %s", path)
    return data


def _parse_entry(label: Any, entry: Any) -> Tuple[Direction, DisplayTags]:
    try:
        direction = from_label(str(label))
    except DirectionNotFound as exc:
        raise DisplayConfigError(f"Unknown direction in display config: {label!r}") from exc

    if entry is None:
        entry = {}
    if not isinstance(entry, dict):
        raise DisplayConfigError(f"Display entry for {label} must be a mapping, got {type(entry).__name__}")

    container = entry.get("container", direction.display_tag)
    sprite = entry.get("sprite", direction.sprite_tag)
    for key, value in (("container", container), ("sprite", sprite)):
        if not isinstance(value, str):
            raise DisplayConfigError(f"Display {key} for {label} must be a string, got {value!r}")
    return direction, DisplayTags(container=container, sprite=sprite)


def load_display_config(path: Optional[str] = None) -> DisplayConfig:
    """Load display tags from YAML.

    If path is None, loads the embedded default resource at
    hex_directions/data/display.yaml. The expected layout is::

        directions:
          NorthWest:
            container: NWest
            sprite: LineNW

    Directions or fields left out keep their built-in tags.
    """
    data = _read_text(path)
    try:
        raw = yaml.safe_load(data) or {}
    except yaml.YAMLError as exc:
        raise DisplayConfigError(f"Failed to parse display config: {exc}") from exc

    if not isinstance(raw, dict):
        raise DisplayConfigError("Display config must be a mapping at the top level")
    section = raw.get("directions") or {}
    if not isinstance(section, dict):
        raise DisplayConfigError("'directions' must map direction labels to display entries")

    overrides = dict(_parse_entry(label, entry) for label, entry in section.items())
    logger.info("Display config: %d direction override(s) applied", len(overrides))
    return DisplayConfig(overrides)
