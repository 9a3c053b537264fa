"""Display styles and their persistence."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from pathlib import Path
from typing import Any

CONFIG_FILE = "config.json"


class ConfigError(ValueError):
    """Raised when a saved configuration cannot be read."""


class Color(Enum):
    RESET = "Reset"
    BLACK = "Black"
    RED = "Red"
    GREEN = "Green"
    YELLOW = "Yellow"
    BLUE = "Blue"
    MAGENTA = "Magenta"
    CYAN = "Cyan"
    GRAY = "Gray"
    DARK_GRAY = "DarkGray"
    LIGHT_RED = "LightRed"
    LIGHT_GREEN = "LightGreen"
    LIGHT_YELLOW = "LightYellow"
    LIGHT_BLUE = "LightBlue"
    LIGHT_MAGENTA = "LightMagenta"
    LIGHT_CYAN = "LightCyan"
    WHITE = "White"


class Modifier(Flag):
    NONE = 0
    BOLD = auto()
    DIM = auto()
    ITALIC = auto()
    UNDERLINED = auto()
    SLOW_BLINK = auto()
    RAPID_BLINK = auto()
    REVERSED = auto()
    HIDDEN = auto()
    CROSSED_OUT = auto()


def _modifier_to_text(mod: Modifier) -> str:
    return " | ".join(m.name for m in Modifier if m.value and m in mod)


def _modifier_from_text(text: str) -> Modifier:
    result = Modifier.NONE
    for part in text.split("|"):
        name = part.strip()
        if not name:
            continue
        try:
            result |= Modifier[name]
        except KeyError as exc:
            raise ConfigError(f"unknown modifier: {name!r}") from exc
    return result


def _color_from(value: Any) -> Color | None:
    if value is None:
        return None
    try:
        return Color(value)
    except ValueError as exc:
        raise ConfigError(f"unknown color: {value!r}") from exc


@dataclass(frozen=True)
class Style:
    fg: Color | None = None
    bg: Color | None = None
    add_modifier: Modifier = Modifier.NONE
    sub_modifier: Modifier = Modifier.NONE

    def to_dict(self) -> dict[str, Any]:
        return {
            "fg": self.fg.value if self.fg else None,
            "bg": self.bg.value if self.bg else None,
            "add_modifier": _modifier_to_text(self.add_modifier),
            "sub_modifier": _modifier_to_text(self.sub_modifier),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Style:
        if not isinstance(data, dict):
            raise ConfigError("a style must be a JSON object")
        return cls(
            fg=_color_from(data.get("fg")),
            bg=_color_from(data.get("bg")),
            add_modifier=_modifier_from_text(data.get("add_modifier", "")),
            sub_modifier=_modifier_from_text(data.get("sub_modifier", "")),
        )


DEFAULT_UNSELECTED_STYLE = Style(fg=Color.WHITE)
DEFAULT_SELECTED_STYLE = Style(fg=Color.GREEN)
DEFAULT_SELECTED_STYLE_2 = Style(fg=Color.YELLOW)
DEFAULT_GREYED_STYLE = Style(fg=Color.DARK_GRAY)

_SAVED_FIELDS = ("selected_style", "selected_style_2", "unselected_style", "greyed_style")


@dataclass
class ConfigData:
    selected_style: Style = DEFAULT_SELECTED_STYLE
    selected_style_2: Style = DEFAULT_SELECTED_STYLE_2
    unselected_style: Style = DEFAULT_UNSELECTED_STYLE
    greyed_style: Style = DEFAULT_GREYED_STYLE
    prompt_style: Style | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        """Return the saved fields; the prompt style is never saved."""
        return {name: getattr(self, name).to_dict() for name in _SAVED_FIELDS}

    def save(self, path: Path | str) -> None:
        """Write the configuration to ``config.json`` inside ``path``."""
        (Path(path) / CONFIG_FILE).write_text(json.dumps(self.to_dict()), encoding="utf-8")

    @classmethod
    def load(cls, path: Path | str) -> ConfigData:
        """Read ``config.json`` from ``path``; defaults if it cannot be read."""
        try:
            text = (Path(path) / CONFIG_FILE).read_text(encoding="utf-8")
        except OSError:
            return cls()
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"invalid configuration: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError("configuration must be a JSON object")
        missing = [name for name in _SAVED_FIELDS if name not in data]
        if missing:
            raise ConfigError(f"missing field: {missing[0]}")
        return cls(**{name: Style.from_dict(data[name]) for name in _SAVED_FIELDS})

    def resolved_prompt_style(self) -> Style:
        """Return the prompt style, falling back to the selected style."""
        return self.prompt_style if self.prompt_style is not None else self.selected_style

    def reset_styles(self) -> None:
        self.prompt_style = None