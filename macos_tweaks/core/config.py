"""User configuration (colour scheme, theme, shell)."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV = "MACOS_TWEAKS_CONFIG"
CONFIG_DIR = Path.home() / ".config" / "macos-tweaks"
CONFIG_PATH = CONFIG_DIR / "config.yaml"

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")
FALLBACK_COLOR = "white"


@dataclass
class ColorScheme:
    primary: str = "#fe640b"
    secondary: str = "#ffffff"
    accent: str = "#00ff00"
    success: str = "#00ff00"
    warning: str = "#ffa500"
    error: str = "#ff0000"
    text: str = "#ffffff"
    text_dim: str = "#808080"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ColorScheme":
        known = {f.name for f in fields(cls)}
        return cls(**{k: str(v) for k, v in data.items() if k in known})

    @staticmethod
    def hex_to_rgb(value: str) -> Optional[tuple[int, int, int]]:
        m = _HEX_RE.match(value.strip())
        if not m:
            return None
        digits = m.group(1)
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)

    def get_color(self, name: str) -> str:
        """Return a Rich colour string for slot ``name``.

        Unknown slots fall back to ``primary``; values that are not ``#rrggbb``
        fall back to white.
        """
        slots = {f.name for f in fields(self)}
        value = getattr(self, name) if name in slots else self.primary
        rgb = self.hex_to_rgb(value)
        if rgb is None:
            return FALLBACK_COLOR
        return "#{:02x}{:02x}{:02x}".format(*rgb)


@dataclass
class TweaksConfig:
    """Represents the persisted user configuration."""

    color_scheme: ColorScheme = field(default_factory=ColorScheme)
    theme: str = "default"
    shell: str = "zsh"
    path: Optional[Path] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: Optional[Path] = None) -> "TweaksConfig":
        scheme = data.get("color_scheme") or {}
        if not isinstance(scheme, dict):
            raise ValueError("color_scheme must be a mapping")
        return cls(
            color_scheme=ColorScheme.from_dict(scheme),
            theme=str(data.get("theme", "default")),
            shell=str(data.get("shell", "zsh")),
            path=path,
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "TweaksConfig":
        data = yaml.safe_load(Path(path).read_text())
        if not isinstance(data, dict):
            raise ValueError("Configuration root must be a mapping")
        return cls.from_dict(data, path=Path(path))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "color_scheme": asdict(self.color_scheme),
            "theme": self.theme,
            "shell": self.shell,
        }

    def save(self, path: str | Path | None = None) -> None:
        target = Path(path) if path else (self.path or default_config_path())
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(yaml.safe_dump(self.to_dict(), sort_keys=False))
        except OSError as e:
            logger.warning("Could not write config %s: %s", target, e)

    def get_color(self, name: str) -> str:
        return self.color_scheme.get_color(name)


def default_config_path() -> Path:
    env = os.environ.get(CONFIG_ENV)
    return Path(env) if env else CONFIG_PATH


def load(path: str | Path | None = None) -> TweaksConfig:
    """Load the config, writing defaults back when the file is missing or bad."""
    target = Path(path) if path else default_config_path()
    try:
        return TweaksConfig.from_file(target)
    except FileNotFoundError:
        logger.info("No config at %s, creating defaults", target)
    except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
        logger.warning("Invalid config %s (%s), restoring defaults", target, e)

    config = TweaksConfig(path=target)
    config.save()
    return config
