"""Application configuration: file locations and colour theme."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, replace
from typing import Optional

import yaml

from .aes import default_key_filename
from .applog import default_log_filename, log_error

VERSION = "0.2.3"
TOMB_CONFIG = "~/.tomb.config.yaml"
TOMB_FILE = "~/.tomb.yaml"


class ConfigError(Exception):
    """Raised when the configuration cannot be read or written."""


def default_tomb_config_filename() -> str:
    """Return the config path from ``TOMB_CONFIG``, or the builtin default."""
    filename = os.environ.get("TOMB_CONFIG")
    if filename is None:
        return TOMB_CONFIG
    return os.path.expanduser(filename)


def default_tomb_filename() -> str:
    """Return the secrets file path from ``TOMB_FILE``, or the builtin default."""
    filename = os.environ.get("TOMB_FILE")
    if filename is None:
        return TOMB_FILE
    return os.path.expanduser(filename)


@dataclass
class ColorTheme:
    """Colours of the terminal interface, as names or RGB hex strings."""

    default: str
    light: str
    blurred: str
    default_fg: str
    default_bg: str
    error_fg: str
    error_bg: str

    @classmethod
    def builtin(cls) -> "ColorTheme":
        return cls(
            default="#4f5d75",
            light="#ffd400",
            blurred="#998a63",
            default_fg="#f5cb5c",
            default_bg="#001219",
            error_fg="#ff7f51",
            error_bg="#242423",
        )


@dataclass
class TombConfig:
    """Locations of the key, secrets and log files plus the colour theme."""

    colors: ColorTheme
    key_filename: str
    tomb_filename: str
    log_filename: str
    version: Optional[str] = None

    @classmethod
    def create(
        cls,
        key_filename: str,
        tomb_filename: str,
        log_filename: str,
        colors: ColorTheme,
    ) -> "TombConfig":
        return cls(
            colors=colors,
            key_filename=key_filename,
            tomb_filename=tomb_filename,
            log_filename=log_filename,
            version=VERSION,
        )

    @classmethod
    def builtin(cls) -> "TombConfig":
        return cls.create(
            default_key_filename(),
            default_tomb_filename(),
            default_log_filename(),
            ColorTheme.builtin(),
        )

    @classmethod
    def from_file(cls, filename: str) -> "TombConfig":
        """Read a configuration from a YAML file."""
        try:
            with open(os.path.expanduser(filename), encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        except OSError as error:
            raise ConfigError(f"cannot read config {filename}: {error}") from error
        except yaml.YAMLError as error:
            raise ConfigError(f"cannot parse config {filename}: {error}") from error
        if not isinstance(data, dict) or not isinstance(data.get("colors"), dict):
            raise ConfigError(f"invalid config {filename}")
        try:
            colors = ColorTheme(**{k: str(v) for k, v in data["colors"].items()})
            version = data.get("version")
            return cls(
                colors=colors,
                key_filename=str(data["key_filename"]),
                tomb_filename=str(data["tomb_filename"]),
                log_filename=str(data["log_filename"]),
                version=None if version is None else str(version),
            )
        except (KeyError, TypeError) as error:
            raise ConfigError(f"invalid config {filename}: {error}") from error

    @classmethod
    def load(cls) -> "TombConfig":
        """Read the default config file, falling back to the builtin config."""
        try:
            return cls.from_file(default_tomb_config_filename())
        except ConfigError:
            return cls.builtin()

    def export(self, filename: str) -> None:
        """Write the configuration to a YAML file."""
        try:
            with open(os.path.expanduser(filename), "w", encoding="utf-8") as fh:
                yaml.safe_dump(asdict(self), fh, sort_keys=False)
        except OSError as error:
            raise ConfigError(str(error)) from error

    def set_colors(self, colors: ColorTheme) -> None:
        self.colors = replace(colors)

    def save(self) -> None:
        """Write the configuration to the default config file."""
        filename = default_tomb_config_filename()
        try:
            self.export(filename)
        except ConfigError as error:
            raise ConfigError(f"cannot save config {filename}: {error}") from error
        log_error(f"config saved: {filename}")