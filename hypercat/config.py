"""Configuration management for hypercat.

Configuration is loaded from a TOML file with environment variable overrides.

Configuration Resolution Order:
1. Environment variables (highest priority)
2. TOML config file
3. Output profile defaults

Example config.toml:

    [output]
    profile = "pretty"
    ensure_ascii = false

    [logging]
    level = "debug"
    file = "/tmp/hypercat.log"
"""

import os
import sys
from pathlib import Path
from typing import Optional, Any

# Python 3.11+ has tomllib in stdlib, otherwise use tomli
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


def load_toml_config(config_path: Path) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config.toml file

    Returns:
        Dictionary with configuration sections

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is invalid TOML
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from e


def get_config_path(config_override: Optional[Path] = None) -> Path:
    """Get configuration file path.

    Args:
        config_override: Optional explicit config path

    Returns:
        Path to configuration file. HYPERCAT_CONFIG wins over the override,
        which wins over ~/.config/hypercat/config.toml.
    """
    env_path = os.environ.get("HYPERCAT_CONFIG")
    if env_path:
        return Path(env_path)
    if config_override:
        return config_override
    return Path.home() / ".config/hypercat/config.toml"


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class OutputProfile:
    """Named JSON output presets."""

    PROFILES = {
        "compact": {
            "indent": None,
            "separators": (",", ":"),
        },
        "pretty": {
            "indent": 2,
            "separators": (",", ": "),
        },
    }

    @classmethod
    def get_profile(cls, name: str) -> dict[str, Any]:
        """Get output profile settings.

        Args:
            name: Profile name (compact or pretty)

        Returns:
            Dictionary with profile settings

        Raises:
            ValueError: If profile name is unknown
        """
        if name not in cls.PROFILES:
            raise ValueError(
                f"Unknown output profile: {name}. "
                f"Available: {list(cls.PROFILES.keys())}"
            )
        return cls.PROFILES[name].copy()


class Settings:
    """Settings for encoding and logging.

    Attributes:
        output_profile: Name of the applied OutputProfile
        indent: JSON indent for encoded catalogues (None for single line)
        separators: JSON item/key separators
        ensure_ascii: Escape non-ASCII characters in encoded output
        log_level: Level name for setup_logging
        log_file: Optional log file path for setup_logging
    """

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize settings.

        Args:
            config_path: Optional explicit path to config.toml
        """
        self._config: dict[str, Any] = {}

        config_path = get_config_path(config_path)

        if config_path.exists():
            try:
                self._config = load_toml_config(config_path)
            except ValueError as e:
                # Warn but continue with defaults
                import warnings
                warnings.warn(f"Failed to load config from {config_path}: {e}")

        self._apply_config()

    def _apply_config(self):
        """Apply profile defaults, then TOML values, then env var overrides."""
        output_config = self._config.get("output", {})
        logging_config = self._config.get("logging", {})

        self.output_profile = os.environ.get(
            "HYPERCAT_OUTPUT_PROFILE",
            output_config.get("profile", "compact")
        )
        for key, value in OutputProfile.get_profile(self.output_profile).items():
            setattr(self, key, value)

        # env var > TOML > profile
        indent_env = os.environ.get("HYPERCAT_JSON_INDENT")
        if indent_env is not None:
            try:
                self.indent = int(indent_env) if indent_env.strip() else None
            except ValueError:
                # Warn but keep the profile/TOML indent
                import warnings
                warnings.warn(
                    f"Ignoring HYPERCAT_JSON_INDENT={indent_env!r}: not an integer"
                )
                self.indent = output_config.get("indent", self.indent)
        elif "indent" in output_config:
            self.indent = output_config["indent"]

        ensure_ascii_env = os.environ.get("HYPERCAT_ENSURE_ASCII")
        if ensure_ascii_env is not None:
            self.ensure_ascii = _parse_bool(ensure_ascii_env)
        else:
            self.ensure_ascii = bool(output_config.get("ensure_ascii", False))

        self.log_level = os.environ.get(
            "HYPERCAT_LOG_LEVEL",
            logging_config.get("level", "warning")
        )

        log_file = os.environ.get("HYPERCAT_LOG_FILE", logging_config.get("file"))
        self.log_file = Path(log_file) if log_file else None

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return getattr(self, key, default)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide Settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
