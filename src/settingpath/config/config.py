"""Configuration management for setting-path."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from settingpath.config.paths import default_config_path
from settingpath.platform.logging import logger

SEPARATOR_DEFAULT = "pipe"
NOTIFICATION_DELAY_SECONDS_DEFAULT = 1.0


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Separator style used between path segments (see PathSeparator)
    separator: str = SEPARATOR_DEFAULT

    # Append the adjacent widget value after labels ending with ":"
    include_adjacent_value: bool = True

    # Notification shown after a path was copied
    show_notification: bool = True
    notification_delay_seconds: float = NOTIFICATION_DELAY_SECONDS_DEFAULT

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(content, encoding="utf-8")
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# setting-path Configuration File")
        lines.append("")

        lines.append("# Separator placed between path segments")
        lines.append("# One of: pipe, arrow, unicode_arrow, guillemet, triangle")
        lines.append(f"separator = {self._format_toml_value(config['separator'])}")
        lines.append("")

        lines.append("# Append the value of the adjacent widget after labels ending with ':'")
        lines.append('# Example: "Insert imports on paste: Ask"')
        lines.append(
            f"include_adjacent_value = {self._format_toml_value(config['include_adjacent_value'])}"
        )
        lines.append("")

        lines.append("# Show a short notification with the copied path")
        lines.append(
            f"show_notification = {self._format_toml_value(config['show_notification'])}"
        )
        lines.append("# Seconds before the notification is dismissed")
        lines.append(
            "notification_delay_seconds = "
            f"{self._format_toml_value(config['notification_delay_seconds'])}"
        )
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/settingpath.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                # Ensure new fields have defaults if absent (backward compatibility)
                _ = config_dict.setdefault("separator", SEPARATOR_DEFAULT)
                _ = config_dict.setdefault("include_adjacent_value", True)
                _ = config_dict.setdefault("show_notification", True)
                _ = config_dict.setdefault(
                    "notification_delay_seconds", NOTIFICATION_DELAY_SECONDS_DEFAULT
                )

                known = {f.name for f in fields(cls)}
                unknown = sorted(key for key in config_dict if key not in known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                config_dict = {key: value for key, value in config_dict.items() if key in known}

                if not str(config_dict.get("log_file") or "").strip():
                    config_dict["log_file"] = None

                logger.info("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
