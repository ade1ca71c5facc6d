"""CLI configuration with XDG-compliant paths and environment variable overrides."""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from fireeagle.config import FireEagleConfig
from fireeagle.exceptions import ConfigurationError

# File keys and the environment variables that override them
_OVERRIDES = {
    "consumer_key": "FIREEAGLE_CONSUMER_KEY",
    "consumer_secret": "FIREEAGLE_CONSUMER_SECRET",
    "access_token": "FIREEAGLE_ACCESS_TOKEN",
    "access_token_secret": "FIREEAGLE_ACCESS_TOKEN_SECRET",
}


def _default_config_dir() -> Path:
    """Get XDG-compliant config directory for credentials.

    Uses XDG_CONFIG_HOME if set, otherwise ~/.config/fireeagle-cli.
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "fireeagle-cli"
    return Path.home() / ".config" / "fireeagle-cli"


@dataclass
class CLIConfig:
    """Configuration passed through Typer context.

    Attributes:
        verbose: Enable debug logging.
        config_dir: Directory holding ``credentials.json``.
    """

    verbose: bool = False
    config_dir: Path = field(default_factory=_default_config_dir)

    @property
    def credentials_path(self) -> Path:
        """Get the credentials file path."""
        return self.config_dir / "credentials.json"

    def load_config(self) -> FireEagleConfig:
        """Build a FireEagleConfig from the credentials file and environment.

        Loading priority:
        1. Load from credentials.json in the config directory
        2. Override individual values with environment variables if set

        Raises:
            ConfigurationError: If consumer credentials cannot be determined
        """
        values: dict[str, str | None] = dict.fromkeys(_OVERRIDES)

        if self.credentials_path.exists():
            try:
                with self.credentials_path.open() as f:
                    data = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                raise ConfigurationError(f"Failed to read {self.credentials_path}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigurationError(f"{self.credentials_path} must contain a JSON object")
            values.update({name: data.get(name) for name in _OVERRIDES})

        for name, env_var in _OVERRIDES.items():
            if env_value := os.environ.get(env_var):
                values[name] = env_value

        missing = [name for name in ("consumer_key", "consumer_secret") if not values[name]]
        if missing:
            msg = (
                f"Missing credentials: {', '.join(missing)}. "
                f"Set via environment variables (FIREEAGLE_CONSUMER_KEY, "
                f"FIREEAGLE_CONSUMER_SECRET) or create config file at {self.credentials_path}"
            )
            raise ConfigurationError(msg, field=missing[0])

        return FireEagleConfig(**values)  # type: ignore[arg-type]
