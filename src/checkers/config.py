"""Configuration management for the checkers engine."""

import os
import logging
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field, asdict

logger = logging.getLogger(__name__)


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
LOG_FORMAT_DETAILED = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# =============================================================================
# SETTINGS FILE
# =============================================================================

def get_config_dir() -> Path:
    """Get the configuration directory."""
    # Use XDG on Linux/WSL, or fallback
    if os.name == 'nt':
        config_base = Path(os.environ.get('APPDATA', Path.home() / 'AppData' / 'Roaming'))
    else:
        config_base = Path(os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config'))

    return config_base / 'checkers'


def get_config_file() -> Path:
    """Get the configuration file path."""
    return get_config_dir() / 'settings.yaml'


def _require_bool(name: str, value: Any) -> bool:
    # YAML booleans only; a quoted "false" is a string
    if not isinstance(value, bool):
        raise TypeError(f"Setting '{name}' must be true or false, got {value!r}")
    return value


def _require_bools(settings):
    for name, value in asdict(settings).items():
        _require_bool(name, value)
    return settings


@dataclass
class RuleSettings:
    """Game rule settings."""
    # Require an empty landing square and an opposing piece to jump
    strict_capture: bool = False


@dataclass
class GameSettings:
    """Game-related settings."""
    rules: RuleSettings = field(default_factory=RuleSettings)
    multiplayer: bool = False


@dataclass
class DisplaySettings:
    """Terminal rendering settings."""
    use_color: bool = True


@dataclass
class Config:
    """Main configuration class."""
    game: GameSettings = field(default_factory=GameSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'game': {
                'rules': asdict(self.game.rules),
                'multiplayer': self.game.multiplayer,
            },
            'display': asdict(self.display),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """
        Create config from dictionary.

        Raises:
            TypeError: If a key is unknown or a flag is not a YAML boolean.
        """
        config = cls()

        if 'game' in data:
            game_data = data['game']
            if 'rules' in game_data:
                config.game.rules = _require_bools(RuleSettings(**game_data['rules']))
            if 'multiplayer' in game_data:
                config.game.multiplayer = _require_bool('multiplayer', game_data['multiplayer'])

        if 'display' in data:
            config.display = _require_bools(DisplaySettings(**data['display']))

        return config

    def save(self, path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = get_config_file()

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration from file, falling back to defaults."""
        if path is None:
            path = get_config_file()

        if not path.exists():
            return cls()

        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
            if data is None:
                return cls()
            return cls.from_dict(data)
        except (OSError, yaml.YAMLError, TypeError, AttributeError) as e:
            logger.warning("Failed to load config from %s: %s", path, e)
            return cls()


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def save_config() -> None:
    """Save the global configuration."""
    if _config is not None:
        _config.save()


def reset_config() -> Config:
    """Reset configuration to defaults."""
    global _config
    _config = Config()
    _config.save()
    return _config


def clear_config() -> None:
    """Drop the cached instance so the next get_config() reloads from disk."""
    global _config
    _config = None
