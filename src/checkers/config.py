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


@dataclass
class LoggingSettings:
    """Logging settings."""
    level: str = "WARNING"  # DEBUG, INFO, WARNING, ERROR
    log_file: str = ""  # empty = console only


@dataclass
class DisplaySettings:
    """Text board symbols."""
    p1_man: str = "o"
    p1_king: str = "O"
    p2_man: str = "x"
    p2_king: str = "X"
    empty_dark: str = "."
    empty_light: str = " "
    highlight: str = "*"
    show_coordinates: bool = True


@dataclass
class PlayerSettings:
    """Player display names."""
    p1_name: str = "Player 1"
    p2_name: str = "Player 2"


@dataclass
class Config:
    """Main configuration class."""
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    players: PlayerSettings = field(default_factory=PlayerSettings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'logging': asdict(self.logging),
            'display': asdict(self.display),
            'players': asdict(self.players),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        config = cls()

        if 'logging' in data:
            config.logging = LoggingSettings(**data['logging'])
        if 'display' in data:
            config.display = DisplaySettings(**data['display'])
        if 'players' in data:
            config.players = PlayerSettings(**data['players'])

        return config

    def player_name(self, player: int) -> str:
        """Display name for a player number."""
        return self.players.p1_name if int(player) == 1 else self.players.p2_name

    def save(self, path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = get_config_file()

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration from file."""
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
        except (OSError, yaml.YAMLError, TypeError) as e:
            logger.warning("Failed to load config %s: %s", path, e)
            return cls()


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def set_config(config: Config) -> None:
    """Replace the global configuration instance."""
    global _config
    _config = config


def reset_config(path: Optional[Path] = None) -> Config:
    """Reset configuration to defaults and write them to the settings file."""
    global _config
    _config = Config()
    _config.save(path)
    return _config
