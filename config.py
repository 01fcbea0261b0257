"""
Central configuration for the Checkers application.
Pydantic models for type-safe configuration management.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field, field_validator

from checkers.types import Player, parse_player

ConfigDict = Dict[str, Any]

_TRUE_STRINGS = ("true", "1", "yes", "on")


def _parse_bool(v: Any) -> bool:
    if isinstance(v, str):
        return v.strip().lower() in _TRUE_STRINGS
    return bool(v)


class UISettings(BaseModel):
    """UI display and interaction settings."""

    square_size: int = Field(default=72, ge=24, le=160, description="Pixels per board square")
    ai_move_delay_ms: int = Field(default=750, ge=0, le=10000, description="Computer 'thinking' delay in milliseconds")
    show_coordinates: bool = Field(default=True, description="Show row/column labels on the board")
    highlight_moves: bool = Field(default=True, description="Highlight legal move destinations")

    @field_validator('show_coordinates', 'highlight_moves', mode='before')
    @classmethod
    def validate_bool_fields(cls, v):
        return _parse_bool(v)

    @property
    def continuation_delay_ms(self) -> int:
        """Delay before each further jump of a computer multi-jump."""
        return self.ai_move_delay_ms // 2


class GameRulesSettings(BaseModel):
    """Who plays which side."""

    human_player: str = Field(default="RED", description="Side played by the human (RED or BLACK)")
    ai_seed: Optional[int] = Field(default=None, description="Seed for the computer's random choices")

    @field_validator('human_player', mode='before')
    @classmethod
    def validate_human_player(cls, v):
        return parse_player(v).value

    @property
    def human(self) -> Player:
        return Player(self.human_player)


class LoggingSettings(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_to_file: bool = Field(default=False, description="Write logs to file")
    log_file_path: str = Field(default="checkers.log", description="Log file path")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper


class CheckersConfig(BaseModel):
    """Main configuration model for the Checkers application."""

    ui: UISettings = Field(default_factory=UISettings)
    rules: GameRulesSettings = Field(default_factory=GameRulesSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Metadata
    version: str = Field(default="1.0.0", description="Configuration version")
    config_file: Optional[str] = Field(default=None, description="Path to config file")

    @classmethod
    def from_env(cls) -> 'CheckersConfig':
        """Create configuration from environment variables."""
        seed = os.getenv('CHECKERS_AI_SEED')
        return cls(
            ui=UISettings(
                ai_move_delay_ms=int(os.getenv('CHECKERS_AI_DELAY', '750')),
            ),
            rules=GameRulesSettings(
                human_player=os.getenv('CHECKERS_HUMAN', 'RED'),
                ai_seed=int(seed) if seed else None,
            ),
            logging=LoggingSettings(
                log_level=os.getenv('CHECKERS_LOG_LEVEL', 'INFO'),
                log_to_file=_parse_bool(os.getenv('CHECKERS_LOG_FILE', 'false')),
            )
        )

    def to_dict(self) -> ConfigDict:
        """Convert configuration to dictionary."""
        return {
            'ui': self.ui.model_dump(),
            'rules': self.rules.model_dump(),
            'logging': self.logging.model_dump(),
            'version': self.version,
            'config_file': self.config_file,
        }

    def save_to_file(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        config_dict = self.to_dict()
        config_dict['config_file'] = filepath

        with open(filepath, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> 'CheckersConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        return cls(
            ui=UISettings(**data.get('ui', {})),
            rules=GameRulesSettings(**data.get('rules', {})),
            logging=LoggingSettings(**data.get('logging', {})),
            version=data.get('version', '1.0.0'),
            config_file=filepath,
        )

    def update_from_dict(self, updates: ConfigDict) -> None:
        """Update configuration from dictionary, re-validating each section."""
        for section, settings in updates.items():
            if hasattr(self, section) and isinstance(settings, dict):
                section_model = getattr(self, section)
                merged = {**section_model.model_dump(), **settings}
                setattr(self, section, type(section_model)(**merged))


# Global configuration instance
_config: Optional[CheckersConfig] = None


def get_config() -> CheckersConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = CheckersConfig.from_env()
    return _config


def load_config_from_file(filepath: str) -> CheckersConfig:
    """Load configuration from file and update global instance."""
    global _config
    _config = CheckersConfig.load_from_file(filepath)
    return _config


def reset_config() -> None:
    """Reset the global configuration to defaults."""
    global _config
    _config = None


# Convenience functions for common configuration access
def get_ui_settings() -> UISettings:
    """Get UI configuration settings."""
    return get_config().ui


def get_game_rules() -> GameRulesSettings:
    """Get game rules configuration settings."""
    return get_config().rules


def get_logging_settings() -> LoggingSettings:
    """Get logging configuration settings."""
    return get_config().logging


def setup_logging(settings: Optional[LoggingSettings] = None) -> None:
    """Configure root logging once from the logging settings."""
    if getattr(setup_logging, "_configured", False):
        return
    settings = settings or get_logging_settings()
    level: int = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.log_to_file:
        handler = logging.FileHandler(settings.log_file_path)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logging.getLogger().addHandler(handler)
    setup_logging._configured = True  # type: ignore[attr-defined]
