"""Configuration module for filemover."""

from .manager import ConfigManager, get_config_manager
from .models import BehaviorSettings, FileMoverConfig, LoggingSettings, PromptSettings

__all__ = [
    "FileMoverConfig",
    "LoggingSettings",
    "PromptSettings",
    "BehaviorSettings",
    "ConfigManager",
    "get_config_manager",
]
