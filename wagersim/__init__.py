#!filepath: wagersim/__init__.py

from .utils.logger import Logging, logs
from .config.app_config import AppConfig

__all__ = [
    "logs", "Logging",
    "AppConfig",
]
