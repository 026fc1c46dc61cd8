"""
Project configuration management.
"""

from envkit.config.loader import Config, load_config

__all__ = [
    "load_config",
    "Config",
]
