"""
envkit - Load dotenv files into the process environment at bootstrap.
"""

__version__ = "0.1.0"

from envkit.bootstrap import bootstrap
from envkit.config.loader import Config, load_config
from envkit.dotenv import Dotenv, load_dotenv

# Exceptions
from envkit.exceptions import (
    ConfigurationError,
    EnvkitError,
    FileNotReadableError,
    MissingRequiredVariablesError,
    NestedVariableNotFoundError,
    ParseError,
    UnterminatedQuoteError,
)
from envkit.store import EnvironmentStore, MemoryStore, ProcessStore, env, get_store

# Logging utilities
from envkit.utils.logging import get_logger, setup_logging, setup_logging_from_config
from envkit.validation import check_required
from envkit.values import ResolvedValue, ValueType, coerce

__all__ = [
    # Loading
    "Dotenv",
    "load_dotenv",
    "bootstrap",
    "check_required",
    # Stores
    "env",
    "get_store",
    "EnvironmentStore",
    "MemoryStore",
    "ProcessStore",
    # Values
    "coerce",
    "ResolvedValue",
    "ValueType",
    # Configuration
    "Config",
    "load_config",
    # Exceptions
    "EnvkitError",
    "FileNotReadableError",
    "ParseError",
    "UnterminatedQuoteError",
    "NestedVariableNotFoundError",
    "MissingRequiredVariablesError",
    "ConfigurationError",
    # Logging
    "get_logger",
    "setup_logging",
    "setup_logging_from_config",
]
