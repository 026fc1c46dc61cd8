"""
Helpers shared by CLI commands.
"""

import os
from pathlib import Path

from envkit.config.loader import Config, load_config
from envkit.dotenv import Dotenv
from envkit.store import MemoryStore
from envkit.utils.logging import setup_logging_from_config


def prepare(project_dir: Path | None, env: str | None, verbose: bool) -> tuple[Path, Config]:
    """Load envkit.yaml (if any) and configure logging for a CLI run."""
    if project_dir is None:
        project_dir = Path.cwd()
    config = load_config(project_dir, env=env, missing_ok=True)

    logging_config = dict(config.get("logging", {}))
    # CLI output is the report; keep library chatter down unless asked
    logging_config.setdefault("level", "WARNING")
    if verbose:
        logging_config["level"] = "DEBUG"
    setup_logging_from_config({"logging": logging_config}, project_dir=project_dir)
    return project_dir, config


def load_isolated(files: list[str] | None, project_dir: Path, config: Config) -> tuple[MemoryStore, list[Dotenv]]:
    """
    Load dotenv files into a fresh store without touching os.environ.

    Explicit files are taken as given; configured files are relative to project_dir.
    """
    if files:
        paths = [Path(f) for f in files]
    else:
        paths = [Path(f) if Path(f).is_absolute() else project_dir / f for f in config.files]

    store = MemoryStore()
    environ = dict(os.environ)
    loaded = [Dotenv(path, store=store, environ=environ).load() for path in paths]
    return store, loaded
