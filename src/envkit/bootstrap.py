"""
Project bootstrap: load every configured dotenv file, then validate.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from pathlib import Path

from envkit.config.loader import load_config
from envkit.dotenv import Dotenv
from envkit.store import EnvironmentStore, get_store
from envkit.utils.logging import get_logger
from envkit.validation import check_required

logger = get_logger("envkit.bootstrap")


def bootstrap(
    project_path: Path | None = None,
    env: str | None = None,
    *,
    store: EnvironmentStore | None = None,
    environ: MutableMapping[str, str] | None = None,
) -> list[Dotenv]:
    """
    Load the project's dotenv files in configured order.

    Files share one store, so a name set by an earlier file is never
    overwritten by a later one.

    Args:
        project_path: Project root holding envkit.yaml (default: current directory)
        env: Environment overlay name (loads envkit.{env}.yaml on top)
        store: Store receiving typed values (default: process-wide store)
        environ: Ambient environment (default: os.environ)

    Returns:
        Loaded Dotenv instances, one per file

    Raises:
        ConfigurationError: If envkit.yaml exists but is invalid
        FileNotReadableError: If a configured file is missing
        MissingRequiredVariablesError: If configured required names are absent
    """
    if project_path is None:
        project_path = Path.cwd()

    config = load_config(project_path, env, missing_ok=True)
    if store is None:
        store = get_store()

    loaded = []
    for filename in config.files:
        path = Path(filename)
        if not path.is_absolute():
            path = project_path / path
        loaded.append(Dotenv(path, store=store, environ=environ).load())

    check_required(config.required, store)
    logger.info(f"Bootstrapped {len(loaded)} dotenv file(s) from {project_path}")
    return loaded
