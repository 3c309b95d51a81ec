"""Startup configuration loading: dotenv layering, validation and build."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from dotenv import dotenv_values

from .builder import config_build_configuration
from .environments import config_get_env_file_paths, config_resolve_environment
from .models import Configuration
from .validation import config_assert_valid_environment


def config_read_environment(
    environ: Mapping[str, str] | None = None,
    env_dir: Path | None = None,
) -> dict[str, str]:
    """Collect raw variables from dotenv files and the process environment.

    Dotenv files are chosen by the `NODE_ENV` of the process environment and
    applied lowest priority first; process variables always win.

    Args:
        environ: Process environment mapping. Defaults to `os.environ`.
        env_dir: Directory holding dotenv files. Defaults to the working directory.

    Returns:
        dict[str, str]: Merged raw environment.
    """

    process_environ = os.environ if environ is None else environ
    base_dir = Path.cwd() if env_dir is None else env_dir
    environment = config_resolve_environment(process_environ.get("NODE_ENV"))

    merged: dict[str, str] = {}
    for file_name in reversed(config_get_env_file_paths(environment)):
        env_file = base_dir / file_name
        if not env_file.is_file():
            continue
        for key, value in dotenv_values(env_file, encoding="utf-8").items():
            if value is not None:
                merged[key] = value
    merged.update(process_environ)
    return merged


def config_load_configuration(
    environ: Mapping[str, str] | None = None,
    env_dir: Path | None = None,
) -> Configuration:
    """Load, validate and build the process configuration.

    Args:
        environ: Process environment mapping. Defaults to `os.environ`.
        env_dir: Directory holding dotenv files. Defaults to the working directory.

    Returns:
        Configuration: Validated immutable configuration snapshot.

    Raises:
        ConfigurationValidationError: Raised with every violation when the
            environment does not satisfy the startup schema.
    """

    raw_env = config_read_environment(environ=environ, env_dir=env_dir)
    config_assert_valid_environment(raw_env)
    return config_build_configuration(raw_env)


def config_load_database_url() -> str:
    """Load only the datastore connection string for migration tooling.

    Returns:
        str: Connection string for the configured datastore.
    """

    return config_build_configuration(config_read_environment()).database_url()
