"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import argparse

import structlog
import uvicorn

from app.bootstrap import bootstrap_create_application
from app.config import ConfigurationValidationError, config_configure_logging, config_load_configuration

logger = structlog.get_logger(__name__)


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Raises:
        SystemExit: Raised with status 1 when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="UKP backend runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "check-config"),
        help="Runtime command: `api` starts server, `check-config` validates configuration and exits",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args()

    try:
        config = config_load_configuration()
    except ConfigurationValidationError as error:
        for violation in error.violations:
            logger.error("configuration_violation", violation=str(violation))
        logger.error("startup_aborted", reason="invalid configuration")
        raise SystemExit(1) from error

    if parsed_arguments.command == "check-config":
        config_configure_logging(config.app)
        logger.info(
            "configuration_valid",
            environment=config.app.environment.value,
            port=config.app.port,
            api_prefix=config.app.api_prefix,
        )
        return

    application = bootstrap_create_application(config)
    uvicorn.run(
        application,
        host=config.app.host,
        port=config.app.port,
    )


if __name__ == "__main__":
    main()
