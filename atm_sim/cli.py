"""Command-line entry point for the ATM simulator."""

import argparse
import logging
import sys

from atm_sim.auth import Authenticator
from atm_sim.config import ATMConfig
from atm_sim.console import Console, StreamConsole
from atm_sim.exceptions import ConfigurationError
from atm_sim.logging import setup_logging
from atm_sim.models.enums import AuthResult
from atm_sim.session import Session

logger = logging.getLogger(__name__)


def run_atm(config: ATMConfig, console: Console) -> AuthResult:
    """Authenticate, then run the session loop if access was granted."""
    console.write("Welcome to the ATM!")

    authenticator = Authenticator(config, console)
    result = authenticator.authenticate()
    if result is AuthResult.DENIED:
        if authenticator.input_closed:
            console.write("Input closed before a PIN was accepted. Access denied.")
        else:
            console.write("Too many failed attempts. Access denied. Please contact your bank.")
        return result

    Session(config, console).run()
    return result


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Console ATM simulator")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: LOG_LEVEL env var or WARNING)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log format (default: LOG_FORMAT env var or standard)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        config = ATMConfig.from_env().validate()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    setup_logging(
        level=args.log_level or config.log_level,
        format_type=args.log_format or config.log_format,
    )
    logger.debug("Starting ATM session with config %s", config)

    try:
        run_atm(config, StreamConsole())
    except KeyboardInterrupt:
        print(file=sys.stdout)
        logger.info("Interrupted by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())
