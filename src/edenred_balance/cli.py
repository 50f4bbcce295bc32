import argparse
import logging
import sys

from . import __version__
from .config import Settings, load_settings
from .errors import ConfigError, EdenredError
from .logging_setup import setup_logging

logger = logging.getLogger("edenred_balance")


def mask(value: str | None, show: int = 2) -> str:
    if not value:
        return "None"
    if len(value) <= show:
        return "*" * len(value)
    return value[:show] + "*" * (len(value) - show)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="edenred-balance")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    parser.add_argument(
        "command",
        nargs="?",
        default="balance",
        choices=["balance", "health", "status-env"],
        help="Command to run. Default: balance",
    )

    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    if args.command == "status-env":
        settings = Settings()
        print("EDENRED_USER =", mask(settings.edenred_user))
        print("EDENRED_PASSWORD =", mask(settings.edenred_password, show=0))
        print("EDENRED_BASE_URL =", settings.base_url)
        print("EDENRED_CARD_ID =", settings.card_id)
        print("LOG_LEVEL =", settings.log_level)
        return 0

    try:
        settings = load_settings()
    except ConfigError as e:
        setup_logging()
        logger.error("error: %s", e)
        return 2

    setup_logging(settings.log_level)

    if args.command == "health":
        logger.info("Application started successfully.")
        print("ok")
        return 0

    from .edenred import EdenredClient

    logger.info("[observer][edenred] starting")

    try:
        with EdenredClient(
            base_url=settings.base_url,
            card_id=settings.card_id,
            debug=settings.debug,
        ) as client:
            balance = client.check_balance(settings.edenred_user, settings.edenred_password, out=sys.stdout)
    except EdenredError as e:
        logger.error("[observer][edenred] error processing balance: %s", e)
        return 1

    print(f"current balance for Edenred Meal card: {balance}")
    return 0


def main_entry() -> None:
    raise SystemExit(main())
