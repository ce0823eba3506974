"""Entry point for the sales manager application form."""

import getpass
import logging
import sys
from pathlib import Path

from .config import Config, get_config, load_config
from .console import ConsoleApp
from .remote import create_sink
from .session import Session
from .storage import ApplicationLog, JsonSlotStore

LOG_DIR = Path(__file__).parent.parent / "logs"


def setup_logging() -> None:
    """Configure logging for the application."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = LOG_DIR / "app.log"

    config = get_config()
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_session(config: Config) -> Session:
    """Load the stored log and wire it into a fresh session."""
    store = JsonSlotStore(config.storage_dir, config.storage_key)
    log = ApplicationLog.load(store)
    return Session(config, log, create_sink(config))


def main() -> int:
    """Main entry point."""
    try:
        config = load_config()
        setup_logging()
    except FileNotFoundError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    logger = logging.getLogger(__name__)

    try:
        session = build_session(config)
        ConsoleApp(session, read_secret=getpass.getpass).run()
        return 0
    except Exception as e:
        logger.exception(f"Application failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
