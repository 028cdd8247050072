"""
Command line entry point: ``python -m smarthome``.

Runs the fixed pattern walkthrough. Exits 0 on success and 1 if a device
could not be constructed or any other smarthome error occurs.
"""

# Load .env file FIRST, before settings are imported
from dotenv import load_dotenv
load_dotenv()

import logging
import sys

from .config import settings
from .debug import demo
from .demo import run_demo
from .exceptions import SmartHomeError

logger = logging.getLogger("smarthome.main")


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, "DEBUG" if settings.debug else settings.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        run_demo()
    except SmartHomeError as e:
        logger.error("Demo aborted: %s", e)
        demo.error("Demo aborted", exc=e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
