import logging
import sys

from mobfight.config import get_settings
from mobfight.console.manager import Session


def main():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    session = Session(send_text=print, settings=settings)
    session.run(input)
    sys.exit(0)


if __name__ == "__main__":
    main()
