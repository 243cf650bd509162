import logging
import os

DATABASE_URL = os.getenv("BORROW_FILTER_DB", "sqlite:///./borrows.db")
LOG_LEVEL = os.getenv("BORROW_FILTER_LOG", "INFO")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def configure_logging(level=None):
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
    return logging.getLogger("borrow_filter")
