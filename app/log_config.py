# app/log_config.py

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Set up root logging once per process. Unknown level names fall back to INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.strip().upper(), logging.INFO),
        format=LOG_FORMAT,
    )
