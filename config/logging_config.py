"""
Logging setup for the Streamlit entry point.

Modules log through ``logging.getLogger(__name__)``; this only wires the
root handler once per process, since Streamlit re-executes the script on
every rerun.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger if nothing else has."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
