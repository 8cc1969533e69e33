# hostel_api/core/logging.py
"""Logging configuration."""
import logging
import sys


def setup_logging(level: str = "info"):
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
