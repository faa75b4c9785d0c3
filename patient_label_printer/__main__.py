"""
Patient Label Printer - Command Line Entry Point
"""

import logging
import sys

import click

from .app import run_session
from .config import LOG_LEVEL, LOG_FORMAT


@click.command()
def main():
    """Print patient labels on a USB Zebra printer."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    sys.exit(run_session())


if __name__ == '__main__':
    main()
