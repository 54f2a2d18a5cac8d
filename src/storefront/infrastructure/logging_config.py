"""Logging setup for the storefront CLI.

Log records go to stderr so they never interleave with the menus and
tables printed on stdout. Without ``--verbose`` only warnings (such as
an unwritable audit log) are shown.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
