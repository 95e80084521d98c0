"""Shared utilities for Santa Pairing."""

# Santa Pairing
# Copyright (C) 2025  Santa Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str, level: int = logging.WARNING) -> logging.Logger:
    """Return a module logger that writes to stderr.

    Only one handler is attached per logger, so calling this more than once
    for the same name is harmless. Records still propagate to the root
    logger, which lets ``--verbose`` (and pytest's ``caplog``) see them.

    Args:
        name: Logger name, normally ``__name__``
        level: Threshold of the stream handler

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def set_verbose_logging(enabled: bool = True) -> None:
    """Lower every Santa Pairing handler (and the root logger) to DEBUG."""
    level = logging.DEBUG if enabled else logging.WARNING
    logging.getLogger().setLevel(level)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if not name.startswith("santapairing") or not isinstance(
            logger, logging.Logger
        ):
            continue
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
