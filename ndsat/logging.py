# Copyright (C) 2025, Miklos Maroti
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
import os
import sys


def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger with the given name writing to stderr. The level is
    read from the NDSAT_LOG_LEVEL environment variable and defaults to
    WARNING. Calling this twice with the same name does not duplicate the
    handler.
    """

    logger = logging.getLogger(name)

    level_name = os.getenv("NDSAT_LOG_LEVEL", "WARNING").upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S"))
        logger.addHandler(handler)

    logger.propagate = False
    return logger


logger = get_logger("ndsat")
