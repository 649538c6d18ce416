"""Shared helpers for Lineup Balance."""

# Lineup Balance
# Copyright (C) 2025  Lineup Balance developers
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

_handler_installed = False


def _install_root_handler() -> None:
    global _handler_installed
    if _handler_installed:
        return
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.WARNING)
    _handler_installed = True


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger, installing the shared stderr handler once.

    Args:
        name: Logger name, usually ``__name__``

    Returns:
        Configured logger
    """
    _install_root_handler()
    return logging.getLogger(name)


def set_verbose(verbose: bool) -> None:
    """Switch the root logger between WARNING and DEBUG."""
    _install_root_handler()
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.WARNING)
