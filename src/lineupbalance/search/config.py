"""Search run configuration."""

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

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from lineupbalance.constants import DEFAULT_PROGRESS_EVERY, DEFAULT_TRIALS
from lineupbalance.exceptions import (
    InvalidConfigurationException,
    MissingConfigurationException,
)
from lineupbalance.utils import setup_logger

logger = setup_logger(__name__)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class SearchConfig:
    """Search configuration settings.

    Attributes
    ----------
    trials : int
        Fixed number of random assignments to evaluate. Must be at least 1.
    seed : int or None
        Seed for the search's random source. ``None`` draws from OS entropy.
    progress_every : int
        Report every k-th trial to the progress callback. 0 disables it.
    """

    trials: int = DEFAULT_TRIALS
    seed: Optional[int] = None
    progress_every: int = DEFAULT_PROGRESS_EVERY

    def __post_init__(self):
        if not _is_int(self.trials) or self.trials < 1:
            raise InvalidConfigurationException(
                f"trials must be a positive integer, got {self.trials!r}"
            )
        if self.seed is not None and not _is_int(self.seed):
            raise InvalidConfigurationException(
                f"seed must be an integer or null, got {self.seed!r}"
            )
        if not _is_int(self.progress_every) or self.progress_every < 0:
            raise InvalidConfigurationException(
                f"progress_every must be a non-negative integer, got {self.progress_every!r}"
            )

    def reports(self, trial: int) -> bool:
        """Whether ``trial`` should be passed to the progress callback."""
        return self.progress_every > 0 and trial % self.progress_every == 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "trials": self.trials,
            "seed": self.seed,
            "progress_every": self.progress_every,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchConfig":
        """Deserialize configuration from dictionary."""
        if not isinstance(data, dict):
            raise InvalidConfigurationException(
                f"Search configuration must be an object, got {type(data).__name__}"
            )
        return cls(
            trials=data.get("trials", DEFAULT_TRIALS),
            seed=data.get("seed"),
            progress_every=data.get("progress_every", DEFAULT_PROGRESS_EVERY),
        )


def load_config(path: Union[str, Path]) -> SearchConfig:
    """Load a SearchConfig from a JSON file.

    Raises:
        MissingConfigurationException: If the file does not exist
        InvalidConfigurationException: If the file is not valid JSON or holds bad values
    """
    path = Path(path)
    if not path.is_file():
        raise MissingConfigurationException(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidConfigurationException(f"Invalid JSON in {path}: {e}") from e

    config = SearchConfig.from_dict(data)
    logger.info("Loaded search config from %s", path)
    return config
