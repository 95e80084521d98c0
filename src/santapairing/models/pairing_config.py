"""Settings for one Secret Santa run."""

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

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from santapairing.constants import CONFIG_KEYS, MAX_ATTEMPTS
from santapairing.exceptions import InvalidConfigurationException


@dataclass
class PairingConfig:
    """Pairing run configuration.

    Attributes
    ----------
    check_previous : bool
        Avoid recipients a giver already had in earlier runs.
    allow_reciprocal : bool
        Allow A->B and B->A in the same run.
    verbose : bool
        Print every engine step.
    max_attempts : int
        Number of reshuffles before giving up.
    max_steps : int or None
        Engine steps allowed per attempt; None derives the bound from the
        number of participants.
    seed : int or None
        Seed for the shuffle, for reproducible runs.
    lookback : int or None
        Only the last ``lookback`` runs of history are considered.
    """

    check_previous: bool = True
    allow_reciprocal: bool = False
    verbose: bool = False
    max_attempts: int = MAX_ATTEMPTS
    max_steps: Optional[int] = None
    seed: Optional[int] = None
    lookback: Optional[int] = None

    def __post_init__(self):
        for name in ("check_previous", "allow_reciprocal", "verbose"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidConfigurationException(
                    f"{name} must be true or false (got {value!r})"
                )
        for name in ("max_attempts", "max_steps", "seed", "lookback"):
            value = getattr(self, name)
            if value is None and name != "max_attempts":
                continue
            # bool is an int subclass
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidConfigurationException(
                    f"{name} must be a whole number (got {value!r})"
                )

        if self.max_attempts < 1:
            raise InvalidConfigurationException(
                f"max_attempts must be at least 1 (got {self.max_attempts})"
            )
        if self.max_steps is not None and self.max_steps < 1:
            raise InvalidConfigurationException(
                f"max_steps must be at least 1 (got {self.max_steps})"
            )
        if self.lookback is not None and self.lookback < 1:
            raise InvalidConfigurationException(
                f"lookback must be at least 1 (got {self.lookback})"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {key: getattr(self, key) for key in CONFIG_KEYS}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairingConfig":
        """Deserialize configuration from dictionary.

        Raises:
            InvalidConfigurationException: Unknown keys or bad values
        """
        unknown = sorted(set(data) - set(CONFIG_KEYS))
        if unknown:
            raise InvalidConfigurationException(
                f"Unknown configuration keys: {', '.join(unknown)}"
            )
        try:
            return cls(**data)
        except TypeError as e:
            raise InvalidConfigurationException(str(e)) from e

    def merged(self, **overrides: Any) -> "PairingConfig":
        """Return a copy with every non-None override applied."""
        return replace(
            self, **{key: value for key, value in overrides.items() if value is not None}
        )
