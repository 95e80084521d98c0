import pytest

from santapairing.constants import MAX_ATTEMPTS
from santapairing.exceptions import InvalidConfigurationException
from santapairing.models import PairingConfig, PairingHistory


def test_history_is_directed():
    history = PairingHistory()
    history.add_pairing("Ann", "Bob")

    assert history.has_given("Ann", "Bob")
    assert not history.has_given("Bob", "Ann")


def test_history_restricted_to_current_participants():
    history = PairingHistory.from_mapping(
        {"Ann": ["Bob", "Old"], "Old": ["Ann"], "Bob": ["Gone"]}
    )

    restricted = history.restricted_to(["Ann", "Bob", "Carol"])

    assert restricted.as_mapping() == {"Ann": frozenset({"Bob"})}
    assert len(history) == 4
    assert len(restricted) == 1


def test_config_defaults():
    config = PairingConfig()

    assert config.check_previous
    assert not config.allow_reciprocal
    assert config.max_attempts == MAX_ATTEMPTS
    assert config.max_steps is None


def test_config_from_dict_and_back():
    data = {"allow_reciprocal": True, "max_attempts": 10, "seed": 4}
    config = PairingConfig.from_dict(data)

    assert config.to_dict()["max_attempts"] == 10
    assert PairingConfig.from_dict(config.to_dict()) == config


def test_config_merge_skips_missing_values():
    config = PairingConfig(max_attempts=10).merged(max_attempts=None, seed=3)

    assert config.max_attempts == 10
    assert config.seed == 3


@pytest.mark.parametrize(
    "data",
    [
        {"colour": "red"},
        {"max_attempts": 0},
        {"lookback": -1},
        {"max_attempts": "many"},
        {"check_previous": "false"},
        {"allow_reciprocal": 1},
        {"verbose": None},
        {"max_attempts": True},
        {"max_steps": 2.5},
        {"lookback": "3"},
        {"seed": "abc"},
    ],
)
def test_invalid_config(data):
    with pytest.raises(InvalidConfigurationException):
        PairingConfig.from_dict(data)


def test_config_string_flag_is_not_truthy():
    with pytest.raises(InvalidConfigurationException, match="check_previous"):
        PairingConfig.from_dict({"check_previous": "false"})
