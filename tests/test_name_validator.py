"""Unit tests for summoner name validation."""
import pytest

from application.services.name_validator import is_valid_summoner_name, validate_summoner_name
from domain.errors import InvalidName


@pytest.mark.parametrize(
    "name",
    [
        "Faker",
        "Hide on bush",
        "Mr. Smith_99",
        "Jöhn Dœ",
        "한국어이름",
        "Ωmega",
        "a",
        "...",
        "   ",
    ],
)
def test_allowed_names_are_returned_unchanged(name: str) -> None:
    assert validate_summoner_name(name) == name
    assert is_valid_summoner_name(name)


@pytest.mark.parametrize(
    "name",
    [
        "",
        "bad!",
        "dash-name",
        "slash/../admin",
        "name?x=1",
        "tab\tname",
        "trailing newline\n",
        "x²",
        "emoji🙂",
        "percent%20",
    ],
)
def test_disallowed_names_raise_invalid_name(name: str) -> None:
    with pytest.raises(InvalidName) as exc_info:
        validate_summoner_name(name)
    assert exc_info.value.raw == name
    assert not is_valid_summoner_name(name)


def test_non_string_input_is_rejected() -> None:
    with pytest.raises(InvalidName):
        validate_summoner_name(None)  # type: ignore[arg-type]
