import pytest

from flagparse.exceptions import FlagDeclarationError
from flagparse.validators import is_flag_token, validate_flag_name


@pytest.mark.parametrize("name", ["", "v", "verbose", "dry-run", "x2", "A-b-C", "9"])
def test_validate_flag_name_accepts_valid(name):
    validate_flag_name(name)


@pytest.mark.parametrize("name", ["has space", "under_score", "e=1", "ümlaut", "a.b", "x!"])
def test_validate_flag_name_rejects_bad_characters(name):
    with pytest.raises(FlagDeclarationError, match="alphanumeric"):
        validate_flag_name(name)


@pytest.mark.parametrize("name", ["-", "--", "----"])
def test_validate_flag_name_rejects_only_hyphens(name):
    with pytest.raises(FlagDeclarationError, match="only contain hyphens"):
        validate_flag_name(name)


def test_validate_flag_name_rejects_leading_hyphen():
    with pytest.raises(FlagDeclarationError, match="begin with a hyphen"):
        validate_flag_name("-verbose")


def test_validate_flag_name_rejects_trailing_hyphen():
    with pytest.raises(FlagDeclarationError, match="end with a hyphen"):
        validate_flag_name("verbose-")


def test_validate_flag_name_rejects_non_string():
    with pytest.raises(FlagDeclarationError, match="must be strings"):
        validate_flag_name(None)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "token,expected",
    [
        ("-v", True),
        ("--verbose", True),
        ("--", True),
        ("-", False),
        ("", False),
        ("value", False),
        ("a-b", False),
    ],
)
def test_is_flag_token(token, expected):
    assert is_flag_token(token) is expected
