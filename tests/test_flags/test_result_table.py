import pytest

from flagparse import Flag, FlagLookupError, ParseOutcome, Parser, ResultTable


@pytest.fixture
def table():
    flags = [Flag("h", "help"), Flag("s", "say", takes_value=True), Flag("", "dry-run")]
    result, _ = Parser(["-s", "hello"], flags, "app").parse()
    return result


def test_lookup_by_key_and_flag(table):
    assert table["ssay"] == ParseOutcome(True, "hello")
    assert table[Flag("s", "say", takes_value=True)] == ParseOutcome(True, "hello")


def test_unknown_key_raises_lookup_error(table):
    with pytest.raises(FlagLookupError, match="'nope' does not belong"):
        table["nope"]
    with pytest.raises(LookupError):
        table["say"]


def test_unknown_flag_raises_lookup_error(table):
    with pytest.raises(FlagLookupError):
        table.try_get_flag(Flag("q", "quiet"))


def test_absent_flag_is_not_an_error(table):
    assert table["hhelp"] == ParseOutcome(False, "")
    assert table.has_flag("hhelp") is False


def test_try_get_flag(table):
    assert table.try_get_flag("ssay") == (True, "hello")
    assert table.try_get_flag("dry-run") == (False, "")


def test_has_flag(table):
    assert table.has_flag(Flag("s", "say", takes_value=True)) is True
    with pytest.raises(FlagLookupError):
        table.has_flag("missing")


def test_mapping_behaviour(table):
    assert len(table) == 3
    assert set(table) == {"hhelp", "ssay", "dry-run"}
    assert "ssay" in table
    assert Flag("h", "help") in table
    assert "missing" not in table
    assert table.get("missing") is None
    assert dict(table)["ssay"].value == "hello"


def test_lookup_error_message_is_plain():
    table = ResultTable({})
    with pytest.raises(FlagLookupError) as exc_info:
        table["x"]
    assert str(exc_info.value) == "the key 'x' does not belong to any declared flag"


def test_table_is_read_only(table):
    with pytest.raises(TypeError):
        table["ssay"] = ParseOutcome()  # type: ignore[index]


def test_table_copies_input():
    outcomes = {"a": ParseOutcome(True, "1")}
    table = ResultTable(outcomes)
    outcomes["b"] = ParseOutcome()
    assert "b" not in table


def test_parse_outcome_defaults():
    outcome = ParseOutcome()
    assert outcome.present is False
    assert outcome.value == ""
