"""Tests for the locator tokenizer."""

from __future__ import annotations

from tdslocator.tokenizer import last_delimiter, next_token


def test_next_token_stops_at_colon() -> None:
    assert next_token("jdbc:jtds", 0) == ("jdbc", 5)


def test_next_token_treats_double_slash_as_one_delimiter() -> None:
    locator = "x://host"

    token, pos = next_token(locator, 2)

    assert token == ""
    assert pos == 4
    assert locator[pos:] == "host"


def test_next_token_accepts_single_slash_and_semicolon() -> None:
    assert next_token("db/rest", 0) == ("db", 3)
    assert next_token("a=1;b", 0) == ("a=1", 4)


def test_next_token_at_end_returns_empty_token() -> None:
    locator = "jdbc"

    assert next_token(locator, 0) == ("jdbc", 4)
    assert next_token(locator, 4) == ("", 4)


def test_last_delimiter_reports_the_delimiter_just_consumed() -> None:
    locator = "host:1433/db"
    _, pos = next_token(locator, 0)

    assert last_delimiter(locator, pos) == ":"
    _, pos = next_token(locator, pos)
    assert last_delimiter(locator, pos) == "/"
    _, pos = next_token(locator, pos)
    assert last_delimiter(locator, pos) == ""


def test_last_delimiter_ignores_trailing_delimiter() -> None:
    locator = "host:"
    _, pos = next_token(locator, 0)

    assert pos == len(locator)
    assert last_delimiter(locator, pos) == ""
