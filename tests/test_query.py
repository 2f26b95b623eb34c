"""Tests for routematch.http.query — ordered QueryItems."""

import pytest

from routematch.http.query import QueryItem, QueryItems, parse_query


class TestParseQuery:
    def test_pairs_in_order(self) -> None:
        q = parse_query("q=hello&page=2")
        assert q == [("q", "hello"), ("page", "2")]

    def test_duplicates_kept(self) -> None:
        q = parse_query("tag=python&tag=rust")
        assert q.names() == ["tag", "tag"]

    def test_no_equals_is_none(self) -> None:
        q = parse_query("flag")
        assert q[0] == QueryItem("flag", None)

    def test_empty_value_is_empty_string(self) -> None:
        q = parse_query("flag=")
        assert q[0] == QueryItem("flag", "")

    def test_splits_on_first_equals(self) -> None:
        q = parse_query("expr=a=b")
        assert q[0].value == "a=b"

    def test_percent_decoding(self) -> None:
        q = parse_query("name=J%C3%B6rg&a%26b=1")
        assert q == [("name", "Jörg"), ("a&b", "1")]

    def test_plus_is_not_space(self) -> None:
        q = parse_query("q=a+b")
        assert q.get("q") == "a+b"

    def test_empty_pieces_skipped(self) -> None:
        q = parse_query("a=1&&b=2&")
        assert q == [("a", "1"), ("b", "2")]

    def test_fragment_dropped(self) -> None:
        q = parse_query("a=1#section")
        assert q == [("a", "1")]

    def test_empty(self) -> None:
        assert len(parse_query("")) == 0


class TestQueryItems:
    def test_get_first(self) -> None:
        q = parse_query("a=b&a=c")
        assert q.get("a") == "b"

    def test_get_default(self) -> None:
        q = parse_query("a=b")
        assert q.get("missing") is None
        assert q.get("missing", "fallback") == "fallback"

    def test_get_valueless_returns_default(self) -> None:
        q = parse_query("flag")
        assert q.get("flag", "x") == "x"
        assert "flag" in q.names()

    def test_get_list(self) -> None:
        q = parse_query("tag=python&flag&tag=rust")
        assert q.get_list("tag") == ["python", "rust"]
        assert q.get_list("flag") == [None]
        assert q.get_list("missing") == []

    def test_slice_is_query_items(self) -> None:
        q = parse_query("a=1&b=2&c=3")
        assert isinstance(q[1:], QueryItems)
        assert q[1:] == [("b", "2"), ("c", "3")]

    def test_equality(self) -> None:
        assert parse_query("a=1") == parse_query("a=1")
        assert parse_query("a=1") != parse_query("a=2")
        assert parse_query("a=1") == [QueryItem("a", "1")]
        assert parse_query("a=1") == (("a", "1"),)

    def test_equality_rejects_non_pairs(self) -> None:
        assert (parse_query("a=b") == ["ab"]) is False
        assert (parse_query("a=1") == [1]) is False
        assert (parse_query("a=1") == [("a", "1", "x")]) is False
        assert (parse_query("a=1") == [["a", "1"]]) is False

    def test_equality_length_mismatch(self) -> None:
        assert (parse_query("a=1&b=2") == [("a", "1")]) is False
        assert (parse_query("") == []) is True

    def test_hashable(self) -> None:
        assert hash(parse_query("a=1")) == hash(parse_query("a=1"))

    def test_immutable(self) -> None:
        q = parse_query("a=1")
        with pytest.raises(AttributeError):
            q._items = ()  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(parse_query("a=1&b")) == "QueryItems([('a', '1'), ('b', None)])"


class TestQueryItem:
    def test_as_tuple(self) -> None:
        assert QueryItem("a", "1").as_tuple() == ("a", "1")

    def test_frozen(self) -> None:
        item = QueryItem("a", "1")
        with pytest.raises(AttributeError):
            item.value = "2"  # type: ignore[misc]
