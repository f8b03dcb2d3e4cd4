import pytest

from tables_to_go.shared.naming import (
    OutputFormat,
    format_identifier,
    to_camel_case,
    to_title_case,
)


class TestToTitleCase:
    @pytest.mark.parametrize(
        "input_str,expected",
        [
            ("user_id", "User_id"),
            ("id", "Id"),
            ("userId", "UserId"),
            ("Users", "Users"),
            ("", ""),
        ],
    )
    def test_to_title_case(self, input_str, expected):
        assert to_title_case(input_str) == expected


class TestToCamelCase:
    @pytest.mark.parametrize(
        "input_str,expected",
        [
            ("user_id", "UserId"),
            ("order_items", "OrderItems"),
            ("id", "Id"),
            ("USER_ID", "UserId"),
            ("userId", "UserId"),
            ("created_at_utc", "CreatedAtUtc"),
            ("double__underscore", "DoubleUnderscore"),
            ("_leading", "Leading"),
        ],
    )
    def test_to_camel_case(self, input_str, expected):
        assert to_camel_case(input_str) == expected

    def test_single_segment_matches_title_mode(self):
        assert to_camel_case("orders") == to_title_case("orders")

    @pytest.mark.parametrize("word", ["Id", "Users", "OrderItems"])
    def test_idempotent_on_formatted_words(self, word):
        assert to_camel_case(to_camel_case(word)) == to_camel_case(word)


class TestFormatIdentifier:
    def test_camel_mode(self):
        assert format_identifier("user_id", OutputFormat.CAMEL) == "UserId"

    def test_title_mode(self):
        assert format_identifier("user_id", OutputFormat.TITLE) == "User_id"

    def test_accepts_raw_option_values(self):
        assert format_identifier("user_id", OutputFormat("c")) == "UserId"
        assert format_identifier("user_id", OutputFormat("o")) == "User_id"
