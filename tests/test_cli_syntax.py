"""
Tests for ArgumentTokenizer and ArgumentMultimap.
"""
import pytest

from recruit.parser.cli_syntax import (
    PREAMBLE,
    PREFIX_ADDRESS,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
    ArgumentMultimap,
    ArgumentTokenizer,
    Prefix,
)
from recruit.services.exceptions import ParseError

pytestmark = pytest.mark.unit


class TestArgumentTokenizer:
    """Tests for tokenizing argument strings."""

    def test_empty_arguments(self):
        multimap = ArgumentTokenizer.tokenize("", PREFIX_NAME)
        assert multimap.get_preamble() == ""
        assert not multimap.is_present(PREFIX_NAME)

    def test_no_prefixes_all_preamble(self):
        multimap = ArgumentTokenizer.tokenize("  some random string /t tag with leading and trailing spaces ")
        assert multimap.get_preamble() == "some random string /t tag with leading and trailing spaces"

    def test_preamble_and_values(self):
        multimap = ArgumentTokenizer.tokenize(
            " 1 n/John Doe t/friend t/colleague", PREFIX_NAME, PREFIX_TAG
        )
        assert multimap.get_preamble() == "1"
        assert multimap.get_value(PREFIX_NAME) == "John Doe"
        assert multimap.get_all_values(PREFIX_TAG) == ["friend", "colleague"]

    def test_values_are_trimmed(self):
        multimap = ArgumentTokenizer.tokenize("n/   Spaced Out   p/ 123 ", PREFIX_NAME, PREFIX_PHONE)
        assert multimap.get_value(PREFIX_NAME) == "Spaced Out"
        assert multimap.get_value(PREFIX_PHONE) == "123"

    def test_empty_value_is_present(self):
        multimap = ArgumentTokenizer.tokenize(" n/ p/123", PREFIX_NAME, PREFIX_PHONE)
        assert multimap.is_present(PREFIX_NAME)
        assert multimap.get_value(PREFIX_NAME) == ""

    def test_prefix_inside_word_not_split(self):
        multimap = ArgumentTokenizer.tokenize(
            " a/Block 1, Tan/Lee street n/Joan", PREFIX_ADDRESS, PREFIX_NAME
        )
        assert multimap.get_value(PREFIX_ADDRESS) == "Block 1, Tan/Lee street"
        assert multimap.get_value(PREFIX_NAME) == "Joan"

    def test_prefix_not_requested_stays_in_value(self):
        multimap = ArgumentTokenizer.tokenize(" n/Joan p/123", PREFIX_NAME)
        assert multimap.get_value(PREFIX_NAME) == "Joan p/123"

    def test_repeated_prefix_last_value_wins(self):
        multimap = ArgumentTokenizer.tokenize(" n/First n/Second", PREFIX_NAME)
        assert multimap.get_value(PREFIX_NAME) == "Second"
        assert multimap.get_all_values(PREFIX_NAME) == ["First", "Second"]

    def test_prefix_at_start_of_string(self):
        multimap = ArgumentTokenizer.tokenize("t/friend", PREFIX_TAG)
        assert multimap.get_preamble() == ""
        assert multimap.get_all_values(PREFIX_TAG) == ["friend"]


class TestArgumentMultimap:
    """Tests for ArgumentMultimap."""

    def test_absent_prefix(self):
        multimap = ArgumentMultimap()
        assert multimap.get_value(PREFIX_NAME) is None
        assert multimap.get_all_values(PREFIX_NAME) == []
        assert multimap.get_preamble() == ""

    def test_get_all_values_returns_copy(self):
        multimap = ArgumentMultimap()
        multimap.put(PREFIX_TAG, "a")
        multimap.get_all_values(PREFIX_TAG).append("b")
        assert multimap.get_all_values(PREFIX_TAG) == ["a"]

    def test_verify_no_duplicates_passes(self):
        multimap = ArgumentTokenizer.tokenize(" n/A t/x t/y", PREFIX_NAME, PREFIX_TAG)
        multimap.verify_no_duplicate_prefixes_for(PREFIX_NAME)

    def test_verify_no_duplicates_fails(self):
        multimap = ArgumentTokenizer.tokenize(" n/A n/B p/1 p/2", PREFIX_NAME, PREFIX_PHONE)
        with pytest.raises(ParseError) as exc_info:
            multimap.verify_no_duplicate_prefixes_for(PREFIX_NAME, PREFIX_PHONE)
        assert exc_info.value.message == (
            "Multiple values specified for the following single-valued field(s): n/ p/"
        )

    def test_prefix_equality(self):
        assert Prefix("n/") == PREFIX_NAME
        assert str(PREFIX_NAME) == "n/"
        assert PREAMBLE == Prefix("")
