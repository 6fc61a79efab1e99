"""Tests for bracket-aware token splitting."""

import pytest

from variantcore.parser.errors import TokenSyntaxError
from variantcore.parser.splitter import split_token


class TestSplitToken:
    def test_plain_base_class(self):
        assert split_token("bg-blue-500") == ([], "bg-blue-500")

    def test_single_variant(self):
        assert split_token("hover:bg-blue-500") == (["hover"], "bg-blue-500")

    def test_multiple_variants_keep_order(self):
        assert split_token("sm:dark:hover:my-class") == (["sm", "dark", "hover"], "my-class")

    def test_colon_inside_brackets(self):
        assert split_token("hover:bg-[10px:20px]") == (["hover"], "bg-[10px:20px]")

    def test_colon_inside_parentheses(self):
        assert split_token("bg-[url(a:b)]") == ([], "bg-[url(a:b)]")

    def test_nested_brackets(self):
        assert split_token("md:grid-cols-[repeat(2,minmax(0,1fr))]") == (
            ["md"],
            "grid-cols-[repeat(2,minmax(0,1fr))]",
        )

    def test_repeated_variant_is_kept(self):
        assert split_token("hover:hover:x") == (["hover", "hover"], "x")


class TestSplitTokenErrors:
    def test_empty(self):
        with pytest.raises(TokenSyntaxError, match="empty"):
            split_token("")

    def test_leading_colon(self):
        with pytest.raises(TokenSyntaxError, match="leading separator"):
            split_token(":hover:x")

    def test_trailing_colon(self):
        with pytest.raises(TokenSyntaxError, match="trailing separator"):
            split_token("hover:")

    def test_doubled_colon(self):
        with pytest.raises(TokenSyntaxError, match="empty variant"):
            split_token("hover::x")

    def test_only_colon(self):
        with pytest.raises(TokenSyntaxError):
            split_token(":")

    def test_unclosed_bracket(self):
        with pytest.raises(TokenSyntaxError, match="unclosed"):
            split_token("bg-[10px")

    def test_stray_closer(self):
        with pytest.raises(TokenSyntaxError, match="unbalanced"):
            split_token("bg-10px]")

    def test_mismatched_pair(self):
        with pytest.raises(TokenSyntaxError, match="unbalanced"):
            split_token("bg-[url(a])")

    def test_error_carries_token_and_reason(self):
        with pytest.raises(TokenSyntaxError) as exc_info:
            split_token("hover:")
        assert exc_info.value.token == "hover:"
        assert "missing base class" in exc_info.value.reason
