"""
Tests for link boundary detection.

Each case pins down which part of a token becomes the link and what is left
as prefix and suffix text.
"""

from __future__ import annotations

import pytest

from src.components.richtext import (
    FormattingOptions,
    Link,
    LinkMatch,
    Text,
    ZwspSeparator,
    extract_link,
    linkify_token,
    trim_url,
)

# --- No Link ---


class TestNoLink:
    """Tokens without a usable URL."""

    @pytest.mark.parametrize(
        "token",
        [
            "word",
            "",
            "www.example.com",
            "ftp://example.com",
            "HTTP://example.com",
            "mailto:someone@example.com",
            "http:/example.com",
        ],
    )
    def test_no_scheme(self, token: str) -> None:
        """Only http:// and https:// start a link."""
        assert extract_link(token) is None

    @pytest.mark.parametrize("token", ["http://", "(http://)", "http://.", "https://'x'"])
    def test_nothing_after_scheme(self, token: str) -> None:
        """A bare scheme is not a link."""
        assert extract_link(token) is None


# --- Plain Links ---


class TestPlainLinks:
    """Tokens that are, or start with, a URL."""

    def test_whole_token(self) -> None:
        """Token that is a URL."""
        assert extract_link("http://www.example.com") == LinkMatch(
            "", "http://www.example.com", ""
        )

    def test_https(self) -> None:
        """https is detected."""
        assert extract_link("https://example.com/a?b=c&d=e#top") == LinkMatch(
            "", "https://example.com/a?b=c&d=e#top", ""
        )

    def test_prefix_text(self) -> None:
        """Text before the scheme is the prefix."""
        assert extract_link("see:http://example.com") == LinkMatch(
            "see:", "http://example.com", ""
        )

    def test_first_scheme_wins(self) -> None:
        """The earliest scheme starts the URL."""
        found = extract_link("x-https://a.io/http://b.io")
        assert found is not None
        assert found.prefix == "x-"
        assert found.link == "https://a.io/http://b.io"

    def test_percent_encoding_and_reserved_chars(self) -> None:
        """URL-safe punctuation stays in the link."""
        url = "http://example.com/p%20q;r=s/@user/*+$~_"
        assert extract_link(url) == LinkMatch("", url, "")


# --- Trailing Punctuation ---


class TestTrailingPunctuation:
    """Sentence punctuation after a URL."""

    @pytest.mark.parametrize("punct", ["!", ":", ",", ".", ";"])
    def test_single_trailing_char(self, punct: str) -> None:
        """Common punctuation is trimmed off."""
        assert extract_link(f"http://example.com{punct}") == LinkMatch(
            "", "http://example.com", punct
        )

    def test_multiple_trailing_chars(self) -> None:
        """Trimming repeats until a non-trimmable char."""
        assert extract_link("http://example.com/x...!") == LinkMatch(
            "", "http://example.com/x", "...!"
        )

    def test_inner_punctuation_kept(self) -> None:
        """Punctuation inside the URL is not trimmed."""
        assert extract_link("http://example.com/a.b,c;d:e!f") == LinkMatch(
            "", "http://example.com/a.b,c;d:e!f", ""
        )

    def test_trim_url_helper(self) -> None:
        """trim_url stops at the first non-trimmable char."""
        assert trim_url("http://a.io/x.,;:!") == "http://a.io/x"
        assert trim_url("http://a.io/(x)") == "http://a.io/(x)"
        assert trim_url("") == ""


# --- Parentheses and Brackets ---


class TestBalanceTrimming:
    """Closing parens and brackets are kept only when the URL opened them."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("(http://www.example.com)", LinkMatch("(", "http://www.example.com", ")")),
            ("[http://www.example.com]", LinkMatch("[", "http://www.example.com", "]")),
            ("http://example.com/path_(etc)", LinkMatch("", "http://example.com/path_(etc)", "")),
            (
                "((http://example.com/path_(etc)))",
                LinkMatch("((", "http://example.com/path_(etc)", "))"),
            ),
            (
                "((http://example.com/path_(etc)",
                LinkMatch("((", "http://example.com/path_(etc)", ""),
            ),
            (
                "((http://example.com/path_(etc",
                LinkMatch("((", "http://example.com/path_(etc", ""),
            ),
            (
                "((http://example.com/path_etc)",
                LinkMatch("((", "http://example.com/path_etc", ")"),
            ),
            (
                "((http://example.com/path_(etc))",
                LinkMatch("((", "http://example.com/path_(etc)", ")"),
            ),
            (
                "((http://example.com/path(_(etc))",
                LinkMatch("((", "http://example.com/path(_(etc))", ""),
            ),
            (
                "http://example.com/wiki/Foo_(bar).",
                LinkMatch("", "http://example.com/wiki/Foo_(bar)", "."),
            ),
            (
                "http://example.com/?q[]=1]",
                LinkMatch("", "http://example.com/?q[]=1", "]"),
            ),
            ("http://a.io/x)b(c)", LinkMatch("", "http://a.io/x)b(c)", "")),
            ("http://a.io/x]b[c]", LinkMatch("", "http://a.io/x]b[c]", "")),
            ("(http://a.io/x)b(c))", LinkMatch("(", "http://a.io/x)b(c)", ")")),
            ("http://a.io/(x))", LinkMatch("", "http://a.io/(x)", ")")),
        ],
    )
    def test_balance(self, token: str, expected: LinkMatch) -> None:
        """Parens before the scheme never balance parens inside the URL."""
        assert extract_link(token) == expected


# --- Quotes and Tags ---


class TestTerminators:
    """Quotes and tag-like sequences end the URL."""

    def test_double_quote(self) -> None:
        """Double quote and everything after it is suffix."""
        assert extract_link('(http://example.com")') == LinkMatch(
            "(", "http://example.com", '")'
        )

    def test_single_quote(self) -> None:
        """Single quote ends the URL even though it is URL-safe."""
        assert extract_link("(http://example.com')") == LinkMatch(
            "(", "http://example.com", "')"
        )

    def test_quote_wrapped_url(self) -> None:
        """Quoted URL leaves both quotes as text."""
        assert extract_link('"http://example.com/a"') == LinkMatch(
            '"', "http://example.com/a", '"'
        )

    def test_closing_tag(self) -> None:
        """A closing anchor tag is never part of the URL."""
        assert extract_link("(http://example.com</a>)") == LinkMatch(
            "(", "http://example.com", "</a>)"
        )

    def test_opening_tag(self) -> None:
        """Any < ends the URL."""
        assert extract_link("http://example.com/x<br>") == LinkMatch(
            "", "http://example.com/x", "<br>"
        )

    def test_punctuation_before_quote_is_trimmed(self) -> None:
        """Trimming applies to what is left before the quote."""
        assert extract_link('http://example.com."') == LinkMatch("", "http://example.com", '."')


# --- Token Rendering ---


class TestLinkifyToken:
    """Test linkify_token composition."""

    @pytest.fixture
    def options(self) -> FormattingOptions:
        return FormattingOptions(
            long_word_min_length=10,
            long_word_class="longWord",
            linkify=True,
            link_class="link",
        )

    def test_prefix_and_suffix_are_split(self, options: FormattingOptions) -> None:
        """Prefix and suffix go through separator splitting."""
        assert linkify_token("a/(http://example.com),", options) == [
            Text("a"),
            ZwspSeparator("/"),
            Text("("),
            Link("http://example.com", "link"),
            Text(")"),
            ZwspSeparator(","),
        ]

    def test_no_link_falls_through(self, options: FormattingOptions) -> None:
        """Tokens without links are split and wrapped."""
        assert linkify_token("either/or", options) == [
            Text("either"),
            ZwspSeparator("/"),
            Text("or"),
        ]

    def test_link_is_never_wrapped(self) -> None:
        """Links are emitted as-is regardless of length."""
        opts = FormattingOptions(long_word_min_length=1, linkify=True)
        assert linkify_token("http://example.com", opts) == [Link("http://example.com")]

    def test_href_equals_text(self, options: FormattingOptions) -> None:
        """Display text is the href."""
        link = linkify_token("http://example.com", options)[0]
        assert isinstance(link, Link)
        assert link.text == link.href == "http://example.com"
