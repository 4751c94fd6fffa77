"""Tests for the public auto_link() API.

The scenario table mirrors the behaviour users rely on: plain text is left
alone, URLs become anchors, existing links and embedded resources are never
re-linked.
"""

import re

import pytest

from autolink import AutoLinker, LinkOptions, auto_link, find_candidates

CASES = [
    pytest.param("No URL here", "No URL here", id="plain-text-untouched"),
    pytest.param(
        "Visit http://example.com",
        "Visit <a href='http://example.com'>http://example.com</a>",
        id="single-http-link",
    ),
    pytest.param(
        "Docs http://example.com and https://example.org",
        "Docs <a href='http://example.com'>http://example.com</a> and "
        "<a href='https://example.org'>https://example.org</a>",
        id="multiple-links",
    ),
    pytest.param(
        "FTP ftp://ftp.example.com",
        "FTP <a href='ftp://ftp.example.com'>ftp://ftp.example.com</a>",
        id="ftp-link",
    ),
    pytest.param(
        "Check it: http://some.sub.domain",
        "Check it: <a href='http://some.sub.domain'>http://some.sub.domain</a>",
        id="subdomain",
    ),
    pytest.param(
        "Click here http://bit.ly/1337 now",
        "Click here <a href='http://bit.ly/1337'>http://bit.ly/1337</a> now",
        id="tld-agnostic",
    ),
    pytest.param(
        "Go here now http://example.com!",
        "Go here now <a href='http://example.com'>http://example.com</a>!",
        id="trailing-punctuation",
    ),
    pytest.param(
        "Safety for Syria’s Women http://example.com/story",
        "Safety for Syria’s Women "
        "<a href='http://example.com/story'>http://example.com/story</a>",
        id="unicode-apostrophe",
    ),
    pytest.param(
        "Line one\nhttp://example.com",
        "Line one\n<a href='http://example.com'>http://example.com</a>",
        id="newline",
    ),
    pytest.param(
        "Line one<br>http://example.com",
        "Line one<br><a href='http://example.com'>http://example.com</a>",
        id="html-break",
    ),
    pytest.param(
        "Go here now http://example.com/#query=index",
        "Go here now <a href='http://example.com/#query=index'>"
        "http://example.com/#query=index</a>",
        id="hash-fragment",
    ),
    pytest.param(
        "Go here now http://twitter.com/#!/PostDeskUK",
        "Go here now <a href='http://twitter.com/#!/PostDeskUK'>"
        "http://twitter.com/#!/PostDeskUK</a>",
        id="escaped-fragment",
    ),
    pytest.param(
        "My favorite Wikipedia Article "
        "http://en.wikipedia.org/wiki/Culture_of_honor_(Southern_United_States)",
        "My favorite Wikipedia Article "
        "<a href='http://en.wikipedia.org/wiki/Culture_of_honor_(Southern_United_States)'>"
        "http://en.wikipedia.org/wiki/Culture_of_honor_(Southern_United_States)</a>",
        id="parentheses",
    ),
    pytest.param(
        "<li>http://example.com</li>",
        "<li><a href='http://example.com'>http://example.com</a></li>",
        id="html-list",
    ),
    pytest.param(
        "Image <img src='http://example.com/logo.png'>",
        "Image <img src='http://example.com/logo.png'>",
        id="image-tag-untouched",
    ),
    pytest.param(
        "Anchor <a href='http://example.com'>http://example.com</a>",
        "Anchor <a href='http://example.com'>http://example.com</a>",
        id="anchor-tag-untouched",
    ),
    pytest.param(
        "Anchor <a href='http://example.com'>http://example.com</a> to http://example.com",
        "Anchor <a href='http://example.com'>http://example.com</a> to "
        "<a href='http://example.com'>http://example.com</a>",
        id="anchor-then-bare-url",
    ),
]


class TestAutoLink:
    """auto_link() over the standard scenarios."""

    @pytest.mark.parametrize(("text", "expected"), CASES)
    def test_scenarios(self, text: str, expected: str) -> None:
        assert auto_link(text) == expected

    def test_empty_string(self) -> None:
        assert auto_link("") == ""

    def test_wrapped_in_parentheses(self) -> None:
        assert (
            auto_link("Site (http://example.com) here")
            == "Site (<a href='http://example.com'>http://example.com</a>) here"
        )

    def test_parenthetical_url_inside_parentheses(self) -> None:
        text = "Article (http://en.wikipedia.org/wiki/Article_(Name))"
        assert auto_link(text) == (
            "Article (<a href='http://en.wikipedia.org/wiki/Article_(Name)'>"
            "http://en.wikipedia.org/wiki/Article_(Name)</a>)"
        )

    def test_bare_scheme_not_linked(self) -> None:
        assert auto_link("just http:// here") == "just http:// here"

    def test_https_with_port_and_query(self) -> None:
        url = "https://localhost:8443/search?q=autolink&page=2"
        assert auto_link(f"Try {url}.") == f"Try <a href='{url}'>{url}</a>."

    def test_double_quoted_attribute_untouched(self) -> None:
        text = '<a href="http://example.com">here</a>'
        assert auto_link(text) == text

    def test_punctuation_only_fragment_kept(self) -> None:
        assert auto_link("http://example.com/#!") == (
            "<a href='http://example.com/#!'>http://example.com/#!</a>"
        )

    def test_query_value_punctuation_is_sentence_punctuation(self) -> None:
        assert auto_link("Search http://example.com/?q=hi!") == (
            "Search <a href='http://example.com/?q=hi'>http://example.com/?q=hi</a>!"
        )

    def test_apostrophe_inside_path(self) -> None:
        assert auto_link("See http://example.com/it's here") == (
            "See <a href='http://example.com/it&#39;s'>http://example.com/it's</a> here"
        )

    def test_relinking_escaped_href_is_stable(self) -> None:
        once = auto_link("See http://example.com/it's")
        assert auto_link(once) == once


class TestAutoLinkOptions:
    """Target, rel, attributes and callbacks."""

    def test_target_and_rel(self) -> None:
        result = auto_link("See http://example.com", target="_blank", rel="noreferrer")
        assert result == (
            "See <a href='http://example.com' target='_blank' rel='noreferrer'>"
            "http://example.com</a>"
        )

    def test_options_mapping(self) -> None:
        result = auto_link("See http://example.com", {"target": "_blank", "rel": "noreferrer"})
        assert result == (
            "See <a href='http://example.com' target='_blank' rel='noreferrer'>"
            "http://example.com</a>"
        )

    def test_mapping_extra_keys_become_attributes(self) -> None:
        result = auto_link("See http://example.com", {"class": "ext", "target": "_top"})
        assert result == (
            "See <a href='http://example.com' target='_top' class='ext'>"
            "http://example.com</a>"
        )

    def test_callback_overrides_rendering(self) -> None:
        result = auto_link("Lookup http://example.com", callback=lambda url: f"[{url}]({url})")
        assert result == "Lookup [http://example.com](http://example.com)"

    def test_callback_none_falls_back_to_default(self) -> None:
        result = auto_link("Link http://example.com", {"target": "_blank", "callback": None})
        assert result == "Link <a href='http://example.com' target='_blank'>http://example.com</a>"

    def test_selective_callback(self) -> None:
        def images(url: str) -> str | None:
            if re.search(r"\.(gif|png|jpe?g)$", url, re.IGNORECASE):
                return f"<img src='{url}' alt='{url}'>"
            return None

        result = auto_link(
            "Image http://example.com/logo.png and site http://example.com",
            target="_blank",
            callback=images,
        )
        assert result == (
            "Image <img src='http://example.com/logo.png' alt='http://example.com/logo.png'>"
            " and site <a href='http://example.com' target='_blank'>http://example.com</a>"
        )

    def test_callback_ignores_target_and_rel(self) -> None:
        result = auto_link(
            "See http://example.com", target="_blank", rel="nofollow", callback=lambda url: "X"
        )
        assert result == "See X"

    def test_keyword_overrides_options(self) -> None:
        options = LinkOptions(target="_self", rel="nofollow")
        result = auto_link("See http://example.com", options, target="_blank")
        assert "target='_blank' rel='nofollow'" in result

    def test_custom_schemes(self) -> None:
        options = LinkOptions(schemes=("irc",))
        assert auto_link("Join irc://irc.libera.chat/python", options) == (
            "Join <a href='irc://irc.libera.chat/python'>irc://irc.libera.chat/python</a>"
        )
        assert auto_link("See http://example.com", options) == "See http://example.com"

    def test_skip_tags(self) -> None:
        options = LinkOptions(skip_tags={"a", "code"})
        text = "Run <code>curl http://localhost:8000</code> or open http://example.com"
        assert auto_link(text, options) == (
            "Run <code>curl http://localhost:8000</code> or open "
            "<a href='http://example.com'>http://example.com</a>"
        )


class TestFindCandidates:
    """find_candidates() reports what would be linked."""

    def test_reports_trimmed_urls(self) -> None:
        candidates = find_candidates("(see http://example.com). And https://x.io!")
        assert [c.raw for c in candidates] == ["http://example.com", "https://x.io"]

    def test_offsets_index_input(self) -> None:
        text = "Go http://example.com/a, now"
        (candidate,) = find_candidates(text)
        assert text[candidate.start : candidate.end] == candidate.raw == "http://example.com/a"

    def test_skips_existing_links(self) -> None:
        text = "<a href='http://a.io'>http://a.io</a> http://b.io"
        assert [c.raw for c in find_candidates(text)] == ["http://b.io"]


class TestAutoLinker:
    """The reusable AutoLinker processor."""

    def test_callable(self) -> None:
        linker = AutoLinker(target="_blank")
        assert linker("See http://example.com") == (
            "See <a href='http://example.com' target='_blank'>http://example.com</a>"
        )

    def test_link_many_preserves_order(self) -> None:
        linker = AutoLinker()
        results = linker.link_many(["a http://a.io", "no url", "b http://b.io"])
        assert results == [
            "a <a href='http://a.io'>http://a.io</a>",
            "no url",
            "b <a href='http://b.io'>http://b.io</a>",
        ]

    def test_options_property(self) -> None:
        linker = AutoLinker({"rel": "nofollow"})
        assert linker.options == LinkOptions(rel="nofollow")

    def test_custom_renderer(self) -> None:
        class Markdown:
            def render(self, url: str) -> str:
                return f"<{url}>"

        linker = AutoLinker(renderer=Markdown())
        assert linker("See http://example.com.") == "See <http://example.com>."

    def test_segments(self) -> None:
        segments = AutoLinker().segments("a http://x.io!")
        assert [s.text for s in segments] == ["a ", "<a href='http://x.io'>http://x.io</a>", "!"]
        assert [s.is_link for s in segments] == [False, True, False]
