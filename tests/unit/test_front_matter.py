"""Unit tests for the front-matter codec."""

import logging
from datetime import date
from decimal import Decimal

import pytest

from tipsdoc.application.services.front_matter import (
    REQUIRED_FIELDS,
    parse_article,
    serialize_article,
    split_document,
)
from tipsdoc.domain.entities import Article
from tipsdoc.domain.exceptions import MalformedFrontMatter, MissingRequiredField, TypeMismatch

TIP_X = (
    "---\n"
    'title: "Tip X"\n'
    "layout: tips\n"
    "published: true\n"
    "permalink: tips/142\n"
    "type: markdown\n"
    'order: "142"\n'
    "---\n"
    "Body text.\n"
)

_FIELDS = {
    "title": '"Tip X"',
    "layout": "tips",
    "published": "true",
    "permalink": "tips/142",
    "type": "markdown",
    "order": '"142"',
}


def _document(body: str = "Body text.\n", **overrides: str | None) -> str:
    fields = {**_FIELDS, **overrides}
    lines = [f"{key}: {value}" for key, value in fields.items() if value is not None]
    return "---\n" + "\n".join(lines) + "\n---\n" + body


def test_parse_tip_scenario():
    article = parse_article(TIP_X)
    assert article == Article(
        title="Tip X",
        layout="tips",
        published=True,
        permalink="tips/142",
        type="markdown",
        order="142",
        body="Body text.\n",
    )
    assert article.sidenav is None


def test_parse_keeps_sidenav_and_source():
    article = parse_article(_document(sidenav="side-nav-tips.html"), "tips/142.md")
    assert article.sidenav == "side-nav-tips.html"
    assert article.source == "tips/142.md"


def test_source_is_not_part_of_equality():
    assert parse_article(TIP_X, "a.md") == parse_article(TIP_X, "b.md")


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_missing_required_field_is_named(field: str):
    with pytest.raises(MissingRequiredField) as exc_info:
        parse_article(_document(**{field: None}), "tip.md")
    assert exc_info.value.field == field
    assert exc_info.value.code == "missing_required_field"
    assert field in str(exc_info.value)


@pytest.mark.parametrize("literal", ["no", "maybe", "yes", '"true"', "1"])
def test_published_must_be_a_boolean(literal: str):
    with pytest.raises(TypeMismatch) as exc_info:
        parse_article(_document(published=literal))
    assert exc_info.value.field == "published"
    assert exc_info.value.line == 4


@pytest.mark.parametrize("literal, expected", [("true", True), ("True", True), ("FALSE", False), ("false", False)])
def test_published_accepts_core_booleans(literal: str, expected: bool):
    assert parse_article(_document(published=literal)).published is expected


@pytest.mark.parametrize("literal", ['"abc"', "abc", '"NaN"', "Infinity", '"1.2.3"'])
def test_order_must_be_numeric(literal: str):
    with pytest.raises(TypeMismatch) as exc_info:
        parse_article(_document(order=literal))
    assert exc_info.value.field == "order"


def test_order_is_kept_opaque_but_sorts_numerically():
    article = parse_article(_document(order='"007"'))
    assert article.order == "007"
    assert article.order_key == Decimal(7)

    bare = parse_article(_document(order="12.5"))
    assert bare.order == "12.5"
    assert bare.order_key > article.order_key


def test_empty_title_is_a_type_mismatch():
    with pytest.raises(TypeMismatch) as exc_info:
        parse_article(_document(title='""'))
    assert exc_info.value.field == "title"


def test_missing_opening_delimiter():
    with pytest.raises(MalformedFrontMatter) as exc_info:
        parse_article("title: Tip X\n---\nBody\n")
    assert exc_info.value.line == 1


def test_missing_closing_delimiter():
    with pytest.raises(MalformedFrontMatter, match="not closed"):
        parse_article(TIP_X.replace("---\nBody", "Body"))


def test_empty_document_is_malformed():
    with pytest.raises(MalformedFrontMatter):
        parse_article("")


def test_delimiter_must_be_exact():
    with pytest.raises(MalformedFrontMatter):
        parse_article("--- \n" + TIP_X[4:])


@pytest.mark.parametrize(
    "line",
    [
        "not a pair",
        "",
        "  indented: value",
        "title:no-space",
        "tags: [cpp, abseil]",
        "notes: |",
        "sidenav: tips: extra",
        "sidenav:",
    ],
)
def test_invalid_block_lines_are_malformed(line: str):
    text = TIP_X.replace("layout: tips\n", f"layout: tips\n{line}\n")
    with pytest.raises(MalformedFrontMatter) as exc_info:
        parse_article(text)
    assert exc_info.value.line == 4


def test_malformed_error_carries_source_in_message():
    with pytest.raises(MalformedFrontMatter) as exc_info:
        parse_article(TIP_X.replace("layout: tips", "layout tips"), "tips/142.md")
    assert str(exc_info.value).startswith("tips/142.md:3: ")


def test_duplicate_key_in_block_is_malformed():
    text = TIP_X.replace("layout: tips\n", "layout: tips\nlayout: guide\n")
    with pytest.raises(MalformedFrontMatter, match="more than once"):
        parse_article(text)


def test_unterminated_quote_is_malformed():
    with pytest.raises(MalformedFrontMatter):
        parse_article(_document(title='"Tip X'))


def test_quoted_values_follow_yaml_rules():
    article = parse_article(_document(title="'It''s a tip: really'", layout='"tips" # comment'))
    assert article.title == "It's a tip: really"
    assert article.layout == "tips"


def test_bare_value_trailing_comment_is_dropped():
    assert parse_article(_document(layout="tips   # template")).layout == "tips"


def test_unknown_keys_are_ignored_with_a_warning(caplog: pytest.LogCaptureFixture):
    text = TIP_X.replace("layout: tips\n", "layout: tips\nauthor: someone\n")
    with caplog.at_level(logging.WARNING, logger="tipsdoc.application.services.front_matter"):
        article = parse_article(text, "tip.md")
    assert article.layout == "tips"
    assert "author" in caplog.text


def test_unknown_keys_rejected_in_strict_mode():
    text = TIP_X.replace("layout: tips\n", "layout: tips\nauthor: someone\n")
    with pytest.raises(MalformedFrontMatter) as exc_info:
        parse_article(text, strict=True)
    assert exc_info.value.field == "author"


def test_body_is_preserved_byte_for_byte():
    body = "\r\n```lang-cpp\nint main() {}\n```\n---\ntrailing  \n\n"
    article = parse_article(_document(body=body).replace("\n---\n", "\r\n---\r\n", 1))
    assert article.body == body


def test_byte_order_mark_is_ignored():
    assert parse_article("\ufeff" + TIP_X).title == "Tip X"


def test_document_without_body():
    article = parse_article(TIP_X.replace("Body text.\n", ""))
    assert article.body == ""


def test_split_document_strips_line_endings():
    block, body = split_document("---\r\ntitle: x\r\n---\r\nrest")
    assert block == ["title: x"]
    assert body == "rest"


def test_serialize_matches_authored_format():
    article = parse_article(TIP_X)
    assert serialize_article(article) == TIP_X


def test_serialize_emits_sidenav_after_layout():
    text = serialize_article(parse_article(_document(sidenav="side-nav-tips.html")))
    assert text.splitlines()[1:4] == ['title: "Tip X"', "layout: tips", "sidenav: side-nav-tips.html"]


def test_round_trip_with_awkward_values():
    article = Article(
        title='He said "hi": it\'s #1   \U0001f600',
        layout="yes",
        published=False,
        permalink="/tips/a b/",
        type="markdown",
        order=" 7.50",
        body="---\nnot front matter\r\n",
        sidenav="nav: side",
    )
    assert parse_article(serialize_article(article)) == article


def test_revision_date_from_body():
    article = parse_article(_document(body="\nOriginally posted on May 1, 2012\n\n*Updated: 2020-04-06*\n"))
    assert article.revision_date == date(2020, 4, 6)

    spelled = parse_article(_document(body="Updated March 18, 2024\n"))
    assert spelled.revision_date == date(2024, 3, 18)


def test_revision_date_absent_or_unparseable():
    assert parse_article(TIP_X).revision_date is None
    assert parse_article(_document(body="Updated the examples below.\n")).revision_date is None
