"""Front-matter codec — reads and writes the article file contract.

A document opens with a ``---`` line, carries one ``key: value`` pair per
line, closes with another ``---`` line, and everything after that is the
markdown body. Only flat scalar values are accepted; the body is opaque.

Quoted scalars are unquoted with PyYAML so escapes behave exactly as the
site generator reading the same files would see them. Booleans are read
strictly (YAML 1.2 core literals only) so ``yes`` / ``no`` are rejected.
"""

import json
import logging
import re
from decimal import Decimal, InvalidOperation
from typing import NamedTuple

import yaml

from tipsdoc.domain.entities import Article
from tipsdoc.domain.exceptions import MalformedFrontMatter, MissingRequiredField, TypeMismatch

logger = logging.getLogger(__name__)

DELIMITER = "---"

REQUIRED_FIELDS: tuple[str, ...] = ("title", "layout", "permalink", "published", "type", "order")
OPTIONAL_FIELDS: tuple[str, ...] = ("sidenav",)
KNOWN_FIELDS = frozenset(REQUIRED_FIELDS + OPTIONAL_FIELDS)

# Emission order, matching how the tips are authored.
CANONICAL_ORDER: tuple[str, ...] = (
    "title", "layout", "sidenav", "published", "permalink", "type", "order",
)

_NON_EMPTY_STRINGS = ("title", "layout", "permalink", "type")

_PAIR = re.compile(r"^(?P<key>[A-Za-z_][A-Za-z0-9_-]*):(?:[ \t]+(?P<value>.*?))?[ \t]*$")
_LINE = re.compile(r"[^\n]*\n|[^\n]+")
_TRAILING_COMMENT = re.compile(r"[ \t]+#.*$")
_NON_SCALAR_START = ("[", "{", "|", ">", "&", "*", "!", "%", "@", "`")

_TRUE = frozenset({"true", "True", "TRUE"})
_FALSE = frozenset({"false", "False", "FALSE"})

_PLAIN_SAFE = re.compile(r"^[A-Za-z0-9_./][A-Za-z0-9_./+-]*$")
_PLAIN_RESERVED = frozenset({"true", "false", "null", "yes", "no", "on", "off", "y", "n", "~"})
# Characters PyYAML refuses or folds inside a double-quoted scalar.
_YAML_UNSAFE = re.compile(r"[\x7f-\x9f\u2028\u2029\ud800-\udfff\ufffe\uffff]")


class _RawValue(NamedTuple):
    """A front-matter value as written, before typing."""

    literal: str
    value: str
    quoted: bool
    line: int


def parse_article(text: str, source: str | None = None, *, strict: bool = False) -> Article:
    """Parse one document into an :class:`Article`.

    ``source`` only decorates error messages and the returned record.
    With ``strict`` set, keys outside :data:`KNOWN_FIELDS` are rejected
    instead of ignored.
    """
    block, body = split_document(text, source)
    raw = _read_pairs(block, source, strict)

    for name in REQUIRED_FIELDS:
        if name not in raw:
            raise MissingRequiredField(name, source=source)

    strings = {}
    for name in _NON_EMPTY_STRINGS:
        item = raw[name]
        if not item.value.strip():
            raise TypeMismatch(name, item.literal, "a non-empty string", line=item.line, source=source)
        strings[name] = item.value

    sidenav = raw.get("sidenav")

    return Article(
        title=strings["title"],
        layout=strings["layout"],
        published=_read_bool("published", raw["published"], source),
        permalink=strings["permalink"],
        type=strings["type"],
        order=_read_order(raw["order"], source),
        body=body,
        sidenav=sidenav.value if sidenav is not None else None,
        source=source,
    )


def split_document(text: str, source: str | None = None) -> tuple[list[str], str]:
    """Split a document into its front-matter lines and the raw body.

    Returned lines have their terminators removed; the body keeps every
    byte that follows the closing delimiter line.
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    lines = _LINE.findall(text)
    if not lines or _strip_eol(lines[0]) != DELIMITER:
        raise MalformedFrontMatter(
            f"document must open with a '{DELIMITER}' line", line=1, source=source
        )

    for index in range(1, len(lines)):
        if _strip_eol(lines[index]) == DELIMITER:
            block = [_strip_eol(line) for line in lines[1:index]]
            return block, "".join(lines[index + 1:])

    raise MalformedFrontMatter(
        f"front matter is not closed by a '{DELIMITER}' line",
        line=len(lines),
        source=source,
    )


def serialize_article(article: Article) -> str:
    """Render an article back into the file format.

    ``parse_article(serialize_article(a)) == a`` holds for every article
    that :func:`parse_article` can produce.
    """
    values: dict[str, str | None] = {
        "title": _quote(article.title),
        "layout": _emit(article.layout),
        "sidenav": _emit(article.sidenav) if article.sidenav is not None else None,
        "published": "true" if article.published else "false",
        "permalink": _emit(article.permalink),
        "type": _emit(article.type),
        "order": _quote(article.order),
    }
    lines = [DELIMITER]
    for name in CANONICAL_ORDER:
        if values[name] is not None:
            lines.append(f"{name}: {values[name]}")
    lines.append(DELIMITER)
    return "\n".join(lines) + "\n" + article.body


# ── Helpers ──────────────────────────────────────────────────────────


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _read_pairs(block: list[str], source: str | None, strict: bool) -> dict[str, _RawValue]:
    pairs: dict[str, _RawValue] = {}
    seen: set[str] = set()

    # Line 1 is the opening delimiter.
    for lineno, line in enumerate(block, start=2):
        match = _PAIR.match(line)
        if match is None:
            raise MalformedFrontMatter(
                f"expected 'key: value', got {line!r}", line=lineno, source=source
            )

        key = match.group("key")
        literal = match.group("value") or ""
        if not literal or literal.startswith("#"):
            raise MalformedFrontMatter(
                f"field '{key}' has no value", field=key, line=lineno, source=source
            )
        if key in seen:
            raise MalformedFrontMatter(
                f"field '{key}' is set more than once", field=key, line=lineno, source=source
            )
        seen.add(key)
        item = _read_scalar(key, literal, lineno, source)

        if key not in KNOWN_FIELDS:
            if strict:
                raise MalformedFrontMatter(
                    f"unknown field '{key}'", field=key, line=lineno, source=source
                )
            logger.warning("Ignoring unknown front-matter field '%s' in %s", key, source or "<document>")
            continue

        pairs[key] = item

    return pairs


def _read_scalar(key: str, literal: str, lineno: int, source: str | None) -> _RawValue:
    if literal[0] in "\"'":
        try:
            loaded = yaml.safe_load(literal)
        except yaml.YAMLError as exc:
            raise MalformedFrontMatter(
                f"cannot read quoted value of '{key}'", field=key, line=lineno, source=source
            ) from exc
        if not isinstance(loaded, str):
            raise MalformedFrontMatter(
                f"field '{key}' must be a single scalar", field=key, line=lineno, source=source
            )
        return _RawValue(literal, loaded, True, lineno)

    if literal.startswith(_NON_SCALAR_START) or literal.startswith("- "):
        raise MalformedFrontMatter(
            f"field '{key}' must be a scalar, not {literal!r}", field=key, line=lineno, source=source
        )

    value = _TRAILING_COMMENT.sub("", literal).strip()
    if ": " in value or value.endswith(":"):
        raise MalformedFrontMatter(
            f"unquoted value of '{key}' contains ':'", field=key, line=lineno, source=source
        )
    return _RawValue(literal, value, False, lineno)


def _read_bool(name: str, item: _RawValue, source: str | None) -> bool:
    if not item.quoted:
        if item.value in _TRUE:
            return True
        if item.value in _FALSE:
            return False
    raise TypeMismatch(name, item.literal, "a boolean (true/false)", line=item.line, source=source)


def _read_order(item: _RawValue, source: str | None) -> str:
    try:
        number = Decimal(item.value.strip())
    except InvalidOperation:
        number = None
    if number is None or not number.is_finite():
        raise TypeMismatch("order", item.literal, "a numeric value", line=item.line, source=source)
    return item.value


def _quote(value: str) -> str:
    quoted = json.dumps(value, ensure_ascii=False)
    return _YAML_UNSAFE.sub(lambda m: f"\\u{ord(m.group()):04x}", quoted)


def _emit(value: str) -> str:
    if _PLAIN_SAFE.match(value) and value.lower() not in _PLAIN_RESERVED:
        return value
    return _quote(value)
