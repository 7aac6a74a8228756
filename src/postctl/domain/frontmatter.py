"""Front-matter codec — split, parse, and render post headers.

A post file opens with a delimiter line, the front-matter block, the same
delimiter again, then the body:

- ``+++`` delimits TOML (parsed with tomlkit).
- ``---`` delimits YAML (parsed with ruamel.yaml).

Both parsers run in round-trip mode, so a block that is parsed and dumped
again comes back byte-for-byte when nothing was changed. Plain dicts (for
example from :meth:`Post.to_frontmatter`) are emitted in canonical key order.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from io import StringIO
from typing import Any

import tomlkit
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError
from tomlkit.exceptions import TOMLKitError
from tomlkit.toml_document import TOMLDocument


class FrontmatterFormat(StrEnum):
    """Supported front-matter dialects."""

    TOML = "toml"
    YAML = "yaml"


DELIMITERS: dict[FrontmatterFormat, str] = {
    FrontmatterFormat.TOML: "+++",
    FrontmatterFormat.YAML: "---",
}

_FORMAT_BY_DELIMITER = {delim: fmt for fmt, delim in DELIMITERS.items()}

# ---------------------------------------------------------------------------
# Canonical key ordering
# ---------------------------------------------------------------------------

CANONICAL_KEY_ORDER: list[str] = [
    "title",
    "date",
    "updated",
    "description",
    "draft",
    "slug",
    "path",
    "aliases",
    "weight",
    "template",
]

# Tables must follow every bare key in TOML, so they always sort last.
TABLE_KEY_ORDER: list[str] = ["taxonomies", "extra"]


class FrontmatterError(ValueError):
    """A front-matter block that cannot be parsed."""

    def __init__(self, fmt: FrontmatterFormat, message: str) -> None:
        super().__init__(f"Invalid {fmt.value.upper()} front-matter: {message}")
        self.format = fmt


@dataclass(frozen=True)
class FrontmatterBlock:
    """The raw pieces of a post file."""

    format: FrontmatterFormat
    text: str
    body: str

    @property
    def delimiter(self) -> str:
        return DELIMITERS[self.format]


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def _new_yaml() -> YAML:
    """Create a fresh round-trip YAML parser.

    ruamel.yaml's YAML object is stateful; a failed dump can leave a shared
    instance broken, so each call gets its own.
    """
    y = YAML()
    y.preserve_quotes = True
    y.default_flow_style = False
    y.indent(mapping=2, sequence=4, offset=2)
    return y


def split_frontmatter(content: str) -> FrontmatterBlock | None:
    """Split *content* into its front-matter block and body.

    The first line must be a delimiter; the next line carrying the same
    delimiter closes the block. A leading UTF-8 BOM is dropped and ``\\r\\n``
    line endings are normalized.
    Returns None when the file does not open with a complete block.
    """
    normalized = content.removeprefix("\ufeff").replace("\r\n", "\n")
    lines = normalized.splitlines(keepends=True)
    if not lines:
        return None

    opener = lines[0].rstrip()
    fmt = _FORMAT_BY_DELIMITER.get(opener)
    if fmt is None:
        return None

    for i, line in enumerate(lines[1:], start=1):
        if line.rstrip() == opener:
            return FrontmatterBlock(
                format=fmt,
                text="".join(lines[1:i]),
                body="".join(lines[i + 1 :]),
            )
    return None


def detect_format(content: str) -> FrontmatterFormat | None:
    """Return the dialect of the block opening *content*, if any."""
    block = split_frontmatter(content)
    return block.format if block else None


def load_block(text: str, fmt: FrontmatterFormat) -> dict[str, Any]:
    """Parse a raw block into a round-trip mapping.

    Raises:
        FrontmatterError: If the block is not valid for *fmt*, or is not a
            mapping at the top level.
    """
    if fmt is FrontmatterFormat.TOML:
        try:
            return tomlkit.parse(text)
        except TOMLKitError as exc:
            raise FrontmatterError(fmt, str(exc)) from exc

    try:
        data = _new_yaml().load(text)
    except YAMLError as exc:
        raise FrontmatterError(fmt, str(exc)) from exc
    if data is None:
        return CommentedMap()
    if not isinstance(data, Mapping):
        raise FrontmatterError(fmt, f"expected a mapping, got {type(data).__name__}")
    return data


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Parse front-matter and body from post content.

    Returns:
        A ``(frontmatter, body)`` tuple. If no complete front-matter block
        opens the file, returns ``({}, content)``.

    Raises:
        FrontmatterError: If a block is present but malformed.
    """
    block = split_frontmatter(content)
    if block is None:
        return {}, content
    return load_block(block.text, block.format), block.body


def plain_frontmatter(value: Any) -> Any:
    """Strip round-trip wrapper types down to builtin Python values."""
    unwrap = getattr(value, "unwrap", None)
    if callable(unwrap):
        return unwrap()
    if isinstance(value, Mapping):
        return {str(k): plain_frontmatter(v) for k, v in value.items()}
    if isinstance(value, list):
        return [plain_frontmatter(v) for v in value]
    if isinstance(value, str):
        return str(value)
    return value


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def order_frontmatter(fm: Mapping[str, Any]) -> dict[str, Any]:
    """Return *fm* with keys in canonical order.

    Keys in :data:`CANONICAL_KEY_ORDER` come first, then remaining scalar
    keys alphabetically, then tables (:data:`TABLE_KEY_ORDER` first, others
    alphabetically). ``None`` values are omitted.
    """
    present = {k: v for k, v in fm.items() if v is not None}
    tables = {k for k, v in present.items() if isinstance(v, Mapping)}

    ordered: dict[str, Any] = {}
    for key in CANONICAL_KEY_ORDER:
        if key in present and key not in tables:
            ordered[key] = present[key]
    for key in sorted(present):
        if key not in ordered and key not in tables:
            ordered[key] = present[key]
    for key in TABLE_KEY_ORDER:
        if key in tables:
            ordered[key] = present[key]
    for key in sorted(tables):
        if key not in ordered:
            ordered[key] = present[key]
    return ordered


def dump_block(fm: Mapping[str, Any], fmt: FrontmatterFormat) -> str:
    """Serialize a mapping to a block (without delimiters).

    Mappings produced by :func:`load_block` for the same dialect keep their
    original layout; anything else is re-ordered canonically.
    """
    if fmt is FrontmatterFormat.TOML:
        if isinstance(fm, TOMLDocument):
            return tomlkit.dumps(fm)
        return tomlkit.dumps(order_frontmatter(plain_frontmatter(fm)))

    data = fm if isinstance(fm, CommentedMap) else order_frontmatter(plain_frontmatter(fm))
    if not data:
        return ""
    buf = StringIO()
    _new_yaml().dump(data, buf)
    return buf.getvalue()


def render_frontmatter(
    fm: Mapping[str, Any],
    body: str,
    fmt: FrontmatterFormat = FrontmatterFormat.TOML,
) -> str:
    """Render a front-matter mapping and body text into post content."""
    delim = DELIMITERS[fmt]
    block = dump_block(fm, fmt)
    if block and not block.endswith("\n"):
        block += "\n"
    return f"{delim}\n{block}{delim}\n{body}"
