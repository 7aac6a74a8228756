"""Static shape checks for a single post file.

Each rule inspects raw file content and reports :class:`LintIssue` records.
Nothing here touches the filesystem; :class:`CheckService` feeds file
content in and attaches paths to the results.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from typing import Any

from postctl.domain.frontmatter import (
    TABLE_KEY_ORDER,
    FrontmatterError,
    dump_block,
    load_block,
    plain_frontmatter,
    split_frontmatter,
)
from postctl.domain.post import AUTHORS_TAXONOMY, authors_from_frontmatter

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"

SEVERITY_RANK: dict[str, int] = {SEVERITY_WARNING: 0, SEVERITY_ERROR: 1}

REQUIRED_TEXT_FIELDS = ("title", "description")


@dataclass(frozen=True)
class LintIssue:
    """One problem found in a post file."""

    code: str
    severity: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ValidationResult:
    """Result of a content validation check."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def summarize(issues: list[LintIssue]) -> ValidationResult:
    errors = [i.message for i in issues if i.severity == SEVERITY_ERROR]
    warnings = [i.message for i in issues if i.severity == SEVERITY_WARNING]
    return ValidationResult(valid=not errors, errors=errors, warnings=warnings)


def _error(code: str, message: str) -> LintIssue:
    return LintIssue(code=code, severity=SEVERITY_ERROR, message=message)


def _warning(code: str, message: str) -> LintIssue:
    return LintIssue(code=code, severity=SEVERITY_WARNING, message=message)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def _check_fields(fm: dict[str, Any]) -> list[LintIssue]:
    issues: list[LintIssue] = []
    for key in REQUIRED_TEXT_FIELDS:
        value = fm.get(key)
        if not isinstance(value, str) or not value.strip():
            issues.append(_error("missing_field", f"'{key}' must be present and non-empty"))

    value = fm.get("date")
    if value is None or value == "":
        issues.append(_error("missing_field", "'date' must be present and non-empty"))
    elif isinstance(value, str):
        try:
            dt.date.fromisoformat(value)
        except ValueError:
            issues.append(_error("invalid_date", f"'date' is not a calendar date: {value!r}"))
    elif not isinstance(value, dt.date):
        issues.append(_error("invalid_date", f"'date' is not a calendar date: {value!r}"))
    return issues


def _check_tables(fm: dict[str, Any]) -> list[LintIssue]:
    issues: list[LintIssue] = []
    for key in TABLE_KEY_ORDER:
        if key in fm and not isinstance(fm[key], Mapping):
            issues.append(_error("invalid_frontmatter", f"'{key}' must be a table"))

    taxonomies = fm.get("taxonomies")
    if isinstance(taxonomies, Mapping):
        for name, terms in taxonomies.items():
            if name == AUTHORS_TAXONOMY:
                continue
            if not isinstance(terms, list) or not all(isinstance(t, str) for t in terms):
                issues.append(
                    _error("invalid_frontmatter", f"taxonomy '{name}' must be a list of terms")
                )
    return issues


def _has_second_block(body: str) -> bool:
    """True when *body* opens with another block that parses to a non-empty mapping.

    A markdown body may open with a ``---`` thematic break; that only counts
    as a block when its contents read as front-matter keys.
    """
    block = split_frontmatter(body.lstrip("\n"))
    if block is None:
        return False
    try:
        return bool(load_block(block.text, block.format))
    except FrontmatterError:
        return False


def _check_authors(fm: dict[str, Any], *, require_authors: bool) -> list[LintIssue]:
    authors = authors_from_frontmatter(fm)
    if authors is None or authors == []:
        msg = "'authors' must list at least one author"
        if require_authors:
            return [_error("missing_authors", msg)]
        return [_warning("missing_authors", msg)]

    if not isinstance(authors, list):
        return [_error("invalid_authors", "'authors' must be a list of names")]
    if any(not isinstance(a, str) or not a.strip() for a in authors):
        return [_error("invalid_authors", "every entry in 'authors' must be a non-empty string")]
    return []


def lint_post(
    content: str,
    *,
    require_authors: bool = True,
    check_round_trip: bool = True,
) -> list[LintIssue]:
    """Report shape problems in a post file's content.

    Checks, in order: a single front-matter block opens the file, the block
    parses, required fields are present, authors are listed, the body is
    not blank, and the block survives a parse/serialize round trip.
    """
    block = split_frontmatter(content)
    if block is None:
        return [_error("missing_frontmatter", "file does not start with a front-matter block")]

    issues: list[LintIssue] = []
    if _has_second_block(block.body):
        issues.append(
            _error("duplicate_frontmatter", "a second front-matter block follows the first")
        )

    try:
        parsed = load_block(block.text, block.format)
    except FrontmatterError as exc:
        issues.append(_error("invalid_frontmatter", str(exc)))
        return issues

    fm: dict[str, Any] = plain_frontmatter(parsed)
    issues.extend(_check_fields(fm))
    issues.extend(_check_tables(fm))
    issues.extend(_check_authors(fm, require_authors=require_authors))

    if not block.body.strip():
        issues.append(_error("empty_body", "body is empty once the front-matter is stripped"))

    if check_round_trip and dump_block(parsed, block.format) != block.text:
        issues.append(
            _warning(
                "not_round_trippable",
                f"{block.format.value.upper()} front-matter does not re-serialize identically",
            )
        )
    return issues
