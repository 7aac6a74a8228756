"""Command: scaffold a new post."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from postctl.commands._base import PostCommand

if TYPE_CHECKING:
    from postctl.commands._context import AppContext


@click.command(
    cls=PostCommand,
    examples="""\
  postctl new "Functional Programming Principles"
  postctl new "Pure Functions" --author "Ada Lovelace" --tag fp --tag python
  postctl new "Immutability" --description "Why values beat variables" --date 2021-02-26
  postctl new "Draft Idea" --draft --section blog
  postctl new "Legacy Post" --format yaml""",
)
@click.argument("title")
@click.option("--author", "authors", multiple=True, help="Author name (repeatable, in order).")
@click.option("--description", default="", help="Short summary.")
@click.option(
    "--date",
    "post_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Publication date (default: today).",
)
@click.option("--tag", "tags", multiple=True, help="Tag term (repeatable).")
@click.option("--section", default=None, help="Content sub-directory.")
@click.option("--draft", is_flag=True, help="Mark the post as a draft.")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["toml", "yaml"]),
    default=None,
    help="Front-matter dialect (default from config).",
)
@click.pass_obj
def new(
    app: AppContext,
    title: str,
    authors: tuple[str, ...],
    description: str,
    post_date: datetime | None,
    tags: tuple[str, ...],
    section: str | None,
    draft: bool,
    fmt: str | None,
) -> None:
    """Create a new post file with front-matter and a starter body."""
    from postctl.services.post import PostService

    result = PostService(app.site).new(
        title,
        authors=list(authors),
        description=description,
        post_date=post_date.date() if post_date else None,
        tags=list(tags),
        section=section,
        draft=draft,
        fmt=fmt,
    )
    app.emit(result)
