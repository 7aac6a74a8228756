"""Command: list posts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from postctl.commands._base import PostCommand

if TYPE_CHECKING:
    from postctl.commands._context import AppContext


@click.command(
    "list",
    cls=PostCommand,
    examples="""\
  postctl list
  postctl list --author "Ada Lovelace"
  postctl list --tag fp --sort title
  postctl list --drafts --limit 5
  postctl --json list""",
)
@click.option("--author", default=None, help="Only posts by this author.")
@click.option("--tag", default=None, help="Only posts with this tag.")
@click.option("--drafts", "include_drafts", is_flag=True, help="Include draft posts.")
@click.option(
    "--sort",
    type=click.Choice(["date", "title"]),
    default="date",
    help="Sort order (date is newest first).",
)
@click.option("--limit", default=None, type=click.IntRange(min=1), help="Max results.")
@click.pass_obj
def list_cmd(
    app: AppContext,
    author: str | None,
    tag: str | None,
    include_drafts: bool,
    sort: str,
    limit: int | None,
) -> None:
    """List posts with their front-matter metadata."""
    from postctl.services.post import PostService

    result = PostService(app.site).list_posts(
        author=author,
        tag=tag,
        include_drafts=include_drafts,
        sort=sort,  # type: ignore[arg-type]
        limit=limit,
    )
    app.emit(result)
