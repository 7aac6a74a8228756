"""Command: export a JSON index of posts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from postctl.commands._base import PostCommand

if TYPE_CHECKING:
    from postctl.commands._context import AppContext


@click.command(
    cls=PostCommand,
    examples="""\
  postctl export
  postctl export --output static/posts.json
  postctl export --output static/posts.json --drafts""",
)
@click.option(
    "--output",
    "-o",
    default=None,
    type=click.Path(dir_okay=False),
    help="Write the index to this file instead of stdout.",
)
@click.option("--drafts", "include_drafts", is_flag=True, help="Include draft posts.")
@click.pass_obj
def export(app: AppContext, output: str | None, include_drafts: bool) -> None:
    """Export post metadata (no bodies) as a JSON index."""
    from postctl.services.export import ExportService

    app.emit(ExportService(app.site).export_index(output, include_drafts=include_drafts))
