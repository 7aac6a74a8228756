"""Command: show a single post."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from postctl.commands._base import PostCommand

if TYPE_CHECKING:
    from postctl.commands._context import AppContext


@click.command(
    cls=PostCommand,
    examples="""\
  postctl show blog/functional-programming.md
  postctl show content/blog/functional-programming.md
  postctl --json show blog/functional-programming.md""",
)
@click.argument("path")
@click.pass_obj
def show(app: AppContext, path: str) -> None:
    """Show a post's metadata and body.

    PATH is relative to the content directory or the site root.
    """
    from postctl.services.post import PostService

    app.emit(PostService(app.site).show(path))
