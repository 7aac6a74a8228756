"""Command: lint every post."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from postctl.commands._base import PostCommand

if TYPE_CHECKING:
    from postctl.commands._context import AppContext


@click.command(
    cls=PostCommand,
    examples="""\
  postctl check
  postctl check --errors-only
  postctl check --min-severity error
  postctl --json check""",
)
@click.option(
    "--min-severity",
    type=click.Choice(["warning", "error"]),
    default="warning",
    help="Hide issues below this severity.",
)
@click.option("--errors-only", is_flag=True, help="Shortcut for --min-severity error.")
@click.pass_obj
def check(app: AppContext, min_severity: str, errors_only: bool) -> None:
    """Check that every post has well-formed front-matter and a body.

    Exits with status 1 when any error-severity issue is found.
    """
    from postctl.services.check import CheckService

    threshold = "error" if errors_only else min_severity
    result = CheckService(app.site).check(min_severity=threshold)
    app.emit(result)
    if not result.data.get("healthy", True):
        raise SystemExit(1)
