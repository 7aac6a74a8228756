"""ExportService — JSON index of post metadata.

The index lists every post's front-matter fields (never the body) so
external tooling can consume the catalogue without parsing markup.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from postctl.services._helpers import now_iso
from postctl.services.base import BaseService
from postctl.services.post import PostService
from postctl.services.result import ServiceResult


class ExportService(BaseService):
    """Handles index exports."""

    def build_index(self, *, include_drafts: bool = False) -> tuple[dict[str, Any], list[str]]:
        """Assemble the index payload and any parse warnings."""
        listing = PostService(self._site).list_posts(include_drafts=include_drafts)
        posts = listing.data["items"]
        index = {
            "site": self._site.settings.site.name,
            "generated": now_iso(),
            "count": len(posts),
            "posts": posts,
        }
        return index, list(listing.warnings)

    def export_index(
        self,
        output: str | Path | None = None,
        *,
        include_drafts: bool = False,
    ) -> ServiceResult:
        """Write the index to *output*, or return it inline when omitted."""
        op = "export_index"
        index, warnings = self.build_index(include_drafts=include_drafts)

        if output is None:
            return ServiceResult(
                ok=True,
                op=op,
                data={"count": index["count"], "index": index},
                warnings=warnings,
            )

        out_path = Path(output)
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(
                json.dumps(index, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            return ServiceResult.failure(op, "WRITE_FAILED", f"Cannot write {output}: {exc}")

        return ServiceResult(
            ok=True,
            op=op,
            data={"count": index["count"], "path": str(out_path)},
            warnings=warnings,
        )
