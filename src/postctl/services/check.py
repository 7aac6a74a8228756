"""CheckService — lint every post under the content root.

Single command following the linter pattern. Reports only; posts are
immutable, so there is no automatic repair.
"""

from __future__ import annotations

import logging
from typing import Any

from postctl.domain.lint import (
    SEVERITY_ERROR,
    SEVERITY_RANK,
    SEVERITY_WARNING,
    lint_post,
)
from postctl.services.base import BaseService
from postctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class CheckService(BaseService):
    """Handles post shape checking."""

    def check(self, *, min_severity: str = SEVERITY_WARNING) -> ServiceResult:
        """Report issues at or above *min_severity* without modifying anything."""
        cfg = self._site.settings.check
        threshold = SEVERITY_RANK[min_severity]

        issues: list[dict[str, Any]] = []
        files = self._site.find_posts()
        for path in files:
            rel = self._site.relative(path)
            try:
                content = self._site.read_text(path)
            except (OSError, UnicodeDecodeError) as exc:
                issues.append(
                    {
                        "path": rel,
                        "code": "unreadable",
                        "severity": SEVERITY_ERROR,
                        "message": f"cannot read file: {exc}",
                    }
                )
                continue

            for issue in lint_post(
                content,
                require_authors=cfg.require_authors,
                check_round_trip=cfg.check_round_trip,
            ):
                if SEVERITY_RANK[issue.severity] >= threshold:
                    issues.append({"path": rel, **issue.to_dict()})

        error_count = sum(1 for i in issues if i["severity"] == SEVERITY_ERROR)
        warning_count = len(issues) - error_count
        logger.debug(
            "Check finished",
            extra={"files": len(files), "errors": error_count, "warnings": warning_count},
        )

        return ServiceResult(
            ok=True,
            op="check",
            data={
                "issues": issues,
                "count": len(issues),
                "error_count": error_count,
                "warning_count": warning_count,
                "files": len(files),
                "healthy": error_count == 0,
            },
        )
