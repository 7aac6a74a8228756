"""BaseService — foundation for all postctl services.

Every service receives a :class:`Site` at construction time and performs
all file access through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from postctl.infrastructure.site import Site


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class PostService(BaseService):
            def show(self, path: str) -> ServiceResult:
                post = self._site.load_post(self._site.resolve(path))
                ...
    """

    def __init__(self, site: Site) -> None:
        self._site = site
