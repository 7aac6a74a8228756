"""Slug generation for new post filenames."""

from __future__ import annotations

import re
import unicodedata

DEFAULT_SLUG = "post"


def slugify(title: str) -> str:
    """Turn a title into a URL- and filename-safe slug.

    Examples:
        >>> slugify("Functional Programming: The Good Parts!")
        'functional-programming-the-good-parts'
        >>> slugify("Café  au lait")
        'cafe-au-lait'
        >>> slugify("???")
        'post'
    """
    text = unicodedata.normalize("NFKD", title)
    text = text.encode("ascii", "ignore").decode("ascii").lower()
    text = re.sub(r"[^\w\s-]", "", text)
    text = re.sub(r"[\s_-]+", "-", text).strip("-")
    return text or DEFAULT_SLUG
