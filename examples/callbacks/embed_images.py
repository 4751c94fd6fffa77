"""Embed image URLs, link everything else."""

import re

from autolink import AutoLinker

_IMAGE_RE = re.compile(r"\.(gif|png|jpe?g|webp)$", re.IGNORECASE)


def embed_images(url: str) -> str | None:
    if _IMAGE_RE.search(url):
        return f"<img src='{url}' alt=''>"
    return None  # default anchor


linker = AutoLinker(target="_blank", rel="noopener", callback=embed_images)

print(linker("Logo: http://example.com/logo.png (home: http://example.com)."))
