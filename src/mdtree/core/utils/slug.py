"""Slug generation for parsed document output names"""

import re


def slugify(text: str, fallback: str = "document") -> str:
    """Lowercase, hyphen-separated, URL-safe slug; fallback when nothing survives."""
    slug = re.sub(r'[^\w\s-]', '', text.lower())
    slug = re.sub(r'[\s_-]+', '-', slug).strip('-')
    return slug or fallback
