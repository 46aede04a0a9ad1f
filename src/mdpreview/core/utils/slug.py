"""Slug generation for heading ids"""

import re


def slugify(text: str) -> str:
    """Convert heading text to a lowercase, hyphen-separated id-safe slug."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'\s+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')
