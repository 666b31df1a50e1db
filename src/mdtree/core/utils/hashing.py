"""Content hashing for parsed document output"""

import hashlib


def content_hash(text: str) -> str:
    """Hex SHA-256 of the raw document text, used to detect source changes."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
