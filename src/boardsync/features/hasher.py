"""Deterministic content fingerprints."""

from __future__ import annotations

import hashlib


class ContentHasher:
    """Compute short change-detection fingerprints of raw file content."""

    length = 8

    def hash(self, content: str | bytes) -> str:
        data = content.encode("utf-8") if isinstance(content, str) else content
        # Not a security boundary; md5 keeps fingerprints stable with existing mapping files.
        return hashlib.md5(data, usedforsecurity=False).hexdigest()[: self.length]
