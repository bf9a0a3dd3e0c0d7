"""Shared CLI formatting helpers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from boardsync.contracts.feature import STATUS_ORDER, FeatureStatus


def format_status_breakdown(statuses: Iterable[FeatureStatus]) -> str:
    counts = Counter(statuses)
    parts = [f"{counts[status]} {status.value.lower()}" for status in STATUS_ORDER if counts[status]]
    return ", ".join(parts) if parts else "none"


def plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count != 1 else ''}"
