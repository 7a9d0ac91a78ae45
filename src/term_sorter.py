#!/usr/bin/env python3
"""Order glossary terms for the index."""
from __future__ import annotations

from typing import Iterable, List


def sort_terms(terms: Iterable[str]) -> List[str]:
    """Return terms in ascending code-point order (case-sensitive, no locale)."""
    return sorted(terms)
