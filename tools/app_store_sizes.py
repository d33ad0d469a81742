#!/usr/bin/env python3
# Supported App Store Connect screenshot dimensions.
# Sizes are copied from App Store Connect as human-readable strings
# ("2064 × 2752px") and parsed once at import time.

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

DIMENSION_RE = re.compile(r"(\d+)\s*[×x]\s*(\d+)\s*(?:px)?", re.IGNORECASE | re.ASCII)

SUPPORTED_DIMENSIONS = [
    "2064 × 2752px",
    "2752 × 2064px",
    "2048 × 2732px",
    "2732 × 2048px",
]

@dataclass(frozen=True)
class TargetDimension:
    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"

    @property
    def box(self) -> Tuple[int, int]:
        return (self.width, self.height)

def extract_dimensions(text: str) -> Optional[TargetDimension]:
    """
    '2064 × 2752px' -> TargetDimension(2064, 2752).
    Only the first match counts; no match (or a zero side) gives None.
    """
    m = DIMENSION_RE.search(text)
    if not m:
        return None
    width, height = int(m.group(1)), int(m.group(2))
    if width <= 0 or height <= 0:
        return None
    return TargetDimension(width, height)

def build_size_table(texts: Iterable[str]) -> Tuple[TargetDimension, ...]:
    # keep input order, drop unparseable entries, duplicates stay
    parsed = (extract_dimensions(t) for t in texts)
    return tuple(d for d in parsed if d is not None)

SUPPORTED_SIZES = build_size_table(SUPPORTED_DIMENSIONS)
