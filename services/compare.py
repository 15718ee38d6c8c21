# services/compare.py
"""
Text-vs-text comparison shared by the API and the Streamlit app.

- Segment  -> both texts into grapheme / char / word units
- Match    -> Ratcliff/Obershelp blocks over the units
- Map back -> matched blocks as (start, len) character spans of each text,
              ready for utils.highlight
- Env      -> MAX_INPUT_UNITS (per-side cap, default 1000)
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional

from algorithms.gestalt import matching_blocks, ratio_from_matches
from utils.segment import segment_spans, to_char_spans

logger = logging.getLogger(__name__)


class InputTooLarge(ValueError):
    def __init__(self, side: str, count: int, limit: int, unit: str):
        super().__init__(f"text {side} has {count} {unit} units, limit is {limit}")
        self.side = side
        self.count = count
        self.limit = limit
        self.unit = unit


def max_input_units() -> int:
    return int(os.getenv("MAX_INPUT_UNITS", "1000"))


def compare_texts(
    text_a: str,
    text_b: str,
    unit: str = "grapheme",
    max_units: Optional[int] = None,
) -> Dict[str, object]:
    spans_a = segment_spans(text_a, unit)
    spans_b = segment_spans(text_b, unit)

    limit = max_input_units() if max_units is None else max_units
    for side, spans in (("A", spans_a), ("B", spans_b)):
        if len(spans) > limit:
            logger.warning("rejecting text %s: %d %s units > %d", side, len(spans), unit, limit)
            raise InputTooLarge(side, len(spans), limit, unit)

    units_a = [text_a[s:e] for s, e in spans_a]
    units_b = [text_b[s:e] for s, e in spans_b]
    blocks = matching_blocks(units_a, units_b)
    matched = sum(m.size for m in blocks)
    score = ratio_from_matches(matched, len(units_a), len(units_b))

    logger.info(
        "compared %d vs %d %s units: matched=%d score=%.4f",
        len(units_a), len(units_b), unit, matched, score,
    )
    return {
        "unit": unit,
        "similarity": score,
        "matched": matched,
        "lengthA": len(units_a),
        "lengthB": len(units_b),
        "matchesA": to_char_spans(((m.a, m.size) for m in blocks), spans_a),
        "matchesB": to_char_spans(((m.b, m.size) for m in blocks), spans_b),
    }
