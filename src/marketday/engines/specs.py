from __future__ import annotations

from datetime import date
from typing import Dict, Sequence

from ..core.types import Anchor, Calendar, CalendarSpec


def make_spec(id: str, display_name: str, day_names: Sequence[str], anchor_date: date, anchor_index: int) -> CalendarSpec:
    """Build a CalendarSpec; CalendarSpec itself checks that the anchor index fits the cycle."""
    return CalendarSpec(
        calendar=Calendar(id=id, display_name=display_name, day_names=tuple(day_names)),
        anchor=Anchor(date=anchor_date, day_index=anchor_index),
    )


# ============================================================
# FOUR-DAY MARKET WEEKS
# ============================================================

# Both cycles are pinned to the same civil date.
REFERENCE_DATE = date(2025, 8, 12)

IGBO_DAYS = ("Eke", "Orie", "Afor", "Nkwo")
YORUBA_DAYS = ("Ọjọ́ Ifá", "Ọjọ́ Ọ̀rìṣà", "Ọjọ́ Ọ̀ṣun", "Ọjọ́ Ẹ̀bọra")

IGBO = make_spec("igbo", "Igbo", IGBO_DAYS, REFERENCE_DATE, 1)  # Orie
YORUBA = make_spec("yoruba", "Yoruba", YORUBA_DAYS, REFERENCE_DATE, 1)  # Ọjọ́ Ọ̀rìṣà

ALL_SPECS: Dict[str, CalendarSpec] = {
    "igbo": IGBO,
    "yoruba": YORUBA,
}
