"""
Derived progress metrics.

Pure functions over a student's score history. Nothing here reads the store;
the same sequence always yields the same result.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .models import Student, Tier

# Returned by latest_score when there is no assessment yet
NO_DATA = None

MASTERY_CUTOFF = 80.0
APPROACHING_CUTOFF = 60.0

# A trend needs at least this many points to be drawn
MIN_TREND_POINTS = 2


class ScoreBand(str, Enum):
    MASTERY = "mastery"
    APPROACHING = "approaching"
    INTERVENTION = "intervention"


TIER_COLORS: Dict[Tier, str] = {
    Tier.CORE: "green",
    Tier.TARGETED: "yellow",
    Tier.INTENSIVE: "red",
}

BAND_COLORS: Dict[ScoreBand, str] = {
    ScoreBand.MASTERY: "green",
    ScoreBand.APPROACHING: "orange",
    ScoreBand.INTERVENTION: "red",
}


def latest_score(scores: Sequence[float]) -> Optional[float]:
    if not scores:
        return NO_DATA
    return scores[-1]


def band(score: float) -> ScoreBand:
    # Lower bound of each band is inclusive: 80 is mastery, 60 is approaching
    if score >= MASTERY_CUTOFF:
        return ScoreBand.MASTERY
    if score >= APPROACHING_CUTOFF:
        return ScoreBand.APPROACHING
    return ScoreBand.INTERVENTION


def trend_series(scores: Sequence[float]) -> Optional[Iterator[Tuple[int, float]]]:
    """
    Lazily yield ``(index, value)`` pairs in chronological order.

    Returns None when there are fewer than two scores, which means
    "insufficient data" rather than an error. The series iterates over a copy,
    so later appends to the caller's list do not leak into it.
    """
    points = tuple(scores)
    if len(points) < MIN_TREND_POINTS:
        return None
    return ((index, value) for index, value in enumerate(points))


def tier_color(tier: Tier) -> str:
    return TIER_COLORS[Tier(tier)]


def band_color(score_band: ScoreBand) -> str:
    return BAND_COLORS[score_band]


def assessment_label(index: int) -> str:
    return f"A{index + 1}"


def chart_points(scores: Iterable[float]) -> List[Dict[str, Any]]:
    return [{"assessment": assessment_label(i), "score": s} for i, s in enumerate(scores)]


def student_overview(student: Student) -> Dict[str, Any]:
    """One roster row: the student plus everything the table colors by."""
    latest = latest_score(student.scores)
    latest_band = band(latest) if latest is not NO_DATA else None
    return {
        "student": student.model_dump(mode="json"),
        "latest_score": latest,
        "band": latest_band.value if latest_band else None,
        "band_color": band_color(latest_band) if latest_band else None,
        "assessment_count": len(student.scores),
        "tier_color": tier_color(student.tier),
        "has_iep": student.has_iep,
        "is_ell": student.is_ell,
    }


def roster_summary(students: Iterable[Student]) -> Dict[str, Any]:
    by_tier = {int(t): 0 for t in Tier}
    by_band = {b.value: 0 for b in ScoreBand}
    total = ell = iep = no_data = 0
    for s in students:
        total += 1
        by_tier[int(s.tier)] += 1
        ell += int(s.is_ell)
        iep += int(s.has_iep)
        latest = latest_score(s.scores)
        if latest is NO_DATA:
            no_data += 1
        else:
            by_band[band(latest).value] += 1
    return {
        "total": total,
        "by_tier": by_tier,
        "by_band": by_band,
        "no_data": no_data,
        "ell": ell,
        "iep": iep,
    }
