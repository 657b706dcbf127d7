import types

import pytest

from eduelevate import metrics
from eduelevate.metrics import ScoreBand
from eduelevate.models import Student, Tier


class TestLatestScore:
    def test_empty_history_is_no_data(self):
        assert metrics.latest_score([]) is metrics.NO_DATA
        assert metrics.latest_score(()) is None

    def test_returns_last_entry(self):
        assert metrics.latest_score([70, 85, 62]) == 62


class TestBand:
    @pytest.mark.parametrize(
        "score, expected",
        [
            (59.9, ScoreBand.INTERVENTION),
            (60, ScoreBand.APPROACHING),
            (79.9, ScoreBand.APPROACHING),
            (80, ScoreBand.MASTERY),
            (100, ScoreBand.MASTERY),
            (0, ScoreBand.INTERVENTION),
        ],
    )
    def test_boundaries(self, score, expected):
        assert metrics.band(score) is expected

    def test_band_colors(self):
        assert metrics.band_color(ScoreBand.MASTERY) == "green"
        assert metrics.band_color(ScoreBand.APPROACHING) == "orange"
        assert metrics.band_color(ScoreBand.INTERVENTION) == "red"


class TestTrendSeries:
    def test_single_point_is_insufficient(self):
        assert metrics.trend_series([70]) is None
        assert metrics.trend_series([]) is None

    def test_pairs_in_order(self):
        assert list(metrics.trend_series([70, 85])) == [(0, 70), (1, 85)]

    def test_is_lazy_and_isolated_from_later_appends(self):
        scores = [70, 85]
        series = metrics.trend_series(scores)
        assert isinstance(series, types.GeneratorType)
        scores.append(99)
        assert list(series) == [(0, 70), (1, 85)]

    def test_deterministic(self):
        scores = (55.0, 61.5, 80.0)
        assert list(metrics.trend_series(scores)) == list(metrics.trend_series(scores))


def test_tier_colors():
    assert metrics.tier_color(Tier.CORE) == "green"
    assert metrics.tier_color(2) == "yellow"
    assert metrics.tier_color(Tier.INTENSIVE) == "red"


def test_chart_points_labels_assessments():
    assert metrics.chart_points([85, 78]) == [
        {"assessment": "A1", "score": 85},
        {"assessment": "A2", "score": 78},
    ]


def test_student_overview():
    student = Student(id="s1", name="Sophia", tier=Tier.TARGETED, iep_notes="Visual aids", scores=(65, 72))
    row = metrics.student_overview(student)
    assert row["student"]["id"] == "s1"
    assert row["latest_score"] == 72
    assert row["band"] == "approaching"
    assert row["band_color"] == "orange"
    assert row["assessment_count"] == 2
    assert row["tier_color"] == "yellow"
    assert row["has_iep"] is True
    assert row["is_ell"] is False


def test_student_overview_without_scores():
    row = metrics.student_overview(Student(id="s2", name="Ava"))
    assert row["latest_score"] is None
    assert row["band"] is None
    assert row["band_color"] is None
    assert row["assessment_count"] == 0


def test_roster_summary(seeded_store):
    seeded_store.bulk_add(["Ava"])
    summary = metrics.roster_summary(seeded_store.list())
    assert summary["total"] == 3
    assert summary["by_tier"] == {1: 2, 2: 1, 3: 0}
    assert summary["by_band"] == {"mastery": 1, "approaching": 1, "intervention": 0}
    assert summary["no_data"] == 1
    assert summary["ell"] == 1
    assert summary["iep"] == 1
