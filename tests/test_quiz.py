"""Tests for the onboarding collector-level quiz tally."""

from engine import LEVELS, QUIZ_POINTS, build_collector_level


def _answers(*pairs):
    return [{"question_id": q, "option_id": o} for q, o in pairs]


class TestBuildCollectorLevel:
    """Point tally per level."""

    def test_all_first_options_is_novice(self):
        level, totals = build_collector_level(_answers(("Q1", "A"), ("Q2", "A"), ("Q3", "A")))
        assert level == "novice"
        assert totals == {"novice": 9, "aficionado": 1, "collector": 0}

    def test_all_last_options_is_collector(self):
        level, totals = build_collector_level(_answers(("Q1", "D"), ("Q2", "D"), ("Q3", "D")))
        assert level == "collector"
        assert totals == {"novice": 0, "aficionado": 1, "collector": 9}

    def test_middle_path_is_aficionado(self):
        level, _ = build_collector_level(_answers(("Q1", "B"), ("Q2", "B"), ("Q3", "B")))
        assert level == "aficionado"

    def test_tie_goes_to_earlier_level(self):
        # Q3/C gives aficionado 2, collector 2
        level, totals = build_collector_level(_answers(("Q3", "C")))
        assert totals["aficionado"] == totals["collector"] == 2
        assert level == "aficionado"

    def test_unknown_ids_award_nothing(self):
        level, totals = build_collector_level(_answers(("Q9", "A"), ("Q1", "Z")))
        assert totals == {lvl: 0 for lvl in LEVELS}
        assert level == "novice"

    def test_every_option_awards_points(self):
        for options in QUIZ_POINTS.values():
            assert sorted(options) == ["A", "B", "C", "D"]
            for points in options.values():
                assert sum(points.values()) > 0
