"""Tests for forward pairing (cigar to beverage archetypes)."""

import pytest

from catalog import BEVERAGE_ARCHETYPES
from engine import PAIRING_LIMIT, SCORING_WEIGHTS, get_smart_pairings, synergy_score
from models import FlavorProfile


def _profile(**kw) -> FlavorProfile:
    base = {"spice": 2, "sweet": 2, "earth": 2, "cream": 2, "wood": 2, "body": 3}
    base.update(kw)
    return FlavorProfile(**base)


class TestSynergyScore:
    """Weighted distance on body, earth and spice."""

    def test_identical_scored_axes_is_100(self):
        cigar = _profile(body=9, earth=7, spice=4, sweet=0, cream=10, wood=0)
        bev = BEVERAGE_ARCHETYPES[0].profile
        assert synergy_score(cigar, bev) == 100

    def test_weights(self):
        bev = _profile(body=5, earth=5, spice=5)
        assert synergy_score(_profile(body=6, earth=5, spice=5), bev) == 92
        assert synergy_score(_profile(body=5, earth=6, spice=5), bev) == 96
        assert synergy_score(_profile(body=5, earth=5, spice=6), bev) == 96

    def test_unscored_axes_ignored(self):
        bev = _profile(body=5, earth=5, spice=5)
        a = _profile(body=5, earth=5, spice=5, sweet=0, cream=0, wood=0)
        b = _profile(body=5, earth=5, spice=5, sweet=10, cream=10, wood=10)
        assert synergy_score(a, bev) == synergy_score(b, bev) == 100

    def test_clamped_at_zero(self):
        bev = _profile(body=10, earth=10, spice=10)
        assert synergy_score(_profile(body=0, earth=0, spice=0), bev) == 0

    def test_scoring_axes_config(self):
        assert SCORING_WEIGHTS == {"body": 1.0, "earth": 0.5, "spice": 0.5}


class TestGetSmartPairings:
    """Ranking, truncation and tie-break."""

    def test_returns_top_four(self):
        assert len(get_smart_pairings("Full", "pepper")) == PAIRING_LIMIT == 4

    @pytest.mark.parametrize("strength,notes", [
        ("Full", "pepper, leather, smoke"),
        ("Medium", ""),
        ("Mild", "cream, nut, butter"),
        ("", ""),
        ("Full+", "pepper spice cinnamon earth coffee chocolate fruit"),
    ])
    def test_bounds_and_order(self, strength, notes):
        result = get_smart_pairings(strength, notes)
        scores = [s.synergy_score for s in result]
        assert all(0 <= s <= 100 for s in scores)
        assert scores == sorted(scores, reverse=True)

    def test_islay_in_top_two_for_bold_peppery(self):
        result = get_smart_pairings("Full", "pepper, leather, smoke")
        assert "Peated Islay Malt" in [s.title for s in result[:2]]

    def test_full_peppery_leather_scores(self):
        result = get_smart_pairings("Full", "pepper, leather, smoke")
        assert [(s.title, s.synergy_score) for s in result] == [
            ("Cabernet Sauvignon", 88),
            ("Peated Islay Malt", 84),
            ("85% Single Origin Cacao", 80),
            ("Aged Caribbean Dark Rum", 64),
        ]

    def test_ties_keep_catalog_order(self):
        # Cabernet and cacao both score 40 for a medium, note-less cigar
        result = get_smart_pairings("Medium", "")
        assert [(s.title, s.synergy_score) for s in result] == [
            ("Aged Caribbean Dark Rum", 64),
            ("Sumatran Mandheling", 52),
            ("Cabernet Sauvignon", 40),
            ("85% Single Origin Cacao", 40),
        ]

    def test_profile_match_is_display_subset(self):
        result = get_smart_pairings("Full", "")
        cab = next(s for s in result if s.category == "wine")
        assert cab.profile_match == {"body": 9, "wood": 7, "earth": 6}

    def test_results_are_fresh(self):
        first = get_smart_pairings("Mild", "")
        first[0].profile_match["body"] = 99
        first[0].synergy_score = 0
        second = get_smart_pairings("Mild", "")
        assert second[0].profile_match != first[0].profile_match
        assert BEVERAGE_ARCHETYPES[3].profile_match == {"sweet": 9, "wood": 6}

    def test_idempotent(self):
        a = get_smart_pairings("Full", "cedar, cream")
        b = get_smart_pairings("Full", "cedar, cream")
        assert [s.model_dump() for s in a] == [s.model_dump() for s in b]
