# engine.py
from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import logging
import numpy as np

from models import FLAVOR_AXES, FlavorProfile, PairingSuggestion, ReversePairing
from catalog import (
    BEVERAGE_ARCHETYPES, REVERSE_VARIANTS, DEFAULT_VARIANT,
    OCCASION_RULES, CATEGORY_RULES,
)

logger = logging.getLogger(__name__)

# ---- 1) Strength -> body ----
# Eerste substring die past wint; onbekend = mild.
STRENGTH_BODY: List[Tuple[str, int]] = [("full", 9), ("medium", 5)]
DEFAULT_BODY = 3
BASELINE = 2

# ---- 2) Notes lexicon -> as-delta's ----
# Families zijn onafhankelijk en tellen op, geen plafond.
NOTE_LEXICON: List[Tuple[Tuple[str, ...], str, int]] = [
    (("pepper", "spice"), "spice", +5),
    (("cinnamon",), "spice", +2),
    (("chocolate", "caramel", "sweet"), "sweet", +5),
    (("fruit",), "sweet", +3),
    (("earth", "leather", "soil"), "earth", +5),
    (("coffee", "toast"), "earth", +3),
    (("cream", "butter", "milk"), "cream", +5),
    (("nut",), "cream", +3),
    (("cedar", "wood", "oak"), "wood", +5),
]

def body_from_strength(strength: str) -> int:
    s = (strength or "").lower()
    for needle, body in STRENGTH_BODY:
        if needle in s:
            return body
    return DEFAULT_BODY

def derive_profile(strength: str, notes: str) -> FlavorProfile:
    """Six-axis profile from a cigar's strength label and free-text notes."""
    n = (notes or "").lower()
    P: Dict[str, int] = {k: BASELINE for k in FLAVOR_AXES}
    P["body"] = body_from_strength(strength)
    for keywords, axis, delta in NOTE_LEXICON:
        if any(k in n for k in keywords):
            P[axis] += delta
    return FlavorProfile(**P)

# ---- 3) Synergy (gewogen L1 op 3 assen) ----
# Scoren gebeurt alleen op deze assen; profile_match in de catalogus is puur weergave.
SCORING_WEIGHTS: Dict[str, float] = {"body": 1.0, "earth": 0.5, "spice": 0.5}
SCORE_AXES = list(SCORING_WEIGHTS)
WEIGHTS = np.array([SCORING_WEIGHTS[a] for a in SCORE_AXES], dtype=float)
SCORE_PER_POINT = 8.0
PAIRING_LIMIT = 4

def clamp_score(v: float) -> float:
    return max(0.0, min(100.0, v))

def _vec(p: FlavorProfile) -> np.ndarray:
    return np.array([getattr(p, a) for a in SCORE_AXES], dtype=float)

def synergy_score(cigar: FlavorProfile, beverage: FlavorProfile) -> int:
    diff = float(np.dot(np.abs(_vec(cigar) - _vec(beverage)), WEIGHTS))
    return int(round(clamp_score(100.0 - diff * SCORE_PER_POINT)))

def get_smart_pairings(strength: str, notes: str) -> List[PairingSuggestion]:
    """
    Rank the beverage archetypes against a cigar and keep the best four.
    Equal scores keep catalog order (stable sort).
    """
    cigar = derive_profile(strength, notes)
    scored = []
    for bev in BEVERAGE_ARCHETYPES:
        scored.append(PairingSuggestion(
            category=bev.category,
            title=bev.title,
            subtitle=bev.subtitle,
            description=bev.description,
            why_it_works=bev.why_it_works,
            sommelier_tip=bev.sommelier_tip,
            icon=bev.icon,
            synergy_score=synergy_score(cigar, bev.profile),
            profile_match=dict(bev.profile_match),
        ))
    scored.sort(key=lambda s: s.synergy_score, reverse=True)
    top = scored[:PAIRING_LIMIT]
    logger.debug("pairings for %r/%r: %s", strength, notes,
                 [(s.title, s.synergy_score) for s in top])
    return top

# ---- 4) Reverse pairing (drank + gelegenheid -> sigaar) ----
def select_reverse_variant(category: str, preference: str, occasion: Optional[str] = None) -> str:
    p = (preference or "").lower()
    occ = (occasion or "").lower()

    # gelegenheid gaat voor alles
    if occ in OCCASION_RULES:
        return OCCASION_RULES[occ]

    rules = CATEGORY_RULES.get(category)
    if rules is None:
        return DEFAULT_VARIANT
    families, fallback = rules
    for keywords, variant in families:
        if any(k in p for k in keywords):
            return variant
    return fallback or DEFAULT_VARIANT

def get_reverse_pairing(category: str, preference: str, occasion: Optional[str] = None) -> ReversePairing:
    variant = select_reverse_variant(category, preference, occasion)
    logger.debug("reverse pairing %r/%r/%r -> %s", category, preference, occasion, variant)
    return REVERSE_VARIANTS[variant].model_copy(deep=True)

# ---- 5) Onboarding quiz (punten per niveau) ----
LEVELS = ("novice", "aficionado", "collector")

QUIZ_POINTS: dict[str, dict[str, dict[str, int]]] = {
    # question_id: { option_id: {level: punten, ...} }
    "Q1": {
        "A": {"novice": 3},
        "B": {"novice": 1, "aficionado": 2},
        "C": {"aficionado": 3, "collector": 1},
        "D": {"aficionado": 1, "collector": 3},
    },
    "Q2": {
        "A": {"novice": 3, "aficionado": 1},
        "B": {"aficionado": 3, "collector": 1},
        "C": {"aficionado": 2, "collector": 3},
        "D": {"collector": 3},
    },
    "Q3": {
        "A": {"novice": 3},
        "B": {"novice": 1, "aficionado": 3},
        "C": {"aficionado": 2, "collector": 2},
        "D": {"collector": 3},
    },
}

def build_collector_level(answers: list[dict]) -> tuple[str, dict]:
    totals = {lvl: 0 for lvl in LEVELS}
    for ans in answers:
        points = QUIZ_POINTS.get(ans["question_id"], {}).get(ans["option_id"], {})
        for lvl, v in points.items():
            totals[lvl] += v
    # max() houdt bij gelijkspel de eerste in LEVELS
    level = max(LEVELS, key=lambda lvl: totals[lvl])
    return level, totals
