# models.py
from __future__ import annotations
from pydantic import BaseModel, Field
from typing import List, Dict, Optional, Literal

PairingCategory = Literal["wine", "whiskey", "rum", "coffee", "chocolate", "tea", "spirits"]
Occasion = Literal["Morning", "Relaxing", "Celebration", "Evening"]
CollectorLevel = Literal["novice", "aficionado", "collector"]

# 6 assen, 0..10
FLAVOR_AXES = ["spice", "sweet", "earth", "cream", "wood", "body"]

class FlavorProfile(BaseModel):
    spice: int
    sweet: int
    earth: int
    cream: int
    wood: int
    body: int  # intensity, komt alleen uit strength

class BeverageArchetype(BaseModel):
    category: PairingCategory
    title: str
    subtitle: str
    description: str
    why_it_works: str
    sommelier_tip: str
    icon: str
    profile_match: Dict[str, int]   # deel-profiel voor weergave
    profile: FlavorProfile           # vergelijkingsdoel

class PairingSuggestion(BaseModel):
    category: PairingCategory
    title: str
    subtitle: str
    description: str
    why_it_works: str
    sommelier_tip: str
    icon: str
    synergy_score: int = Field(ge=0, le=100)
    profile_match: Dict[str, int]

class ReversePairing(BaseModel):
    title: str
    ideal_profile: str
    why_it_works: str
    sommelier_tip: str
    suggested_tags: List[str]
    profile: Optional[FlavorProfile] = None

# ---- request/response ----
class CigarIn(BaseModel):
    strength: str = ""   # "Mild" | "Medium" | "Full" | "Full+" | vrij
    notes: str = ""

class ReverseRequest(BaseModel):
    category: PairingCategory
    preference: str = ""
    occasion: Optional[Occasion] = None

class QuizAnswer(BaseModel):
    question_id: str
    option_id: str

class QuizRequest(BaseModel):
    answers: List[QuizAnswer]

class QuizResult(BaseModel):
    level: CollectorLevel
    totals: Dict[str, int]
