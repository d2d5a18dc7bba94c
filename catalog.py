# catalog.py
from __future__ import annotations
from typing import Dict, List, Optional, Tuple
from models import BeverageArchetype, ReversePairing

# ---- 1) Drank-archetypes (forward matching) ----
# Volgorde is de tie-break bij gelijke synergy_score.
BEVERAGE_ARCHETYPES: List[BeverageArchetype] = [
    BeverageArchetype(
        category="wine",
        title="Cabernet Sauvignon",
        subtitle="Bold & Tannic",
        description="Heavy tannins and dark fruit notes.",
        why_it_works="The structural tannins act as a palate cleanser for the heavy oils in bold cigars.",
        sommelier_tip="Let it breathe for 30 minutes to soften the oak before your first puff.",
        icon="Wine",
        profile_match={"body": 9, "wood": 7, "earth": 6},
        profile={"spice": 4, "sweet": 3, "earth": 7, "cream": 2, "wood": 7, "body": 9},
    ),
    BeverageArchetype(
        category="whiskey",
        title="Peated Islay Malt",
        subtitle="Smoky & Intense",
        description="Ocean sea-salt and dense peat smoke.",
        why_it_works='The medicinal smoke profile provides a "dense" atmospheric match for robust tobaccos.',
        sommelier_tip="Add three drops of spring water to unlock the hidden vanilla notes.",
        icon="GlassWater",
        profile_match={"body": 10, "wood": 8, "spice": 7},
        profile={"spice": 8, "sweet": 2, "earth": 6, "cream": 1, "wood": 9, "body": 10},
    ),
    BeverageArchetype(
        category="coffee",
        title="Sumatran Mandheling",
        subtitle="Earthy & Low Acid",
        description="Naturally earthy with a heavy, syrupy mouthfeel.",
        why_it_works="Matches the rich, soil-driven notes of Habano wrappers perfectly.",
        sommelier_tip="Use a French Press to keep the coffee oils intact for maximum richness.",
        icon="Coffee",
        profile_match={"earth": 9, "body": 7},
        profile={"spice": 3, "sweet": 3, "earth": 9, "cream": 3, "wood": 4, "body": 7},
    ),
    BeverageArchetype(
        category="rum",
        title="Aged Caribbean Dark Rum",
        subtitle="Caramel & Spice",
        description="Rich molasses sweetness with a long oak finish.",
        why_it_works="Provides a sweet bridge that softens the peppery spice of a full-bodied cigar.",
        sommelier_tip="Sip neat at 20°C to allow the oils to integrate with the smoke.",
        icon="GlassWater",
        profile_match={"sweet": 9, "wood": 6},
        profile={"spice": 5, "sweet": 9, "earth": 2, "cream": 3, "wood": 6, "body": 8},
    ),
    BeverageArchetype(
        category="chocolate",
        title="85% Single Origin Cacao",
        subtitle="Bitter & Pure",
        description="Dark, savory, and complex without excess sugar.",
        why_it_works="The pure bitterness highlights the hidden floral notes in aged cigars.",
        sommelier_tip="Melt a small square on your tongue before your first draw.",
        icon="Cookie",
        profile_match={"body": 8, "earth": 7},
        profile={"spice": 3, "sweet": 2, "earth": 8, "cream": 1, "wood": 4, "body": 9},
    ),
]

# ---- 2) Ideale sigaren (reverse matching) ----
REVERSE_VARIANTS: Dict[str, ReversePairing] = {
    "habano": ReversePairing(
        title="Medium-Bodied Habano",
        ideal_profile="A versatile cigar with notes of cedar, leather, and mild pepper.",
        why_it_works="This balanced profile complements most beverages without stealing the show.",
        sommelier_tip="Start with a Robusto size for a consistent 45-minute experience.",
        suggested_tags=["Medium", "Balanced", "Habano"],
        profile={"spice": 4, "sweet": 4, "earth": 5, "cream": 5, "wood": 6, "body": 6},
    ),
    "morning": ReversePairing(
        title="Clasico Dominican Lonsdale",
        ideal_profile="Creamy, buttery, and light with notes of cedar and toasted nuts.",
        why_it_works="Morning palates are fresh and sensitive. This mild start won't fatigue your taste buds.",
        sommelier_tip="Pairs beautifully with a light roast coffee or a breakfast tea.",
        suggested_tags=["Mild", "Morning", "Creamy"],
        profile={"spice": 2, "sweet": 4, "earth": 2, "cream": 8, "wood": 4, "body": 3},
    ),
    "celebration": ReversePairing(
        title="Aged Nicaraguan Figurado",
        ideal_profile="Rare, complex, and transitioning from sweet cocoa to bold black pepper.",
        why_it_works="Special moments demand a cigar that evolves. This shape offers a dynamic experience.",
        sommelier_tip='Reserve this for the "top shelf" spirits in your collection.',
        suggested_tags=["Premium", "Celebration", "Limited"],
        profile={"spice": 8, "sweet": 3, "earth": 6, "cream": 2, "wood": 7, "body": 9},
    ),
    "bold_red": ReversePairing(
        title="Full-Bodied Nicaraguan",
        ideal_profile="Powerful and spicy with earth and dark espresso notes.",
        why_it_works="The structural tannins in bold reds need a high-nicotine, oily cigar to find equilibrium.",
        sommelier_tip='Look for a "San Andres" or "Broadleaf" Maduro wrapper for a natural cocoa sweetness.',
        suggested_tags=["Nicaraguan", "Full", "Maduro"],
        profile={"spice": 7, "sweet": 3, "earth": 8, "cream": 1, "wood": 5, "body": 9},
    ),
    "light_white": ReversePairing(
        title="Mild Dominican Connecticut",
        ideal_profile="Creamy, buttery, and smooth with notes of cashews and vanilla.",
        why_it_works="Delicate white wines are easily overwhelmed. This mild profile lets the wine's acidity shine.",
        sommelier_tip="Draw slowly. If the cigar gets too hot, it will turn bitter and clash with the wine.",
        suggested_tags=["Mild", "Connecticut", "Creamy"],
        profile={"spice": 1, "sweet": 5, "earth": 2, "cream": 9, "wood": 3, "body": 2},
    ),
    "smoky_whiskey": ReversePairing(
        title="Robust Sun-Grown Corojo",
        ideal_profile="Red pepper spice, strong cedar, and a long, savory finish.",
        why_it_works='Peated spirits need a partner that can "shout back". The Corojo spice cuts through the peat smoke.',
        sommelier_tip="An aged Partagas or Rocky Patel Sun Grown is a classic Islay companion.",
        suggested_tags=["Bold", "Corojo", "Spicy"],
        profile={"spice": 9, "sweet": 2, "earth": 6, "cream": 1, "wood": 8, "body": 9},
    ),
    "sweet_bourbon": ReversePairing(
        title="Connecticut Broadleaf (Maduro)",
        ideal_profile="Rich chocolate, molasses, and a heavy, syrupy smoke profile.",
        why_it_works="Bourbon has natural corn sweetness and vanilla oak. This wrapper mirrors those sweet, dark notes.",
        sommelier_tip="Try a Padron 1926 or My Father Le Bijou for the ultimate Bourbon pairing.",
        suggested_tags=["Premium", "Maduro", "Sweet"],
        profile={"spice": 4, "sweet": 9, "earth": 5, "cream": 3, "wood": 4, "body": 8},
    ),
    "dark_roast": ReversePairing(
        title="Mexican San Andres Oscuro",
        ideal_profile="Deep cocoa, roasted grain, and a thick, velvety smoke.",
        why_it_works="Oscuro (black) wrappers are thick and oily, holding their own against concentrated espresso.",
        sommelier_tip='The "Petit Corona" is a perfect size for an intense morning ritual.',
        suggested_tags=["Very Bold", "Dark", "Mexican"],
        profile={"spice": 5, "sweet": 6, "earth": 9, "cream": 1, "wood": 4, "body": 10},
    ),
    "coffee_default": ReversePairing(
        title="Clasico Dominican Lonsdale",
        ideal_profile="Cedar, hay, and a very clean, nutty finish.",
        why_it_works="Dominican tobacco is the smoothest on earth, blending seamlessly with the dairy in coffee.",
        sommelier_tip="Look for a wrapper with a golden-yellow hue; this indicates a light, creamy smoke.",
        suggested_tags=["Dominican", "Mild", "Nutty"],
        profile={"spice": 1, "sweet": 4, "earth": 2, "cream": 10, "wood": 3, "body": 2},
    ),
    "dark_rum": ReversePairing(
        title="Costa Rican Maduro",
        ideal_profile="Rich, sweet, and heavy with notes of molasses and toasted oak.",
        why_it_works="Aged rums are effectively liquid molasses. A Costa Rican Maduro provides the required weight and sugar.",
        sommelier_tip="Try a Rocky Patel Fifty-Five for a decadent experience.",
        suggested_tags=["Full", "Maduro", "Sweet"],
        profile={"spice": 3, "sweet": 10, "earth": 4, "cream": 2, "wood": 6, "body": 9},
    ),
    "rum_default": ReversePairing(
        title="Honduran Corojo",
        ideal_profile='Medium-bodied with a classic "dirty" earthiness and spice.',
        why_it_works="Spiced rums need a cigar with its own spice rack. The Corojo seed is the perfect match.",
        sommelier_tip="The CLE Corojo is a fantastic choice for any spiced rum.",
        suggested_tags=["Medium", "Corojo", "Spicy"],
        profile={"spice": 6, "sweet": 4, "earth": 7, "cream": 1, "wood": 5, "body": 6},
    ),
    "chocolate": ReversePairing(
        title="Nicaraguan Broadleaf",
        ideal_profile="Dark chocolate, coffee bean, and a slightly salty finish.",
        why_it_works="Dark chocolate needs a cigar that can match its intensity without being bitter.",
        sommelier_tip="Eat a small piece of chocolate, then take a puff to see how the flavors meld.",
        suggested_tags=["Full", "Maduro", "Complex"],
        profile={"spice": 5, "sweet": 4, "earth": 6, "cream": 2, "wood": 3, "body": 9},
    ),
    "tea": ReversePairing(
        title="Mild Dominican Lonsdale",
        ideal_profile="Floral, herbal, and light with a clean cedar finish.",
        why_it_works="Tea is subtle. A heavy cigar would be like putting hot sauce on a salad. Balance is key.",
        sommelier_tip="Green tea pairs excellently with a very light Connecticut shade wrapper.",
        suggested_tags=["Mild", "Floral", "Dominican"],
        profile={"spice": 1, "sweet": 3, "earth": 2, "cream": 7, "wood": 5, "body": 2},
    ),
}

DEFAULT_VARIANT = "habano"

# ---- 3) Beslisregels ----
# Alleen morning/celebration hebben een eigen variant; relaxing/evening vallen door.
OCCASION_RULES: Dict[str, str] = {
    "morning": "morning",
    "celebration": "celebration",
}

# category: ([(keywords, variant), ...] in volgorde, fallback of None)
# Geen fallback = globale default. "spirits" staat er bewust niet in.
CATEGORY_RULES: Dict[str, Tuple[List[Tuple[Tuple[str, ...], str]], Optional[str]]] = {
    "wine": ([
        (("red", "bold", "cabernet"), "bold_red"),
        (("white", "light", "pinot"), "light_white"),
    ], None),
    "whiskey": ([
        (("peat", "smoke", "islay"), "smoky_whiskey"),
        (("bourbon", "sweet"), "sweet_bourbon"),
    ], None),
    "coffee": ([
        (("espresso", "dark"), "dark_roast"),
    ], "coffee_default"),
    "rum": ([
        (("dark", "aged"), "dark_rum"),
    ], "rum_default"),
    "chocolate": ([], "chocolate"),
    "tea": ([], "tea"),
}

# ---- 4) Menu voor de "start met een drankje"-flow ----
DRINK_MENU: List[dict] = [
    {"id": "whiskey", "label": "Whiskey", "prefs": ["Peated & Smoky", "Sweet Bourbon", "Smooth Speyside"]},
    {"id": "wine", "label": "Wine", "prefs": ["Bold Red", "Crisp White", "Sweet Port"]},
    {"id": "coffee", "label": "Coffee", "prefs": ["Black Espresso", "Creamy Latte", "Medium Roast"]},
    {"id": "rum", "label": "Rum", "prefs": ["Dark & Aged", "Spiced", "Rhum Agricole"]},
    {"id": "tea", "label": "Tea", "prefs": ["Black Tea", "Green Tea", "Herbal"]},
    {"id": "spirits", "label": "Spirits", "prefs": ["Gin/Tequila", "Brandy", "Cognac"]},
    {"id": "chocolate", "label": "Chocolate", "prefs": ["Extra Dark 85%", "Sea Salt", "Milk Chocolate"]},
]

OCCASIONS: List[dict] = [
    {"id": "Morning", "title": "Morning Ritual", "desc": "A fresh start. Looking for clarity and nuance."},
    {"id": "Relaxing", "title": "Afternoon/Relaxing", "desc": "Mid-day pause. Balanced and steady."},
    {"id": "Evening", "title": "Evening Reflection", "desc": "Unwinding after a long day. Deep and complex."},
    {"id": "Celebration", "title": "Special Celebration", "desc": "The best of the best. Time for the top shelf."},
]
