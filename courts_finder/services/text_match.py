"""Fuzzy text matching for free-text court search."""
import re
from difflib import SequenceMatcher
from typing import List

WORD = re.compile(r"[\w'-]+")

# Similarities at or below this are treated as unrelated
FUZZY_THRESHOLD = 0.6
FUZZY_WEIGHT = 0.6

# Alternative names for North Carolina places, keyed by canonical name
LOCATION_ALIASES = {
    "raleigh": ["raleigh", "ral", "wake county", "research triangle", "triangle", "rtp"],
    "durham": ["durham", "dur", "bull city", "research triangle", "triangle", "rtp"],
    "charlotte": ["charlotte", "char", "queen city", "clt", "mecklenburg"],
    "greensboro": ["greensboro", "gsbo", "gso", "triad", "gate city", "guilford"],
    "winston-salem": ["winston-salem", "winston salem", "ws", "triad", "twin city"],
    "asheville": ["asheville", "avl", "ashe", "mountain", "blue ridge", "western nc"],
    "hickory": ["hickory", "hky", "foothills", "catawba county"],
    "high point": ["high point", "highpoint", "hp", "furniture city", "triad"],
    "wilmington": ["wilmington", "wilm", "port city", "cape fear", "coastal"],
    "fayetteville": ["fayetteville", "faye", "fay", "cumberland county"],
    "gastonia": ["gastonia", "gas", "gaston county"],
    "concord": ["concord", "cabarrus county", "charlotte metro"],
    "cary": ["cary", "wake county", "triangle"],
    "apex": ["apex", "wake county", "triangle"],
    "chapel hill": ["chapel hill", "chape hill", "unc", "orange county", "triangle"],
    "nc": ["north carolina", "n.c.", "tar heel state"],
    "north carolina": ["nc", "n.c.", "tar heel state"],
}

NORTH_CAROLINA_INDICATORS = [
    "nc", "north carolina", "n.c.", "raleigh", "charlotte", "durham", "greensboro",
    "winston-salem", "asheville", "hickory", "high point", "wilmington", "fayetteville",
    "gastonia", "concord", "cary", "apex", "chapel hill", "triangle", "triad",
    "wake county", "mecklenburg", "guilford", "catawba", "gaston", "cabarrus",
]


def similarity(a: str, b: str) -> float:
    return SequenceMatcher(None, a, b).ratio()


def fuzzy_match_score(text: str, query: str) -> float:
    """
    Score how well ``query`` matches ``text``, case-insensitively.

    1.0 for an exact match, 0.9 for a whole word, 0.8 for a substring. Anything
    else scores its best character similarity (whole text or any single word)
    scaled by 0.6, or 0 when that similarity is at or below 0.6.
    """
    text = (text or "").lower().strip()
    query = (query or "").lower().strip()
    if not text or not query:
        return 0.0

    if text == query:
        return 1.0
    words = WORD.findall(text)
    if query in words:
        return 0.9
    if query in text:
        return 0.8

    best = max([similarity(text, query)] + [similarity(word, query) for word in words])
    return best * FUZZY_WEIGHT if best > FUZZY_THRESHOLD else 0.0


def location_variants(location: str) -> List[str]:
    """The location itself, known aliases for it, and its separate words."""
    lower = location.lower().strip()
    variants = [lower]

    for place, aliases in LOCATION_ALIASES.items():
        if any(alias in lower or lower in alias for alias in aliases):
            variants.extend(aliases)
            variants.append(place)

    if "-" in lower:
        variants.extend(lower.split("-"))
    if " " in lower:
        variants.extend(lower.split())

    return [v for i, v in enumerate(variants) if v and v not in variants[:i]]


def is_north_carolina_query(query: str) -> bool:
    lower = query.lower().strip()
    return any(
        indicator in lower or lower in indicator
        for indicator in NORTH_CAROLINA_INDICATORS
    )
