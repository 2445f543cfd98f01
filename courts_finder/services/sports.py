"""Catalog of supported sports."""
from typing import List

from courts_finder.schemas.sport import Sport

SPORTS: List[Sport] = [
    Sport(
        id="tennis",
        name="Tennis",
        description="Professional tennis courts with various surfaces",
        icon="🎾",
        popularity_score=8.5,
    ),
    Sport(
        id="basketball",
        name="Basketball",
        description="Indoor and outdoor basketball courts",
        icon="🏀",
        popularity_score=9.2,
    ),
    Sport(
        id="volleyball",
        name="Volleyball",
        description="Beach and indoor volleyball courts",
        icon="🏐",
        popularity_score=7.8,
    ),
    Sport(
        id="badminton",
        name="Badminton",
        description="Professional badminton courts",
        icon="🏸",
        popularity_score=6.5,
    ),
    Sport(
        id="squash",
        name="Squash",
        description="Indoor squash courts",
        icon="🎯",
        popularity_score=5.9,
    ),
    Sport(
        id="pickleball",
        name="Pickleball",
        description="Growing sport with dedicated courts",
        icon="🏓",
        popularity_score=7.2,
    ),
]


def list_sports() -> List[Sport]:
    return list(SPORTS)
