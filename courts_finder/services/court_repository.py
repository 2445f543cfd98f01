"""Read-only access to court records."""
from typing import Iterable, Optional, Sequence

from courts_finder.models import COURTS
from courts_finder.schemas.court import Court


class CourtRepository:
    """In-memory court store. Records are never created or modified."""

    def __init__(self, courts: Iterable[Court]):
        self._courts = tuple(courts)

    def list_all(self) -> Sequence[Court]:
        return self._courts

    def get(self, court_id: int) -> Optional[Court]:
        for court in self._courts:
            if court.id == court_id:
                return court
        return None


# Singleton instance
court_repository = CourtRepository(COURTS)


def get_court_repository() -> CourtRepository:
    return court_repository
