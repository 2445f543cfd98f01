"""Sport endpoints."""
from typing import List

from fastapi import APIRouter

from courts_finder.schemas.sport import Sport
from courts_finder.services.sports import list_sports

router = APIRouter(prefix="/sports", tags=["sports"])


@router.get("", response_model=List[Sport])
async def get_sports():
    """List the sports the app knows about."""
    return list_sports()
