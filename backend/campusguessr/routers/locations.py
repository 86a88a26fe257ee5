from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.models import Location
from ..database.session import get_db
from ..models.game import LocationCreate, LocationResponse, RandomLocationResponse
from ..services.locations import register_location, random_location

router = APIRouter(tags=["Locations"])


def _to_response(location: Location) -> LocationResponse:
    return LocationResponse(
        id=location.id,
        image_url=location.image_url,
        latitude=location.latitude,
        longitude=location.longitude,
        created_by=location.created_by,
        created_at=location.created_at
    )


@router.post("/locations", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
async def create_location(
    payload: LocationCreate,
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    """Register an uploaded panorama and where it was taken."""
    enforce = request.app.state.settings.ENFORCE_CAMPUS_BOUNDS
    location = await register_location(db, payload, enforce_campus_bounds=enforce)
    return _to_response(location)


@router.get("/location/random", response_model=RandomLocationResponse)
async def get_random_location(
    created_by: Optional[str] = None,
    db: AsyncSession = Depends(get_db)
):
    """Get a random location, optionally from a specific creator's map."""
    location = await random_location(db, created_by)
    return RandomLocationResponse(data=_to_response(location))
