import logging
import random
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.models import Location
from ..models.game import LocationCreate
from .coordinates import validate_campus_coordinates
from .scoring import OutsideCampusError

logger = logging.getLogger(__name__)


async def register_location(
    db: AsyncSession,
    payload: LocationCreate,
    enforce_campus_bounds: bool = False
) -> Location:
    """
    Store metadata for a panorama that is already in object storage.

    Coordinates outside the campus are rejected with 400 when
    `enforce_campus_bounds` is set.
    """
    if enforce_campus_bounds:
        try:
            validate_campus_coordinates(payload.latitude, payload.longitude, "Location coordinates")
        except OutsideCampusError as e:
            logger.warning("Rejected location: %s", e)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            )

    location = Location(
        image_url=payload.image_url,
        latitude=payload.latitude,
        longitude=payload.longitude,
        created_by=payload.created_by
    )
    db.add(location)
    await db.commit()

    logger.info("Registered location %s at (%f, %f)", location.id, location.latitude, location.longitude)
    return location


async def random_location(db: AsyncSession, created_by: Optional[str] = None) -> Location:
    """Pick a random location from one creator's map (the shared map when None)."""
    query = select(Location)
    if created_by is None:
        query = query.where(Location.created_by.is_(None))
    else:
        query = query.where(Location.created_by == created_by)

    result = await db.execute(query)
    locations = result.scalars().all()

    if not locations:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No locations found"
        )

    return random.choice(locations)
