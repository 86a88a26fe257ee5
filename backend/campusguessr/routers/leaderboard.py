from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.session import get_db
from ..models.game import LeaderboardResponse, LeaderboardPeriod
from ..services.game import get_leaderboard as build_leaderboard

router = APIRouter(tags=["Leaderboard"])


@router.get("/leaderboard", response_model=LeaderboardResponse)
async def get_leaderboard(
    request: Request,
    filter: LeaderboardPeriod = "all-time",
    limit: int = Query(10, ge=1),
    db: AsyncSession = Depends(get_db)
):
    """Get the top scores leaderboard."""
    limit = min(limit, request.app.state.settings.LEADERBOARD_MAX_LIMIT)
    return await build_leaderboard(db, filter, limit)
