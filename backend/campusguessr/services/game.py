import asyncio
import logging
import random
from contextlib import asynccontextmanager
from datetime import datetime, timedelta
from typing import AsyncIterator, Dict, List, Optional

from fastapi import HTTPException, status
from sqlalchemy import select, desc, asc
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.models import GameSession, GameRound, Location, utcnow
from ..models.game import (
    StartGameResponse, GuessRequest, GuessResponse, LocationPoint,
    GameSessionResponse, RoundResponse, LeaderboardEntry, LeaderboardResponse,
    LeaderboardPeriod
)
from .formatting import (
    distance_quality, format_coordinates, format_distance, format_game_duration,
    format_round, format_score, score_quality
)
from .scoring import Coordinate, evaluate_guess, max_possible_score

logger = logging.getLogger(__name__)


class SessionLocks:
    """Per-game asyncio locks serializing read-modify-write of a session.

    An entry lives only while some request holds or waits for it.
    """

    def __init__(self):
        self._locks: Dict[str, asyncio.Lock] = {}
        self._users: Dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, game_id: str) -> AsyncIterator[None]:
        lock = self._locks.get(game_id)
        if lock is None:
            lock = self._locks[game_id] = asyncio.Lock()
        self._users[game_id] = self._users.get(game_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[game_id] -= 1
            if self._users[game_id] == 0:
                del self._users[game_id]
                del self._locks[game_id]

    def __len__(self) -> int:
        return len(self._locks)


async def _get_session_or_404(db: AsyncSession, game_id: str) -> GameSession:
    game = await db.get(GameSession, game_id)
    if not game:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Game session not found"
        )
    return game


async def start_game(db: AsyncSession, rounds: int) -> StartGameResponse:
    """Create a session over `rounds` distinct random locations."""
    result = await db.execute(select(Location.id))
    location_ids = list(result.scalars().all())

    if len(location_ids) < rounds:
        logger.warning("Cannot start game: %d locations available, %d needed", len(location_ids), rounds)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Not enough locations in database. Need at least {rounds} images."
        )

    selected = random.sample(location_ids, rounds)

    game = GameSession(
        current_round=1,
        total_score=0,
        location_ids=selected,
        is_completed=False
    )
    db.add(game)
    await db.commit()

    logger.info("Started game %s", game.id)
    return StartGameResponse(game_id=game.id, location_ids=selected, current_round=1)


async def submit_guess(db: AsyncSession, guess: GuessRequest, rounds: int) -> GuessResponse:
    """Score a guess for the current round and record it on the session."""
    game = await _get_session_or_404(db, guess.game_id)

    if game.is_completed or len(game.guesses) >= rounds:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Game is already complete."
        )

    round_number = game.current_round
    location_id = game.location_ids[round_number - 1]
    location = await db.get(Location, location_id)
    if not location:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Location not found"
        )

    evaluation = evaluate_guess(
        Coordinate(guess.guess_latitude, guess.guess_longitude),
        Coordinate(location.latitude, location.longitude)
    )

    game.guesses.append(GameRound(
        round_number=round_number,
        location_id=location_id,
        guess_latitude=guess.guess_latitude,
        guess_longitude=guess.guess_longitude,
        actual_latitude=location.latitude,
        actual_longitude=location.longitude,
        distance=evaluation.distance,
        score=evaluation.score
    ))
    game.total_score += evaluation.score

    game_complete = round_number >= rounds
    if game_complete:
        game.is_completed = True
        game.completed_at = utcnow()
    else:
        game.current_round = round_number + 1

    await db.commit()

    logger.info(
        "Game %s round %d: %dm, %d points (total %d)",
        game.id, round_number, evaluation.distance, evaluation.score, game.total_score
    )
    return GuessResponse(
        distance=evaluation.distance,
        score=evaluation.score,
        total_score=game.total_score,
        game_complete=game_complete,
        actual_location=LocationPoint(latitude=location.latitude, longitude=location.longitude)
    )


def _round_response(row: GameRound) -> RoundResponse:
    return RoundResponse(
        round_number=row.round_number,
        location_id=row.location_id,
        guess_latitude=row.guess_latitude,
        guess_longitude=row.guess_longitude,
        actual_latitude=row.actual_latitude,
        actual_longitude=row.actual_longitude,
        guess_label=format_coordinates(row.guess_latitude, row.guess_longitude),
        distance=row.distance,
        distance_label=format_distance(row.distance),
        quality=distance_quality(row.distance),
        score=row.score,
        created_at=row.created_at
    )


async def get_game(db: AsyncSession, game_id: str, rounds: int) -> GameSessionResponse:
    game = await _get_session_or_404(db, game_id)
    total_rounds = len(game.location_ids) or rounds
    max_score = max_possible_score(total_rounds)
    duration_label = None
    if game.completed_at is not None:
        elapsed = int((game.completed_at - game.created_at).total_seconds())
        duration_label = format_game_duration(max(0, elapsed))

    return GameSessionResponse(
        id=game.id,
        current_round=game.current_round,
        round_label=format_round(game.current_round, total_rounds),
        total_score=game.total_score,
        score_label=format_score(game.total_score),
        max_score=max_score,
        percentage=round(game.total_score / max_score * 100, 1),
        quality=score_quality(game.total_score, max_score),
        is_completed=game.is_completed,
        player_name=game.player_name,
        location_ids=game.location_ids,
        guesses=[_round_response(row) for row in game.guesses],
        created_at=game.created_at,
        completed_at=game.completed_at,
        duration_label=duration_label
    )


async def associate_game(db: AsyncSession, game_id: str, player_name: str) -> None:
    """Attach a player name to a completed game so it appears on the leaderboard."""
    game = await _get_session_or_404(db, game_id)

    if game.player_name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="This game is already associated with a player"
        )

    if not game.is_completed:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Game must be completed (all rounds) to be saved"
        )

    game.player_name = player_name
    await db.commit()
    logger.info("Game %s associated with %r", game_id, player_name)


def _period_start(period: LeaderboardPeriod, now: Optional[datetime] = None) -> Optional[datetime]:
    now = now or utcnow()
    if period == "today":
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    elif period == "week":
        return now - timedelta(days=7)
    return None


async def get_leaderboard(db: AsyncSession, period: LeaderboardPeriod, limit: int) -> LeaderboardResponse:
    """Top completed, named games. Ties go to the earlier game."""
    query = select(GameSession).where(
        GameSession.is_completed == True,  # noqa: E712
        GameSession.player_name.is_not(None)
    ).order_by(desc(GameSession.total_score), asc(GameSession.created_at)).limit(limit)

    since = _period_start(period)
    if since is not None:
        query = query.where(GameSession.created_at >= since)

    result = await db.execute(query)
    games: List[GameSession] = list(result.scalars().all())

    entries = [
        LeaderboardEntry(
            rank=index,
            game_id=game.id,
            username=game.player_name,
            score=game.total_score,
            created_at=game.created_at
        )
        for index, game in enumerate(games, 1)
    ]
    return LeaderboardResponse(leaderboard=entries, filter=period)
