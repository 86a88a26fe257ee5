from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.session import get_db
from ..models.game import (
    StartGameResponse, GuessRequest, GuessResponse, GameSessionResponse,
    AssociateRequest, AssociateResponse
)
from ..services import game as game_service

router = APIRouter(prefix="/game", tags=["Game"])


@router.post("/start", response_model=StartGameResponse, status_code=status.HTTP_201_CREATED)
async def start_game(request: Request, db: AsyncSession = Depends(get_db)):
    """Start a new game session."""
    rounds = request.app.state.settings.ROUNDS_PER_GAME
    return await game_service.start_game(db, rounds)


@router.post("/submit-guess", response_model=GuessResponse)
async def submit_guess(
    guess: GuessRequest,
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    """Submit a guess for the current round."""
    rounds = request.app.state.settings.ROUNDS_PER_GAME
    locks = request.app.state.session_locks

    async with locks.hold(guess.game_id):
        return await game_service.submit_guess(db, guess, rounds)


@router.post("/associate", response_model=AssociateResponse)
async def associate_game(payload: AssociateRequest, db: AsyncSession = Depends(get_db)):
    """Save a completed game to the leaderboard under a player name."""
    await game_service.associate_game(db, payload.game_id, payload.player_name)
    return AssociateResponse(success=True, message="Game successfully saved to the leaderboard!")


@router.get("/{game_id}", response_model=GameSessionResponse)
async def get_game(game_id: str, request: Request, db: AsyncSession = Depends(get_db)):
    """Get a game session with all of its guesses."""
    rounds = request.app.state.settings.ROUNDS_PER_GAME
    return await game_service.get_game(db, game_id, rounds)
