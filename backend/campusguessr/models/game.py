from pydantic import BaseModel, Field
from typing import Optional, List, Literal
from datetime import datetime


class CamelModel(BaseModel):
    """Schema whose JSON keys are camelCase aliases of the field names."""

    class Config:
        populate_by_name = True
        from_attributes = True


class StartGameResponse(CamelModel):
    """Response after starting a game."""
    game_id: str = Field(alias="gameId")
    location_ids: List[str] = Field(alias="locationIds")
    current_round: int = Field(alias="currentRound")


class GuessRequest(CamelModel):
    """Request for submitting a guess."""
    game_id: str = Field(..., alias="gameId", min_length=1)
    guess_latitude: float = Field(
        ..., alias="guessLatitude", ge=-90, le=90, allow_inf_nan=False
    )
    guess_longitude: float = Field(
        ..., alias="guessLongitude", ge=-180, le=180, allow_inf_nan=False
    )


class LocationPoint(BaseModel):
    latitude: float
    longitude: float


class GuessResponse(CamelModel):
    """Response after submitting a guess."""
    distance: int
    score: int
    total_score: int = Field(alias="totalScore")
    game_complete: bool = Field(alias="gameComplete")
    actual_location: LocationPoint = Field(alias="actualLocation")


class RoundResponse(CamelModel):
    """A recorded guess."""
    round_number: int = Field(alias="round")
    location_id: str = Field(alias="locationId")
    guess_latitude: float = Field(alias="guessLatitude")
    guess_longitude: float = Field(alias="guessLongitude")
    actual_latitude: float = Field(alias="actualLatitude")
    actual_longitude: float = Field(alias="actualLongitude")
    guess_label: str = Field(alias="guessLabel")
    distance: int
    distance_label: str = Field(alias="distanceLabel")
    quality: str
    score: int
    created_at: datetime = Field(alias="timestamp")


class GameSessionResponse(CamelModel):
    """Response with game session details and its guesses."""
    id: str
    current_round: int = Field(alias="currentRound")
    round_label: str = Field(alias="roundLabel")
    total_score: int = Field(alias="totalScore")
    score_label: str = Field(alias="scoreLabel")
    max_score: int = Field(alias="maxScore")
    percentage: float
    quality: str
    is_completed: bool = Field(alias="gameComplete")
    player_name: Optional[str] = Field(default=None, alias="playerName")
    location_ids: List[str] = Field(alias="locationIds")
    guesses: List[RoundResponse]
    created_at: datetime = Field(alias="createdAt")
    completed_at: Optional[datetime] = Field(default=None, alias="completedAt")
    duration_label: Optional[str] = Field(default=None, alias="durationLabel")


class AssociateRequest(CamelModel):
    """Request to put a completed game on the leaderboard under a name."""
    game_id: str = Field(..., alias="gameId", min_length=1)
    player_name: str = Field(..., alias="playerName", min_length=1, max_length=50)


class AssociateResponse(BaseModel):
    success: bool
    message: str


LeaderboardPeriod = Literal["all-time", "today", "week"]


class LeaderboardEntry(CamelModel):
    """Leaderboard entry."""
    rank: int
    game_id: str = Field(alias="gameId")
    username: str
    score: int
    created_at: datetime = Field(alias="createdAt")


class LeaderboardResponse(BaseModel):
    """Response with leaderboard."""
    leaderboard: List[LeaderboardEntry]
    filter: LeaderboardPeriod


class LocationCreate(CamelModel):
    """Metadata for an image already uploaded to object storage."""
    image_url: str = Field(..., alias="imageUrl", min_length=1)
    latitude: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(..., ge=-180, le=180, allow_inf_nan=False)
    created_by: Optional[str] = Field(default=None, alias="createdBy", max_length=100)


class LocationResponse(CamelModel):
    id: str
    image_url: str = Field(alias="imageUrl")
    latitude: float
    longitude: float
    created_by: Optional[str] = Field(default=None, alias="createdBy")
    created_at: datetime = Field(alias="createdAt")


class RandomLocationResponse(BaseModel):
    data: LocationResponse
