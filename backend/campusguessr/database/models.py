import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, Boolean, Text, JSON
from sqlalchemy.orm import relationship
from .session import Base


def _uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Location(Base):
    """A panorama whose image lives in object storage."""
    __tablename__ = "locations"

    id = Column(String(36), primary_key=True, default=_uuid)
    image_url = Column(Text, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    created_by = Column(String(100), nullable=True, index=True)
    created_at = Column(DateTime, default=utcnow)


class GameSession(Base):
    """Game session model tracking a complete game."""
    __tablename__ = "game_sessions"

    id = Column(String(36), primary_key=True, default=_uuid)
    current_round = Column(Integer, default=1, nullable=False)
    total_score = Column(Integer, default=0, nullable=False)
    location_ids = Column(JSON, nullable=False)
    is_completed = Column(Boolean, default=False, nullable=False)
    player_name = Column(String(50), nullable=True, index=True)
    created_at = Column(DateTime, default=utcnow, index=True)
    completed_at = Column(DateTime, nullable=True)

    # Relationships
    guesses = relationship(
        "GameRound",
        back_populates="game_session",
        cascade="all, delete-orphan",
        order_by="GameRound.round_number",
        lazy="selectin"
    )


class GameRound(Base):
    """A single submitted guess. Written once, never updated."""
    __tablename__ = "game_rounds"

    id = Column(Integer, primary_key=True, index=True)
    game_session_id = Column(String(36), ForeignKey("game_sessions.id"), nullable=False)
    round_number = Column(Integer, nullable=False)
    location_id = Column(String(36), ForeignKey("locations.id"), nullable=False)

    # Guess information
    guess_latitude = Column(Float, nullable=False)
    guess_longitude = Column(Float, nullable=False)
    actual_latitude = Column(Float, nullable=False)
    actual_longitude = Column(Float, nullable=False)
    distance = Column(Integer, nullable=False)
    score = Column(Integer, nullable=False)

    created_at = Column(DateTime, default=utcnow)

    # Relationships
    game_session = relationship("GameSession", back_populates="guesses")
