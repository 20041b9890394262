from sqlalchemy import (
    Column,
    String,
    DateTime,
    JSON,
    Integer,
    Float,
)
from sqlalchemy.dialects.postgresql import JSONB
from .db import Base


class Match(Base):
    __tablename__ = "match"
    id = Column(Integer, primary_key=True)
    date = Column(DateTime(timezone=True), nullable=False)
    home_team = Column(String, nullable=False)
    away_team = Column(String, nullable=False)
    home_score = Column(Integer, nullable=False, default=0)
    away_score = Column(Integer, nullable=False, default=0)


class Player(Base):
    __tablename__ = "player"
    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    team = Column(String, nullable=False)
    position = Column(String, nullable=True)
    goals = Column(Integer, nullable=False, default=0)
    assists = Column(Integer, nullable=False, default=0)
    form_rating = Column(Float, nullable=False, default=6.0)


class Event(Base):
    __tablename__ = "event"
    id = Column(Integer, primary_key=True, autoincrement=True)
    minute = Column(Integer, nullable=False)
    type = Column(String, nullable=False)  # "GOAL" | "ASSIST" | free text
    player_id = Column(Integer, nullable=True)
    meta = Column(JSON().with_variant(JSONB, "postgresql"), nullable=True)
