"""
Player record - cumulative score and match count per wallet
"""
from typing import List, Optional
from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime
from nads_league.database import Base


class PlayerRecord(Base):
    """
    A tracked player on the leaderboard.
    Wallet addresses are stored lower-cased.
    """
    __tablename__ = "players"

    id: Mapped[int] = mapped_column(primary_key=True)
    wallet_address: Mapped[str] = mapped_column(String(42), unique=True, index=True)
    username: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # Totals (score = goals, transactions = matches)
    total_score: Mapped[int] = mapped_column(Integer, default=0)
    total_transactions: Mapped[int] = mapped_column(Integer, default=0)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    matches: Mapped[List["MatchRecord"]] = relationship(
        "MatchRecord", back_populates="player", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<PlayerRecord '{self.wallet_address}' {self.total_score}/{self.total_transactions}>"
