from sqlalchemy import String, Integer, Float, ForeignKey, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime
from nads_league.database import Base


class MatchRecord(Base):
    """A simulated match, stored with its full outcome payload"""
    __tablename__ = "match_records"

    id: Mapped[int] = mapped_column(primary_key=True)
    match_id: Mapped[str] = mapped_column(String(64), unique=True, index=True)

    player_id: Mapped[int] = mapped_column(ForeignKey("players.id"))
    player: Mapped["PlayerRecord"] = relationship("PlayerRecord", back_populates="matches")

    goals_scored: Mapped[int] = mapped_column(Integer)
    lam: Mapped[float] = mapped_column(Float)
    played_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # MatchOutcome.to_dict() as JSON
    outcome_json: Mapped[str] = mapped_column(Text)

    def __repr__(self):
        return f"<MatchRecord {self.match_id} goals={self.goals_scored}>"
