# app/comment/models.py
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from app.core.database import Base
from app.core.time import utc_now

TEXT_MAX_LENGTH = 500


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    # Only the key is kept; the ticket owns the relationship
    ticket_id = Column(
        Integer,
        ForeignKey("tickets.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    text = Column(String(TEXT_MAX_LENGTH), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, index=True, nullable=False)
