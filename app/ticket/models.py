# app/ticket/models.py
from enum import Enum

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from app.core.database import Base
from app.core.time import utc_now

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000


class TicketStatus(str, Enum):
    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    CLOSED = "Closed"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(TITLE_MAX_LENGTH), index=True, nullable=False)
    description = Column(String(DESCRIPTION_MAX_LENGTH), nullable=False)
    status = Column(String(20), default=TicketStatus.OPEN.value, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, index=True, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    comments = relationship(
        "Comment",
        order_by="[Comment.created_at, Comment.id]",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
