# app/ticket/schemas.py
from app.comment.schemas import CommentOut
from app.core.schemas import ApiModel, UtcDatetime, bounded_text, optional
from app.ticket.models import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, TicketStatus

TitleText = bounded_text(TITLE_MAX_LENGTH)
DescriptionText = bounded_text(DESCRIPTION_MAX_LENGTH)


class TicketCreate(ApiModel):
    title: TitleText
    description: DescriptionText


class TicketUpdate(ApiModel):
    """Both fields optional; null, empty or missing leaves the stored value alone."""

    description: optional(DescriptionText) = None
    status: optional(TicketStatus) = None


class TicketOut(ApiModel):
    id: int
    title: str
    description: str
    status: TicketStatus
    created_at: UtcDatetime
    updated_at: UtcDatetime
    comments: list[CommentOut] = []
