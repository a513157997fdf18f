# app/comment/schemas.py
from app.comment.models import TEXT_MAX_LENGTH
from app.core.schemas import ApiModel, UtcDatetime, bounded_text

CommentText = bounded_text(TEXT_MAX_LENGTH)


class CommentCreate(ApiModel):
    text: CommentText


class CommentOut(ApiModel):
    id: int
    ticket_id: int
    text: str
    created_at: UtcDatetime
