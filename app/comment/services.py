# app/comment/services.py
from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.comment.models import Comment
from app.comment.schemas import CommentCreate
from app.core.database import commit
from app.core.errors import NotFound
from app.core.time import utc_now
from app.ticket.services import ensure_ticket_exists, ticket_not_found


def get_comments(db: Session, ticket_id: int) -> list[Comment]:
    ensure_ticket_exists(db, ticket_id)
    return (
        db.query(Comment)
        .filter(Comment.ticket_id == ticket_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
        .all()
    )


def get_comment(db: Session, ticket_id: int, comment_id: int) -> Comment:
    """Look a comment up by (ticket_id, comment_id); an id under another ticket is not found."""
    ensure_ticket_exists(db, ticket_id)
    comment = (
        db.query(Comment)
        .filter(Comment.id == comment_id, Comment.ticket_id == ticket_id)
        .first()
    )
    if comment is None:
        raise NotFound(f"Comment with id={comment_id} could not be found for ticket id={ticket_id}.")
    return comment


def create_comment(db: Session, ticket_id: int, payload: CommentCreate) -> Comment:
    ensure_ticket_exists(db, ticket_id)

    db_comment = Comment(ticket_id=ticket_id, text=payload.text, created_at=utc_now())
    db.add(db_comment)
    try:
        db.flush()
    except IntegrityError as exc:
        # Parent deleted between the existence check and the insert
        db.rollback()
        logger.warning(
            "Ticket id={ticket_id} vanished before comment insert: {error}",
            ticket_id=ticket_id,
            error=exc.orig,
        )
        raise ticket_not_found(ticket_id) from exc
    commit(db, "create comment", ticket_id=ticket_id)
    db.refresh(db_comment)
    logger.info(
        "Created comment id={comment_id} on ticket id={ticket_id}",
        comment_id=db_comment.id,
        ticket_id=ticket_id,
    )
    return db_comment


def delete_comment(db: Session, ticket_id: int, comment_id: int) -> None:
    db_comment = get_comment(db, ticket_id, comment_id)
    db.delete(db_comment)
    commit(db, "delete comment", ticket_id=ticket_id, comment_id=comment_id)
    logger.info(
        "Deleted comment id={comment_id} on ticket id={ticket_id}",
        comment_id=comment_id,
        ticket_id=ticket_id,
    )
