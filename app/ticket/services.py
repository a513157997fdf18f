# app/ticket/services.py
from datetime import timedelta

from loguru import logger
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.orm.exc import StaleDataError

from app.core.database import commit
from app.core.errors import InvalidArgument, NotFound
from app.core.time import as_utc, utc_now
from app.ticket.models import Ticket, TicketStatus
from app.ticket.schemas import TicketCreate, TicketUpdate

INVALID_STATUS_MESSAGE = "Invalid status value. Must be 'Open', 'In Progress' or 'Closed'."
NOTHING_TO_UPDATE_MESSAGE = "No new or valid fields to update."


def ticket_not_found(ticket_id: int) -> NotFound:
    return NotFound(f"Ticket with id={ticket_id} could not be found.")


def ensure_ticket_exists(db: Session, ticket_id: int) -> None:
    exists = db.query(Ticket.id).filter(Ticket.id == ticket_id).first() is not None
    if not exists:
        raise ticket_not_found(ticket_id)


def get_all_tickets(db: Session, status: str | None = None) -> list[Ticket]:
    """Newest first, each ticket with its comments oldest first.

    An empty ``status`` means no filter; anything else must be a known status.
    """
    if status and status not in TicketStatus.values():
        raise InvalidArgument(INVALID_STATUS_MESSAGE)

    query = db.query(Ticket).options(selectinload(Ticket.comments))
    if status:
        query = query.filter(Ticket.status == status)
    return query.order_by(Ticket.created_at.desc(), Ticket.id.desc()).all()


def get_ticket(db: Session, ticket_id: int) -> Ticket:
    ticket = (
        db.query(Ticket)
        .options(selectinload(Ticket.comments))
        .filter(Ticket.id == ticket_id)
        .first()
    )
    if ticket is None:
        raise ticket_not_found(ticket_id)
    return ticket


def create_ticket(db: Session, payload: TicketCreate) -> Ticket:
    now = utc_now()
    db_ticket = Ticket(
        title=payload.title,
        description=payload.description,
        status=TicketStatus.OPEN.value,
        created_at=now,
        updated_at=now,
    )
    db.add(db_ticket)
    commit(db, "create ticket")
    db.refresh(db_ticket)
    logger.info("Created ticket id={ticket_id}", ticket_id=db_ticket.id)
    return db_ticket


def update_ticket(db: Session, ticket_id: int, payload: TicketUpdate) -> Ticket:
    db_ticket = db.get(Ticket, ticket_id)
    if db_ticket is None:
        raise ticket_not_found(ticket_id)

    changes = {}
    if payload.description is not None and payload.description != db_ticket.description:
        changes["description"] = payload.description
    if payload.status is not None and payload.status.value != db_ticket.status:
        changes["status"] = payload.status.value
    if not changes:
        raise InvalidArgument(NOTHING_TO_UPDATE_MESSAGE)

    for field, value in changes.items():
        setattr(db_ticket, field, value)

    # updated_at must move forward even if the clock has not ticked
    previous = as_utc(db_ticket.updated_at)
    now = utc_now()
    db_ticket.updated_at = now if now > previous else previous + timedelta(microseconds=1)

    try:
        db.flush()
    except StaleDataError as exc:
        # Row deleted by another request after it was loaded
        db.rollback()
        logger.warning("Ticket id={ticket_id} vanished before update", ticket_id=ticket_id)
        raise ticket_not_found(ticket_id) from exc
    commit(db, "update ticket", ticket_id=ticket_id)
    db.refresh(db_ticket)
    logger.info(
        "Updated ticket id={ticket_id} fields={fields}", ticket_id=ticket_id, fields=sorted(changes)
    )
    return db_ticket


def delete_ticket(db: Session, ticket_id: int) -> None:
    db_ticket = db.get(Ticket, ticket_id)
    if db_ticket is None:
        raise ticket_not_found(ticket_id)
    db.delete(db_ticket)
    commit(db, "delete ticket", ticket_id=ticket_id)
    logger.info("Deleted ticket id={ticket_id} and its comments", ticket_id=ticket_id)
