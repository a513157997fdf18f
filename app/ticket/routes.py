# app/ticket/routes.py
from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.ticket.schemas import TicketCreate, TicketOut, TicketUpdate
from app.ticket import services as ticket_service
router = APIRouter(prefix="/tickets", tags=["Tickets"])


@router.post("", response_model=TicketOut, status_code=status.HTTP_201_CREATED)
def create(ticket: TicketCreate, request: Request, response: Response, db: Session = Depends(get_db)):
    created = ticket_service.create_ticket(db, ticket)
    response.headers["Location"] = str(request.url_for("get_ticket", ticket_id=created.id))
    return created


@router.get("", response_model=list[TicketOut])
def list_all(
    status: str | None = Query(
        default=None, description="Filter by status: Open, In Progress or Closed"
    ),
    db: Session = Depends(get_db),
):
    return ticket_service.get_all_tickets(db, status)


@router.get("/{ticket_id}", response_model=TicketOut, name="get_ticket")
def get(ticket_id: int, db: Session = Depends(get_db)):
    return ticket_service.get_ticket(db, ticket_id)


@router.patch("/{ticket_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update(ticket_id: int, ticket: TicketUpdate, db: Session = Depends(get_db)):
    ticket_service.update_ticket(db, ticket_id, ticket)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{ticket_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete(ticket_id: int, db: Session = Depends(get_db)):
    ticket_service.delete_ticket(db, ticket_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
