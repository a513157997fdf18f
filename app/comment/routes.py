# app/comment/routes.py
from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.comment.schemas import CommentCreate, CommentOut
from app.comment import services as comment_service
router = APIRouter(prefix="/tickets/{ticket_id}/comments", tags=["Comments"])


@router.get("", response_model=list[CommentOut])
def list_all(ticket_id: int, db: Session = Depends(get_db)):
    return comment_service.get_comments(db, ticket_id)


@router.post("", response_model=CommentOut, status_code=status.HTTP_201_CREATED)
def create(
    ticket_id: int,
    comment: CommentCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    created = comment_service.create_comment(db, ticket_id, comment)
    response.headers["Location"] = str(
        request.url_for("get_comment", ticket_id=ticket_id, comment_id=created.id)
    )
    return created


@router.get("/{comment_id}", response_model=CommentOut, name="get_comment")
def get(ticket_id: int, comment_id: int, db: Session = Depends(get_db)):
    return comment_service.get_comment(db, ticket_id, comment_id)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete(ticket_id: int, comment_id: int, db: Session = Depends(get_db)):
    comment_service.delete_comment(db, ticket_id, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
