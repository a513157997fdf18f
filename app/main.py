# app/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.comment.routes import router as comment_router
from app.core.config import get_settings
from app.core.database import init_db
from app.core.errors import register_exception_handlers
from app.core.logging import setup_logging
from app.ticket.routes import router as ticket_router

settings = get_settings()
setup_logging(settings.LOG_LEVEL)

init_db()

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESC,
    version=settings.APP_VERSION,
)

register_exception_handlers(app)

origins = settings.cors_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    # Browsers reject credentials with a wildcard origin
    allow_credentials=origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)

# Routers
app.include_router(ticket_router, prefix=settings.API_PREFIX)
app.include_router(comment_router, prefix=settings.API_PREFIX)

@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}
