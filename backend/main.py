from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .database import engine, Base
from . import models  # noqa: F401 — registers tables on Base.metadata
from .routers import quotes, exports, kits, compare, configurations

logger = logging.getLogger("standquote")

# Create tables (handles new tables but won't add columns to existing ones)
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Stand Kit Rental Quoting",
    description="Rental pricing for modular exhibition-stand kits (CTP / PAR)",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(kits.router, prefix="/api")
app.include_router(quotes.router, prefix="/api")
app.include_router(exports.router, prefix="/api")
app.include_router(compare.router, prefix="/api")
app.include_router(configurations.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "stand-kit-quoting"}


@app.on_event("startup")
def log_startup():
    logger.info("Stand kit quoting API started (%d routes)", len(app.routes))
