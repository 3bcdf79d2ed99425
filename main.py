import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio_reports.core.config import CORS_ORIGINS, LOG_FORMAT, LOG_LEVEL
from portfolio_reports.core.logging import setup_logging
from portfolio_reports.routers import reports_router

setup_logging(LOG_LEVEL, LOG_FORMAT)
logger = logging.getLogger("portfolio_reports")

app = FastAPI(title="Loan Portfolio Reports API", version="1.0")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Routers
app.include_router(reports_router.router)


@app.on_event("startup")
def on_startup():
    # read-only service: no schema creation, no seeding
    logger.info("Loan portfolio reports API started")


@app.get("/")
def root():
    return {"message": "Loan portfolio reports backend is running!!"}
