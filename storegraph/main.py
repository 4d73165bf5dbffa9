# storegraph/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import graphql
from .settings import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("storegraph")

app = FastAPI(title="Store GraphQL Checkout")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(graphql.router)


@app.get("/")
def root():
    return {"message": "storegraph is running"}


@app.on_event("startup")
def _startup_log():
    logger.info("serving account=%s workspace=%s", settings.account, settings.workspace)
