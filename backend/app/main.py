# backend/app/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.app.api import analytics, budgets, transactions
from backend.app.config import CORS_ORIGINS, LOG_LEVEL
from backend.app.db import init_db
from backend.app.models.category_model import CATEGORIES, classify_transactions
from backend.app.schemas import Descriptions

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Budget Insights API started")
    yield


app = FastAPI(title="Budget Insights", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # invalid or missing fields are client errors: 400 rather than FastAPI's 422
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.post("/categorize")
def categorize(payload: Descriptions):
    return {"categories": classify_transactions(payload.descriptions)}


@app.get("/categories")
def list_categories():
    return {"categories": list(CATEGORIES)}


@app.get("/")
def root():
    return {"message": "Budget Insights API is running!"}


app.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
app.include_router(budgets.router, prefix="/budgets", tags=["budgets"])
app.include_router(analytics.router, prefix="/analytics", tags=["analytics"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.app.main:app", host="127.0.0.1", port=8000, reload=True)
