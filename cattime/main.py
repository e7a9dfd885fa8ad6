# cattime/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cattime.api.v1.api import api_router
# The auth endpoint file is mounted on its own /auth prefix
from cattime.api.v1.endpoints import auth
from cattime.core.config import settings
from cattime.core.errors import WorkingTimeError
from cattime.db.init_db import init_db
from cattime.db.session import SessionLocal, engine

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    db = SessionLocal()
    try:
        init_db(engine, db)
    finally:
        db.close()
    yield

app = FastAPI(title="CatTime API", lifespan=lifespan)

@app.exception_handler(WorkingTimeError)
async def working_time_error_handler(request: Request, exc: WorkingTimeError):
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=400, content={"detail": exc.message})

app.include_router(api_router)
app.include_router(auth.router, prefix="/auth")

@app.get("/")
def read_root():
    return {"message": "Welcome to the CatTime API"}
