from __future__ import annotations  # FastAPI server exposing interview and practice routes

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.interview import router as interview_router
from api.practice import router as practice_router
from config.settings import settings
from storage.migrate import migrate


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:  # Ensure the schema exists before serving
    migrate(settings.DB_PATH)
    logger.info("Database ready at %s", settings.DB_PATH)
    yield


app = FastAPI(title="AI Interview Coach API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)
app.include_router(interview_router)
app.include_router(practice_router)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:  # Report missing fields as 400
    fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
    detail = "Please provide " + ", ".join(fields) if fields else "Invalid request"
    return JSONResponse(status_code=400, content={"detail": detail})


@app.get("/")
def root() -> Dict[str, str]:  # Liveness banner
    return {"message": "AI Interview Game API is running!"}


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(name)s :: %(message)s")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
