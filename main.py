import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from database import check_connection, init_db
from routers import agreements_router
from services.errors import (
     AgreementError,
     AgreementConflictError,
     AgreementNotFoundError,
     AgreementValidationError,
)

logging.basicConfig(
     level=config.LOG_LEVEL,
     format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
     init_db()
     yield


# App instance
app = FastAPI(title="Chioma Rent Agreements", lifespan=lifespan)

# CORS
app.add_middleware(
     CORSMiddleware,
     allow_origins=config.CORS_ORIGINS,
     allow_credentials=True,
     allow_methods=["*"],
     allow_headers=["*"],
)


ERROR_STATUS = {
     AgreementValidationError: 400,
     AgreementNotFoundError: 404,
     AgreementConflictError: 409,
}


@app.exception_handler(AgreementError)
async def agreement_error_handler(request: Request, exc: AgreementError):
     status_code = next(
          (code for kind, code in ERROR_STATUS.items() if isinstance(exc, kind)), 400
     )
     logger.info("%s %s -> %s: %s", request.method, request.url.path, status_code, exc.message)
     return JSONResponse(status_code=status_code, content={"detail": exc.message})


@app.get("/health")
def health():
     database_ok = check_connection()
     return JSONResponse(
          status_code=200 if database_ok else 503,
          content={"status": "ok" if database_ok else "degraded", "database": database_ok},
     )


app.include_router(agreements_router)


# 404 Fallback Middleware
@app.middleware("http")
async def not_found_middleware(request: Request, call_next):
     try:
          response = await call_next(request)
          if response.status_code == 404 and "endpoint" not in request.scope:
               return JSONResponse(status_code=404, content={"error": "Route not found"})
          return response
     except Exception:
          logger.exception("Unhandled error on %s %s", request.method, request.url.path)
          return JSONResponse(status_code=500, content={"error": "Internal server error"})


if __name__ == "__main__":
     port = int(os.getenv("PORT", 10000))
     uvicorn.run("main:app", host="0.0.0.0", port=port, reload=True)
