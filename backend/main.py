import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from problem_helper.analyzer import analyze_problem
from problem_helper.config import load_settings
from problem_helper.errors import ProblemHelperError
from problem_helper.models import AnalyzeRequest, utc_timestamp

settings = load_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("problem_helper")
logger.info("API keys loaded, Gemini model %s", settings.gemini_model)

AVAILABLE_ROUTES = ["GET /", "POST /analyze", "GET /health"]

app = FastAPI(title="LeetCode Helper Backend", version="1.0.0")
app.state.settings = settings

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.allowed_origins),
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown paths and unsupported methods on known paths both count as unmatched routes.
    if exc.status_code in (404, 405):
        requested = request.url.path
        if request.url.query:
            requested = f"{requested}?{request.url.query}"
        return JSONResponse(
            status_code=404,
            content={
                "error": "Route not found",
                "availableRoutes": AVAILABLE_ROUTES,
                "requestedRoute": requested,
            },
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Invalid request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request body",
            "details": [
                {"field": ".".join(str(loc) for loc in err["loc"]), "message": err["msg"]}
                for err in exc.errors()
            ],
        },
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "timestamp": utc_timestamp()},
    )


@app.get("/")
def index() -> dict:
    return {
        "status": "success",
        "message": "LeetCode Helper Backend is running",
        "endpoints": {
            "analyze": "POST /analyze",
            "health": "GET /health",
        },
        "timestamp": utc_timestamp(),
    }


@app.get("/health")
def healthcheck() -> dict:
    return {"status": "healthy", "timestamp": utc_timestamp()}


@app.post("/analyze")
def analyze(request: Request, payload: Optional[AnalyzeRequest] = None) -> JSONResponse:
    slug = payload.slug if payload else None
    if not slug:
        return JSONResponse(status_code=400, content={"error": "Missing slug parameter"})

    try:
        result = analyze_problem(slug, request.app.state.settings)
    except ProblemHelperError as exc:
        logger.error("Error in /analyze for %s: %s", slug, exc)
        return JSONResponse(
            status_code=500,
            content={"error": str(exc), "slug": slug, "timestamp": utc_timestamp()},
        )
    return JSONResponse(content=result.model_dump(by_alias=True))


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
