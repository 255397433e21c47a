import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import settings, setup_logging
from .errors import AnalyzeRequestError
from .routers.analyze import router as analyze_router
from .schemas.analysis import ErrorResponse

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Goal Update Analyzer", version="0.1.0")


@app.exception_handler(AnalyzeRequestError)
async def analyze_request_error_handler(request: Request, exc: AnalyzeRequestError) -> JSONResponse:
    body = ErrorResponse(error=exc.error, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Malformed request body on %s", request.url.path)
    body = ErrorResponse(error="Invalid input", message="Request body must be a JSON object")
    return JSONResponse(status_code=400, content=body.model_dump())


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(analyze_router)


if __name__ == "__main__":
    import uvicorn

    logger.info("Goal Update Analyzer running at http://%s:%d", settings.host, settings.port)
    logger.info("Press Ctrl+C to stop the server")
    uvicorn.run(app, host=settings.host, port=settings.port)
