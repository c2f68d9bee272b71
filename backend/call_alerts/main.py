import logging
from typing import Any, Dict

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .exceptions import DomainError
from .logging import configure_logging
from .parser import read_call_volumes
from .rules import evaluate_windows

settings = get_settings()
logger = configure_logging(settings)

app = FastAPI(title="Call Volume Alerts API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DomainError)
async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    logger.warning("Request failed (%s %s): %s", request.method, request.url.path, exc.detail)
    payload: Dict[str, Any] = {"detail": exc.detail, "error": exc.error_code}
    if exc.extra:
        payload["meta"] = exc.extra
    return JSONResponse(status_code=exc.status_code, content=payload)


@app.get("/health")
def health():
    return {"ok": True}


@app.post("/analyze")
async def analyze(
    file: UploadFile = File(...),
    window_length: int = settings.window_length,
    threshold: int = settings.threshold,
):
    raw = await file.read()
    samples = read_call_volumes(raw)

    windows = evaluate_windows(window_length, threshold, samples)
    alerts = sum(1 for w in windows if w["alert"])
    logger.info("Analyzed %d samples from %s: %d alerts", len(samples), file.filename, alerts)

    return {
        "window_length": window_length,
        "threshold": threshold,
        "count_samples": len(samples),
        "count_windows": len(windows),
        "count_alerts": alerts,
        "windows": windows,
    }
