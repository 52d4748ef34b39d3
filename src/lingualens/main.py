"""
FastAPI application for LinguaLens image text translation.

Endpoints:
    GET  /health   - Health check
    GET  /metrics  - Pipeline stage timings and fragment failure counters
    POST /analyze  - Upload an image, get English fragments translated to Korean

Upload validation (size and content type) happens here; the pipeline
receives already-validated bytes.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, File, HTTPException, UploadFile

from lingualens.config import MAX_FILE_SIZE, SOURCE_LANG, TARGET_LANG, get_api_key
from lingualens.errors import DetectionError
from lingualens.pipeline import get_metrics, run


def check_config():
    """Report configuration problems at startup without refusing to boot."""
    print(f"Translating {SOURCE_LANG} text fragments to {TARGET_LANG}")
    if not get_api_key():
        print("Warning: GOOGLE_API_KEY is not set, every analysis will fail")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    check_config()
    yield


app = FastAPI(
    title="LinguaLens",
    description="Image text detection and translation",
    lifespan=lifespan,
)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/metrics")
async def metrics():
    return get_metrics()


@app.post("/analyze")
async def analyze(file: UploadFile = File(...)):
    content_type = file.content_type or ""
    if not content_type.startswith("image/"):
        raise HTTPException(status_code=415, detail="Only image uploads are supported.")

    # One byte past the limit is enough to spot an oversized upload
    image = await file.read(MAX_FILE_SIZE + 1)
    if not image:
        raise HTTPException(status_code=400, detail="Please select an image.")
    if len(image) > MAX_FILE_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum upload size is {MAX_FILE_SIZE // (1024 * 1024)}MB.",
        )

    try:
        records = await run(image)
    except DetectionError as e:
        print(f"Image analysis error: {e}")
        raise HTTPException(status_code=502, detail="Image analysis failed") from e

    return {
        "count": len(records),
        "results": [{"original": r.original, "translated": r.translated} for r in records],
    }
