"""
PhishGuard – FastAPI Backend
Main application entry point with the /analyze endpoint.
Wraps the phishing detector and keeps a history of recent analyses.
"""

import asyncio
import logging
from functools import lru_cache

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from config import CORS_ORIGINS, HISTORY_FILE, HISTORY_LIMIT, LOG_LEVEL
from models import (
    AnalysisResult,
    AnalyzeRequest,
    ClearHistoryResponse,
    HistoryStats,
    SecurityTip,
    ServiceInfo,
)
from detector.history_store import HistoryStore
from detector.phishing_detector import analyze_url_async
from detector.stats import compute_stats
from detector.tips import get_security_tips

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("phishguard")

app = FastAPI(
    title="PhishGuard",
    description="Heuristic Phishing URL Detection API",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=None)
def get_history_store() -> HistoryStore:
    logger.info("Using history file %s (limit %d)", HISTORY_FILE, HISTORY_LIMIT)
    return HistoryStore(HISTORY_FILE, HISTORY_LIMIT)


@app.get("/", response_model=ServiceInfo)
async def root():
    return ServiceInfo(
        name="PhishGuard",
        version="1.0.0",
        status="running",
        description="Heuristic phishing detection, no live lookups",
        endpoints={
            "/analyze": "POST - Analyze a URL for phishing indicators",
            "/history": "GET - Recent analyses, newest first; DELETE - clear them",
            "/history/export": "GET - Download the history as JSON",
            "/stats": "GET - Statistics over the stored history",
            "/tips": "GET - Security tips",
            "/health": "GET - Health check",
            "/docs": "GET - Interactive API documentation",
        },
    )


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


@app.post("/analyze", response_model=AnalysisResult)
async def analyze(request: AnalyzeRequest, history: HistoryStore = Depends(get_history_store)):
    """
    Analyze a URL for phishing indicators.
    Malformed URLs are not rejected: they come back as a CRITICAL
    "Invalid URL" result with domain "unknown".
    """
    result = await analyze_url_async(request.url)
    await asyncio.to_thread(history.add, result)
    return result


@app.get("/history", response_model=list[AnalysisResult])
def get_history(history: HistoryStore = Depends(get_history_store)):
    return history.load()


@app.get("/history/export")
def export_history(history: HistoryStore = Depends(get_history_store)):
    """Download the stored history as a JSON document."""
    filename = HistoryStore.export_filename()
    return Response(
        content=history.export_json(),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.delete("/history", response_model=ClearHistoryResponse)
def clear_history(history: HistoryStore = Depends(get_history_store)):
    cleared = history.clear()
    logger.info("Cleared %d stored analyses", cleared)
    return ClearHistoryResponse(cleared=cleared)


@app.get("/stats", response_model=HistoryStats)
def get_stats(history: HistoryStore = Depends(get_history_store)):
    return compute_stats(history.load())


@app.get("/tips", response_model=list[SecurityTip])
async def get_tips():
    return get_security_tips()


if __name__ == "__main__":
    import uvicorn
    import os
    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=False)
