import logging
import os

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from fastapi.middleware.cors import CORSMiddleware
from typing import List, Tuple, Optional

from services.compare import InputTooLarge, compare_texts

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Gestalt Similarity API", version="1.0")

# CORS_ALLOW_ORIGINS is comma-separated; "*" for demos
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

class AnalyzeRequest(BaseModel):
    textA: str
    textB: str
    unit: str = Field("grapheme", pattern=r"^(grapheme|char|word)$")
    blocks: bool = True  # include matched spans in the response

class AnalyzeResponse(BaseModel):
    unit: str
    similarity: float
    matched: int
    lengthA: int
    lengthB: int
    matchesA: Optional[List[Tuple[int, int]]] = None  # (start, len) in characters
    matchesB: Optional[List[Tuple[int, int]]] = None

@app.get("/health")
def health():
    return {"ok": True}

@app.post("/api/analyze", response_model=AnalyzeResponse)
def analyze(req: AnalyzeRequest):
    try:
        result = compare_texts(req.textA, req.textB, unit=req.unit)
    except InputTooLarge as e:
        raise HTTPException(status_code=413, detail=str(e))

    logger.debug("analyze unit=%s similarity=%.6f", req.unit, result["similarity"])
    if not req.blocks:
        result["matchesA"] = result["matchesB"] = None
    result["similarity"] = round(result["similarity"], 6)
    return AnalyzeResponse(**result)

# Run with: uvicorn api.main:app --host 0.0.0.0 --port 8000
