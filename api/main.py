import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from algorithms.errors import (
    EmptyPatternError,
    EmptySequenceError,
    InvalidAlphabetError,
    PatternLongerThanSubjectError,
)
from algorithms.modes import run
from config import load_settings
from utils.text_io import parse_sequence

settings = load_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="DNA Pattern Matching API", version="1.0")

# CORS for demos; restrict origins in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class AnalyzeRequest(BaseModel):
    algorithm: str = Field(
        pattern=r"(?i)^-?(bf|brute-?force|kr|rk|karp-?rabin|rabin-?karp|lcss?)$"
    )
    subject: str
    other: str  # pattern for bf/kr, second sequence for lcss
    strict: bool = False
    positions: bool = False

    @field_validator("subject", "other")
    @classmethod
    def _dna_only(cls, v: str, info: ValidationInfo) -> str:
        try:
            return parse_sequence(v, name=info.field_name)
        except InvalidAlphabetError as e:
            raise ValueError(str(e)) from e


class AnalyzeResponse(BaseModel):
    algorithm: str
    occurrences: Optional[int] = None
    positions: Optional[List[int]] = None
    lcss_length: Optional[int] = None
    distance: Optional[float] = None


@app.get("/health")
def health():
    return {"ok": True}


@app.post("/api/analyze", response_model=AnalyzeResponse)
def analyze(req: AnalyzeRequest):
    try:
        result = run(req.algorithm, req.subject, req.other, strict=req.strict,
                     hash_mod=settings.hash_mod, max_cells=settings.max_table_cells)
    except (EmptyPatternError, EmptySequenceError, PatternLongerThanSubjectError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info("analyze %s: subject=%d other=%d", result.mode.value,
                len(req.subject), len(req.other))

    if result.mode.exact:
        return AnalyzeResponse(
            algorithm=result.mode.value,
            occurrences=result.occurrences,
            positions=result.positions if req.positions else None,
        )
    return AnalyzeResponse(
        algorithm=result.mode.value,
        lcss_length=result.lcss_length,
        distance=round(result.distance, 2),
    )

# Run with: uvicorn api.main:app --host 0.0.0.0 --port 8000
