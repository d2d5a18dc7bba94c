# app.py
from __future__ import annotations
import logging
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exception_handlers import request_validation_exception_handler

import config
from models import (
    CigarIn, ReverseRequest, QuizRequest, QuizResult,
    FlavorProfile, ReversePairing,
)
from engine import derive_profile, get_smart_pairings, get_reverse_pairing, build_collector_level
from catalog import DRINK_MENU, OCCASIONS

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=config.APP_TITLE, version=config.APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(), allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

@app.exception_handler(RequestValidationError)
async def log_validation_error(request: Request, exc: RequestValidationError):
    logger.warning("invalid request on %s: %s", request.url.path, exc.errors())
    return await request_validation_exception_handler(request, exc)

@app.get("/health", include_in_schema=False)
def health():
    return {"status": "ok", "version": config.APP_VERSION}

# ---------- Quiz ----------
QUIZ = [
    {"id": "Q1", "title": "How long have you been enjoying cigars?",
     "options": [
         {"id": "A", "label": "This is my first humidor"},
         {"id": "B", "label": "A few months, still exploring"},
         {"id": "C", "label": "Several years, I know my wrappers"},
         {"id": "D", "label": "Decades, I age my own boxes"},
     ]},
    {"id": "Q2", "title": "What do you reach for on a free evening?",
     "options": [
         {"id": "A", "label": "Something mild and easygoing"},
         {"id": "B", "label": "A reliable medium-bodied favourite"},
         {"id": "C", "label": "A bold, complex blend"},
         {"id": "D", "label": "A rare or limited release"},
     ]},
    {"id": "Q3", "title": "How big is your collection?",
     "options": [
         {"id": "A", "label": "A handful of sticks"},
         {"id": "B", "label": "One well-stocked humidor"},
         {"id": "C", "label": "Several boxes across brands"},
         {"id": "D", "label": "A cabinet with vintages"},
     ]},
]

@app.get("/api/quiz")
def get_quiz():
    return {"questions": QUIZ}

@app.post("/api/quiz/result", response_model=QuizResult)
def quiz_result(body: QuizRequest):
    if not body.answers:
        raise HTTPException(400, "answers is missing or empty")
    level, totals = build_collector_level([a.model_dump() for a in body.answers])
    return QuizResult(level=level, totals=totals)

# ---------- Pairing ----------
@app.get("/api/drinks")
def get_drinks():
    return {"drinks": DRINK_MENU, "occasions": OCCASIONS}

@app.post("/api/profile", response_model=FlavorProfile)
def profile(cigar: CigarIn):
    return derive_profile(cigar.strength, cigar.notes)

@app.post("/api/pairings")
def pairings(cigar: CigarIn):
    """
    Verwacht: {"strength": "Full", "notes": "pepper, leather"}
    """
    return {
        "profile": derive_profile(cigar.strength, cigar.notes).model_dump(),
        "pairings": [s.model_dump() for s in get_smart_pairings(cigar.strength, cigar.notes)],
    }

@app.post("/api/reverse-pairing", response_model=ReversePairing)
def reverse_pairing(body: ReverseRequest):
    return get_reverse_pairing(body.category, body.preference, body.occasion)
