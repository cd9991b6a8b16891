"""Benkyou FastAPI application - Japanese conjugation drill API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from config import configure_logging, get_config
from models import (
    ConjugateRequest,
    ConjugateResponse,
    DrillFormRequest,
    DrillFormResponse,
    DrillQuestionRequest,
    DrillQuestionResponse,
    ExplainRequest,
    ExplainResponse,
    PromptStemRequest,
    PromptStemResponse,
)
from services import (
    build_drill_question,
    build_prompt_stem,
    conjugate,
    explain_rule,
    pick_drill_form,
)

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


# ============================================================================
# Application Lifespan
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup."""
    cfg = get_config()
    configure_logging(cfg.log_level)
    logger.info("Benkyou API %s starting", VERSION)
    yield


# ============================================================================
# FastAPI Application
# ============================================================================


app = FastAPI(
    title="Benkyou API",
    description="""Japanese conjugation engine for language learning.

## Features
- **Conjugation**: Full paradigm (68 forms) for verbs and adjectives
- **Rules**: Short explanation of how a form is built
- **Drills**: Random drill forms, fill-in-the-blank cues, multiple-choice questions

## Endpoints
- `/conjugate` - Conjugation table from a dictionary entry
- `/explain` - Rule explanation for a word class and form
- `/drill/form` - Pick a form to drill
- `/drill/stem` - Fill-in-the-blank cue
- `/drill/question` - Multiple-choice question
""",
    version=VERSION,
    lifespan=lifespan,
)


# ============================================================================
# Middleware
# ============================================================================


_cfg = get_config()
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if _cfg.allow_all_cors else _cfg.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Health Endpoints
# ============================================================================


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "service": "benkyou", "version": VERSION}


@app.get("/health", tags=["Health"])
async def health() -> dict[str, str]:
    """Detailed health check."""
    return {"status": "healthy", "version": VERSION}


# ============================================================================
# Conjugation Endpoints
# ============================================================================


@app.post("/conjugate", response_model=ConjugateResponse, tags=["Conjugation"])
async def conjugate_endpoint(request: ConjugateRequest) -> ConjugateResponse:
    """
    Generate the conjugation table of a dictionary entry.

    Every form is returned unless `forms` narrows the selection. Forms that
    do not apply to the word class are empty strings. Unknown form names
    are ignored.
    """
    try:
        word = request.word.to_word()
        table = {str(form): value for form, value in conjugate(word).items()}
        if request.forms:
            table = {name: table[name] for name in request.forms if name in table}
        return ConjugateResponse(
            word=word.kanji,
            word_type=str(word.type),
            conjugations=table,
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Conjugation failed: {e!s}") from e


@app.post("/explain", response_model=ExplainResponse, tags=["Conjugation"])
async def explain_endpoint(request: ExplainRequest) -> ExplainResponse:
    """Explain how a form is built for a word class."""
    try:
        return ExplainResponse(
            word_type=request.word_type,
            form=request.form,
            rule=explain_rule(request.word_type, request.form),
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Rule lookup failed: {e!s}") from e


# ============================================================================
# Drill Endpoints
# ============================================================================


@app.post("/drill/form", response_model=DrillFormResponse, tags=["Drill"])
async def drill_form_endpoint(request: DrillFormRequest) -> DrillFormResponse:
    """Pick a random form to drill for a word class."""
    try:
        form = pick_drill_form(request.word_type)
        return DrillFormResponse(word_type=str(request.word_type), form=str(form))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Drill form failed: {e!s}") from e


@app.post("/drill/stem", response_model=PromptStemResponse, tags=["Drill"])
async def drill_stem_endpoint(request: PromptStemRequest) -> PromptStemResponse:
    """Build the fill-in-the-blank cue for a word."""
    try:
        return PromptStemResponse(stem=build_prompt_stem(request.word.to_word(), request.form))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Prompt stem failed: {e!s}") from e


@app.post("/drill/question", response_model=DrillQuestionResponse, tags=["Drill"])
async def drill_question_endpoint(request: DrillQuestionRequest) -> DrillQuestionResponse:
    """
    Build a multiple-choice question.

    The options hold the correct answer, other forms of the same word and
    malformed look-alikes, in random order.
    """
    try:
        question = build_drill_question(request.word.to_word(), request.form)
        return DrillQuestionResponse(
            word=request.word,
            target_form=str(question.target_form),
            stem=question.stem,
            correct_answer=question.correct_answer,
            options=question.options,
            rule=question.rule,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Drill question failed: {e!s}") from e


# ============================================================================
# CLI Entry Point
# ============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=_cfg.host,
        port=_cfg.port,
        reload=_cfg.reload,
    )
