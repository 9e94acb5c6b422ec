"""
Finite Automata API

FastAPI-based REST API exposing spec validation and word simulation.

Security features:
  - Rate limiting via slowapi
  - Optional API key authentication (set API_KEY env var to enable)
  - Bounded input length (MAX_INPUT_SYMBOLS)
"""

import time
import uuid
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Literal, Optional

from fastapi import Depends, FastAPI, HTTPException, Request, Security
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import APIKeyHeader
from pydantic import BaseModel, Field, field_validator
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from . import __version__
from .config import Settings
from .errors import SpecValidationError, UnknownSymbolError
from .factory import build_automaton
from .logging_config import get_logger, setup_logging

settings = Settings.from_env()
log = get_logger(__name__)

# --- Rate Limiter ---
limiter = Limiter(key_func=get_remote_address)

# --- API Key Auth (optional) ---
API_KEY = settings.api_key  # None = disabled
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(api_key: Optional[str] = Security(api_key_header)):
    """Validate API key if API_KEY env var is set. No-op when unset."""
    if API_KEY is None:
        return
    if api_key != API_KEY:
        raise HTTPException(
            status_code=401,
            detail={
                "error": "Invalid or missing API key",
                "error_type": "AuthenticationError",
                "hint": "Provide a valid X-API-Key header."
            }
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(log_dir=settings.log_dir, log_level=settings.log_level)
    log.info("api_started", version=__version__, auth_enabled=API_KEY is not None)
    yield
    log.info("api_stopped")


app = FastAPI(
    title="Finite Automata API",
    version=__version__,
    description="Validate DFA/NFA specs and simulate input words",
    lifespan=lifespan
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Request/Response Models ---

class SpecRequest(BaseModel):
    spec: Dict[str, Any]
    kind: Literal["dfa", "nfa"] = "dfa"


class SimulateRequest(SpecRequest):
    symbols: List[str] = Field(default_factory=list)

    @field_validator("symbols")
    @classmethod
    def limit_length(cls, v: List[str]) -> List[str]:
        if len(v) > settings.max_input_symbols:
            raise ValueError(f"Input exceeds maximum length of {settings.max_input_symbols} symbols.")
        return v


class HealthResponse(BaseModel):
    status: str
    version: str = __version__


# --- Helper Functions ---

def _build_or_400(request_id: str, body: SpecRequest):
    try:
        return build_automaton(body.spec, body.kind)
    except SpecValidationError as e:
        log.info("spec_rejected", request_id=request_id, error_type=type(e).__name__, field=e.field)
        raise HTTPException(
            status_code=400,
            detail={
                **e.to_dict(),
                "hint": f"Fix the '{e.field}' property of the spec."
            }
        )


# --- API Endpoints ---

@app.get("/health", response_model=HealthResponse)
@limiter.limit("60/minute")
async def health_check(request: Request):
    """Health check endpoint to verify API is running."""
    return HealthResponse(status="healthy")


@app.post("/validate", dependencies=[Depends(verify_api_key)])
@limiter.limit("60/minute")
async def validate(request: Request, body: SpecRequest):
    """
    Validate a spec by constructing the automaton.

    Returns:
        - 200: spec is valid for the requested kind
        - 400: classified validation error
        - 401: invalid API key
    """
    request_id = str(uuid.uuid4())[:8]
    automaton = _build_or_400(request_id, body)
    log.info("spec_validated", request_id=request_id, kind=body.kind, states=len(automaton.states))
    return {
        "valid": True,
        "kind": automaton.kind,
        "states": sorted(automaton.states),
        "alphabet": sorted(automaton.alphabet),
        "initial_state": automaton.initial_state,
        "final_states": sorted(automaton.final_states),
    }


@app.post("/simulate", dependencies=[Depends(verify_api_key)])
@limiter.limit("30/minute")
async def simulate(request: Request, body: SimulateRequest):
    """
    Build the automaton and feed it the given symbols.

    Returns:
        - 200: acceptance verdict, per-step trace and final snapshot
        - 400: invalid spec or a symbol outside the alphabet
        - 401: invalid API key
        - 422: malformed body or too many symbols
    """
    request_id = str(uuid.uuid4())[:8]
    t_start = time.time()
    automaton = _build_or_400(request_id, body)

    trace = [{"symbol": None, **automaton.snapshot()}]
    for symbol in body.symbols:
        try:
            automaton.transition(symbol)
        except UnknownSymbolError as e:
            raise HTTPException(
                status_code=400,
                detail={
                    "error": str(e),
                    "error_type": "UnknownSymbolError",
                    "symbol": e.symbol,
                    "hint": f"Valid symbols: {sorted(automaton.alphabet)}"
                }
            )
        trace.append({"symbol": symbol, **automaton.snapshot()})

    final = automaton.snapshot()
    total_ms = round((time.time() - t_start) * 1000, 1)
    log.info(
        "word_simulated",
        request_id=request_id,
        kind=body.kind,
        symbols=len(body.symbols),
        accepted=final["accepting"],
        total_ms=total_ms,
    )
    return {
        "accepted": final["accepting"],
        "error": final["error"],
        "trace": trace,
        "final": final,
        "performance": {"total_ms": total_ms},
    }


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Finite Automata API",
        "version": __version__,
        "endpoints": {
            "/health": "Health check (GET)",
            "/validate": "Validate a DFA/NFA spec (POST)",
            "/simulate": "Feed symbols to a DFA/NFA and report acceptance (POST)"
        }
    }


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
