"""FastAPI server for kanadrill."""

import logging
import os
import random
import traceback
import uuid

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from typing import Optional

logger = logging.getLogger(__name__)

from core.game import PickSession
from core.kana import get_all_groups, get_group_name, get_group_pairs
from core.mode import SmartReverseMode
from core.selector import AdaptiveSelector, EmptyPoolError
from core.stats import SessionStats


# Pydantic models for API
class StartSessionRequest(BaseModel):
    user_id: str = "default"
    groups: list[int] = []


class AnswerRequest(BaseModel):
    choice: str
    answer_ms: Optional[int] = Field(default=None, ge=0)  # Time the learner took to answer


class RoundResponse(BaseModel):
    key: str
    prompt: str
    options: list[str]
    mode: str
    wrong_selected: list[str]


class SessionResponse(BaseModel):
    session_id: str
    user_id: str
    groups: list[int]
    group_names: list[str]
    round: RoundResponse
    mode: str
    consecutive_correct: int
    stats: dict


class AnswerResponse(BaseModel):
    correct: bool
    feedback: str
    score: int
    mode: str
    round: RoundResponse


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in ('0', 'false', 'no', 'off', '')


def _make_rng() -> random.Random:
    """Seed from DRILL_RANDOM_SEED when set, for reproducible drills."""
    seed = os.environ.get('DRILL_RANDOM_SEED')
    if seed:
        logger.info(f"Using random seed {seed}")
        return random.Random(int(seed))
    return random.Random()


# Global state (process lifetime only)
rng: random.Random = _make_rng()
keep_weights: bool = _env_flag('DRILL_KEEP_WEIGHTS', True)
user_selectors: dict[str, AdaptiveSelector] = {}
sessions: dict[str, dict] = {}  # session_id -> {user_id, groups, game}
user_sessions: dict[str, str] = {}  # user_id -> active session_id


def get_selector(user_id: str) -> AdaptiveSelector:
    """Get or create the weight map for a user."""
    if user_id not in user_selectors:
        user_selectors[user_id] = AdaptiveSelector(rng)
    return user_selectors[user_id]


def get_session(session_id: str) -> dict:
    if session_id not in sessions:
        raise HTTPException(status_code=404, detail="Session not found")
    return sessions[session_id]


def drop_session(session_id: str) -> Optional[dict]:
    """Forget a session and, if it is still active, its user's pointer to it."""
    entry = sessions.pop(session_id, None)
    if entry and user_sessions.get(entry['user_id']) == session_id:
        del user_sessions[entry['user_id']]
    return entry


def session_response(session_id: str) -> SessionResponse:
    entry = sessions[session_id]
    state = entry['game'].to_dict()
    return SessionResponse(
        session_id=session_id,
        user_id=entry['user_id'],
        groups=entry['groups'],
        group_names=[get_group_name(i) for i in entry['groups']],
        round=RoundResponse(**state['round']),
        mode=state['mode']['mode'],
        consecutive_correct=state['mode']['consecutive_correct'],
        stats=state['stats']
    )


app = FastAPI(title="Kanadrill API", description="Adaptive kana drill API")


@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "kanadrill"}


@app.get("/api/groups")
async def list_groups():
    """List the kana groups that can be drilled."""
    return {"groups": get_all_groups()}


@app.post("/api/sessions", response_model=SessionResponse)
async def start_session(request: StartSessionRequest):
    """Start a drill session over the selected groups."""
    try:
        pairs = get_group_pairs(request.groups)
    except IndexError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not keep_weights:
        user_selectors.pop(request.user_id, None)
    selector = get_selector(request.user_id)

    try:
        game = PickSession(pairs, selector=selector, mode=SmartReverseMode(rng),
                           stats=SessionStats(), rng=rng)
    except EmptyPoolError as e:
        raise HTTPException(status_code=400, detail=str(e))

    # One active session per user, the previous one is discarded
    previous = user_sessions.get(request.user_id)
    if previous:
        drop_session(previous)
        logger.info(f"Session {previous} replaced for {request.user_id}")

    session_id = str(uuid.uuid4())[:8]
    sessions[session_id] = {
        'user_id': request.user_id,
        'groups': list(request.groups),
        'game': game
    }
    user_sessions[request.user_id] = session_id
    logger.info(f"Session {session_id} started for {request.user_id} with {len(pairs)} characters")
    return session_response(session_id)


@app.get("/api/sessions/{session_id}", response_model=SessionResponse)
async def get_session_state(session_id: str):
    """Get the current round, mode and stats of a session."""
    get_session(session_id)
    return session_response(session_id)


@app.post("/api/sessions/{session_id}/answer", response_model=AnswerResponse)
async def submit_answer(session_id: str, request: AnswerRequest):
    """Submit the learner's choice for the current round."""
    try:
        entry = get_session(session_id)
        game: PickSession = entry['game']
        seconds = request.answer_ms / 1000 if request.answer_ms is not None else None
        try:
            result = game.submit_answer(request.choice, answer_seconds=seconds)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        logger.info(f"Session {session_id}: {result['feedback']} (correct={result['correct']})")
        return AnswerResponse(
            correct=result['correct'],
            feedback=result['feedback'],
            score=result['score'],
            mode=result['mode'],
            round=RoundResponse(**result['round'])
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error in submit_answer: {type(e).__name__}: {e}")
        logger.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail=f"Internal error: {type(e).__name__}: {str(e)}")


@app.delete("/api/sessions/{session_id}")
async def end_session(session_id: str):
    """End a session. The user's weights are kept."""
    entry = get_session(session_id)
    stats = entry['game'].stats.to_dict()
    drop_session(session_id)
    logger.info(f"Session {session_id} ended for {entry['user_id']}")
    return {"success": True, "stats": stats}


@app.get("/api/users/{user_id}/weights")
async def get_weights(user_id: str):
    """Get a snapshot of a user's character weights."""
    selector = user_selectors.get(user_id)
    return {"user_id": user_id, "weights": selector.to_dict() if selector else {}}


@app.post("/api/users/{user_id}/weights/reset")
async def reset_weights(user_id: str):
    """Forget a user's character weights."""
    selector = user_selectors.get(user_id)
    if selector:
        selector.reset()
    logger.info(f"Weights reset for {user_id}")
    return {"success": True}
