"""FastAPI server for the quiz arcade."""

import asyncio
import logging
import os
import random
import time
import uuid
from typing import Literal, Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from engine import ContentPack, GameSession, Phase, ProgressStore, Scheduler, Storage, get_pack, list_packs
from engine.scheduler import AsyncioScheduler
from server.file_storage import FileStorage
from server.postgres_storage import PostgresStorage

logger = logging.getLogger(__name__)

Command = Literal[
    'open', 'select_mode', 'select_group', 'select_level', 'start_round',
    'submit_answer', 'use_hint', 'skip', 'pause', 'resume', 'retry',
    'next_level', 'back', 'quit', 'reset',
]


# Pydantic models for API
class CreateSessionRequest(BaseModel):
    game: str
    user_id: str = "default"
    seed: Optional[int] = None


class CommandRequest(BaseModel):
    command: Command
    value: Optional[Union[int, str]] = None
    challenge_id: Optional[str] = None


class CommandResponse(BaseModel):
    accepted: bool
    state: dict


class SessionResponse(BaseModel):
    session_id: str
    state: dict


# Global state (in production, use proper DI)
storage: Storage = None
scheduler: Scheduler = None
progress_stores: dict[tuple[str, str], ProgressStore] = {}  # (user_id, game) -> store
sessions: dict[str, GameSession] = {}  # session_id -> session
last_seen: dict[str, float] = {}  # session_id -> monotonic time of last request
session_idle_seconds = 1800.0

# Sessions in these phases hold a live round and are never evicted
ACTIVE_PHASES = (Phase.COUNTDOWN, Phase.PLAYING, Phase.PAUSED)


def get_game(game: str) -> ContentPack:
    try:
        return get_pack(game)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown game: {game}")


def get_progress(user_id: str, pack: ContentPack) -> ProgressStore:
    """Get or load the progress store of a user for a game."""
    key = (user_id, pack.key)
    if key not in progress_stores:
        progress_stores[key] = ProgressStore(storage, pack, namespace=user_id)
    return progress_stores[key]


def get_session(session_id: str) -> GameSession:
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
    last_seen[session_id] = time.monotonic()
    return session


def evict_idle_sessions(now: Optional[float] = None) -> list[str]:
    """Drop sessions left outside a round for longer than session_idle_seconds."""
    now = time.monotonic() if now is None else now
    evicted = []
    for session_id, session in list(sessions.items()):
        if session.phase in ACTIVE_PHASES:
            continue
        if now - last_seen.get(session_id, now) > session_idle_seconds:
            session.quit()
            del sessions[session_id]
            last_seen.pop(session_id, None)
            evicted.append(session_id)
    if evicted:
        logger.info(f"Evicted {len(evicted)} idle sessions")
    return evicted


app = FastAPI(title="Quiz Arcade API", description="Shared session engine for four quiz games")


@app.on_event("startup")
async def startup():
    """Initialize storage and the session scheduler on startup."""
    global storage, scheduler, session_idle_seconds

    # File storage by default, set QUIZ_STORAGE=postgres to use PostgreSQL
    storage_type = os.environ.get('QUIZ_STORAGE', 'file')
    if storage_type == 'postgres':
        storage = PostgresStorage(os.environ.get('DATABASE_URL'))
        logger.info("Using PostgreSQL storage")
    else:
        storage = FileStorage(os.environ.get('QUIZ_STATE_DIR'))
        logger.info(f"Using file storage in {storage.state_dir}")

    scheduler = AsyncioScheduler()
    session_idle_seconds = float(os.environ.get('QUIZ_SESSION_IDLE_SECONDS', 1800))
    progress_stores.clear()
    sessions.clear()
    last_seen.clear()


@app.on_event("shutdown")
async def shutdown():
    for session in sessions.values():
        session.quit()
    sessions.clear()
    last_seen.clear()
    if isinstance(storage, PostgresStorage):
        storage.close()


@app.get("/")
async def root():
    return {
        "service": "Quiz Arcade API",
        "games": [pack.key for pack in list_packs()],
        "docs": "/docs",
    }


# Game catalog endpoints
@app.get("/api/games")
async def list_games():
    return {"games": [pack.describe() for pack in list_packs()]}


@app.get("/api/games/{game}/levels")
async def list_levels(game: str, user_id: str = "default", mode: Optional[str] = None,
                      group: Optional[str] = None):
    """Levels with unlock state, stars and best results for a user."""
    pack = get_game(game)
    progress = get_progress(user_id, pack)
    levels = []
    for level in pack.catalog.levels_for(mode, group):
        entry = level.to_dict()
        level_progress = progress.get(level.id)
        entry['unlocked'] = progress.is_unlocked(level.id)
        entry['stars'] = level_progress.stars if level_progress else 0
        entry['progress'] = level_progress.to_dict() if level_progress else None
        levels.append(entry)
    return {"game": pack.key, "levels": levels}


@app.get("/api/games/{game}/progress")
async def get_game_progress(game: str, user_id: str = "default"):
    pack = get_game(game)
    return get_progress(user_id, pack).summary()


# Session endpoints
@app.post("/api/sessions", response_model=SessionResponse)
async def create_session(request: CreateSessionRequest):
    evict_idle_sessions()
    pack = get_game(request.game)
    rng = random.Random(request.seed) if request.seed is not None else None
    session = GameSession(pack, get_progress(request.user_id, pack), scheduler, rng=rng)
    session.open()

    session_id = str(uuid.uuid4())[:8]
    sessions[session_id] = session
    last_seen[session_id] = time.monotonic()
    logger.info(f"Session {session_id} created: {pack.key} for {request.user_id}")
    return SessionResponse(session_id=session_id, state=session.snapshot())


@app.get("/api/sessions/{session_id}")
async def get_session_state(session_id: str):
    return get_session(session_id).snapshot()


@app.post("/api/sessions/{session_id}/commands", response_model=CommandResponse)
async def send_command(session_id: str, request: CommandRequest):
    session = get_session(session_id)
    value = request.value

    match request.command:
        case 'select_mode':
            accepted = session.select_mode(str(value))
        case 'select_group':
            accepted = session.select_group(str(value))
        case 'select_level':
            try:
                accepted = session.select_level(int(value))
            except (TypeError, ValueError):
                raise HTTPException(status_code=422, detail="select_level needs a numeric level id")
        case 'submit_answer':
            accepted = session.submit_answer(None if value is None else str(value), request.challenge_id)
        case 'skip':
            accepted = session.skip(request.challenge_id)
        case _:
            accepted = getattr(session, request.command)()

    return CommandResponse(accepted=accepted, state=session.snapshot())


@app.delete("/api/sessions/{session_id}")
async def delete_session(session_id: str):
    session = get_session(session_id)
    session.quit()
    del sessions[session_id]
    last_seen.pop(session_id, None)
    logger.info(f"Session {session_id} closed")
    return {"success": True}
