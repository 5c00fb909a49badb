'''
In-memory Wordle API

Endpoints:
POST /games                -> start a game
GET  /games/{id}           -> read state & history
POST /games/{id}/guess     -> submit a guess

Games live in process memory only; restarting the server forgets them.
'''

import logging
import random
from functools import lru_cache
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query

from .config import Settings, get_settings
from .errors import ConfigError, SetupError
from .session import GuessRecord, Session, SessionStore, create_game_definition
from .types import Rejection
from .words import load_words
from .schemas import (
    GameState,
    GuessRecordOut,
    GuessRequest,
    GuessResponse,
    NewGameResponse,
    RejectionOut,
)

logger = logging.getLogger(__name__)

REJECTION_MESSAGES = {
    Rejection.WRONG_LENGTH: "Guess has the wrong number of letters.",
    Rejection.ALREADY_GUESSED: "That word was already guessed.",
    Rejection.NOT_IN_DICTIONARY: "That word is not in the dictionary.",
}

app = FastAPI(title="Wordle API", version="1.0.0")

store = SessionStore()


# Dependencies (tests override these)

def get_config() -> Settings:
    try:
        return get_settings()
    except ConfigError as exc:
        logger.error("Bad configuration: %s", exc)
        raise HTTPException(status_code=503, detail=str(exc))


@lru_cache(maxsize=1)
def _cached_words(word_file: str, timeout: float) -> tuple:
    return tuple(load_words(word_file, timeout=timeout))


def get_dictionary(settings: Settings = Depends(get_config)) -> List[str]:
    try:
        return list(_cached_words(settings.word_file, settings.http_timeout))
    except SetupError as exc:
        logger.error("Word list unavailable: %s", exc)
        raise HTTPException(status_code=503, detail=str(exc))


def get_rng() -> random.Random:
    return random.Random()


def get_store() -> SessionStore:
    return store


# Helpers

def _to_record_out(record: GuessRecord) -> GuessRecordOut:
    return GuessRecordOut(word=record.word, validity=list(record.validity), timestamp=record.timestamp)


def _revealed_target(session: Session) -> Optional[str]:
    if session.status == "in_progress":
        return None
    return session.definition.target_word


def _to_game_state(game_id: str, session: Session) -> GameState:
    return GameState(
        game_id=game_id,
        word_length=session.definition.word_length,
        guesses_left=session.guesses_left,
        status=session.status,
        history=[_to_record_out(r) for r in session.history],
        target=_revealed_target(session),
    )


# ---------------- Routes ----------------

@app.post("/games", response_model=NewGameResponse, summary="Start a new game")
def start_game(
    max_guesses: Optional[int] = Query(None, ge=1, description="Defaults to WORDLE_MAX_GUESSES"),
    words: List[str] = Depends(get_dictionary),
    rng: random.Random = Depends(get_rng),
    sessions: SessionStore = Depends(get_store),
    settings: Settings = Depends(get_config),
) -> NewGameResponse:
    budget = max_guesses if max_guesses is not None else settings.max_guesses
    definition = create_game_definition(words, budget, rng=rng)
    game_id, session = sessions.create(definition)
    return NewGameResponse(
        game_id=game_id,
        word_length=definition.word_length,
        max_guesses=definition.max_guesses,
        guesses_left=session.guesses_left,
        status=session.status,
    )


@app.get("/games/{game_id}", response_model=GameState, summary="Get current game state")
def get_game(game_id: str, sessions: SessionStore = Depends(get_store)) -> GameState:
    session = sessions.get(game_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return _to_game_state(game_id, session)


@app.post(
    "/games/{game_id}/guess",
    response_model=GuessResponse,
    summary="Submit a guess",
    responses={400: {"model": RejectionOut}},
)
def submit_guess(
    game_id: str,
    payload: GuessRequest,
    sessions: SessionStore = Depends(get_store),
) -> GuessResponse:
    try:
        outcome = sessions.guess(game_id, payload.guess)
    except ValueError as ve:
        raise HTTPException(status_code=409, detail=str(ve))
    if outcome is None:
        raise HTTPException(status_code=404, detail="Game not found")

    if not outcome.accepted:
        body = RejectionOut(rejection=outcome.rejection, message=REJECTION_MESSAGES[outcome.rejection])
        raise HTTPException(status_code=400, detail=body.model_dump(mode="json"))

    # status and guesses_left come from the outcome, not a second read of the session
    target = None
    if outcome.status != "in_progress":
        target = sessions.get(game_id).definition.target_word
    return GuessResponse(
        guesses_left=outcome.guesses_left,
        status=outcome.status,
        feedback=_to_record_out(outcome.record),
        target=target,
    )
