"""
Pydantic models for the HTTP API.
- Validate guesses coming in
- Shape game state going out (the target stays hidden until the game ends)
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .types import LetterValidity, Rejection

Status = Literal["in_progress", "won", "lost"]


# 1. Response when a new game is started
class NewGameResponse(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game; the target is never returned here")
    word_length: int = Field(..., description="Number of letters in every valid guess")
    max_guesses: int = Field(..., description="Guess budget for this game")
    guesses_left: int = Field(..., description="How many guesses remain")
    status: Status = Field(..., description="Current state of the game")


# 2. Player's guess
class GuessRequest(BaseModel):
    guess: str = Field(..., description="The guessed word. Length is checked against the game.")

    @field_validator("guess")
    @classmethod
    def strip_guess(cls, guess: str) -> str:
        # Same trimming as the terminal front end
        return guess.strip()

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": "crane"},
            ]
        }
    }


# 3. Feedback for a single guess
class GuessRecordOut(BaseModel):
    word: str = Field(..., description="The guessed word")
    validity: List[LetterValidity] = Field(..., description="One result per letter")
    timestamp: float = Field(..., description="When the guess was made")


# 4. Overall state of the game
class GameState(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    word_length: int = Field(..., description="Number of letters in every valid guess")
    guesses_left: int = Field(..., description="How many guesses remain")
    status: Status = Field(..., description="Current state of the game")
    history: List[GuessRecordOut] = Field(..., description="Accepted guesses, oldest first")
    target: Optional[str] = Field(None, description="The target word (only once the game is over)")


# 5. Result of an accepted guess
class GuessResponse(BaseModel):
    guesses_left: int = Field(..., description="How many guesses remain")
    status: Status = Field(..., description="Current state of the game")
    feedback: GuessRecordOut = Field(..., description="Feedback for this guess")
    target: Optional[str] = Field(None, description="The target word (only once the game is over)")


# 6. Body of a 400 for a rejected guess
class RejectionOut(BaseModel):
    rejection: Rejection = Field(..., description="Why the guess was refused")
    message: str = Field(..., description="Human readable reason")
