"""
wordle_core.py
---------------------------------------------------
Core logic for the terminal word-guessing game.
Includes:
 - Guess validation (trim, length, alphabetic check)
 - Guess scoring (exact matches first, then misplaced)
 - Game state with a bounded try budget
---------------------------------------------------
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import List
import logging

logger = logging.getLogger(__name__)


class Verdict(Enum):
    """Per-position outcome of a scored guess."""
    UNSCORED = "UNSCORED"
    ABSENT = "ABSENT"
    MISPLACED = "MISPLACED"
    CORRECT = "CORRECT"


# ---------------- Errors ---------------- #

class GuessValidationError(ValueError):
    """Raw input could not be turned into a guess."""


class UnexpectedLengthError(GuessValidationError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Your guess must be exactly {expected} characters (got {actual}).")


class NotAlphabeticError(GuessValidationError):
    def __init__(self, offending: List[str]):
        self.offending = offending
        shown = ", ".join(repr(c) for c in offending)
        super().__init__(f"Your guess contains non-alphabetic characters: {shown}.")


class GameOverError(RuntimeError):
    """A guess was submitted after the game finished."""


# ---------------- Validation ---------------- #

def validate_guess(raw: str, expected_length: int) -> str:
    """
    Turn one raw line into a guess.
    Strips surrounding whitespace, checks the length first and then that
    every character is an ASCII letter. Returns the guess upper-cased.
    """
    trimmed = raw.strip()
    if len(trimmed) != expected_length:
        raise UnexpectedLengthError(expected_length, len(trimmed))

    offending = [c for c in trimmed if not (c.isascii() and c.isalpha())]
    if offending:
        raise NotAlphabeticError(offending)

    return trimmed.upper()


# ---------------- Scoring ---------------- #

def score_guess(target: str, guess: str) -> List[Verdict]:
    """
    Compute the verdicts of a guess against the target.
    Returns one Verdict per position:
      CORRECT   = same letter, same position
      MISPLACED = letter elsewhere in the target, budget left
      ABSENT    = letter not in the target, or all its copies claimed
    """
    if len(target) != len(guess):
        raise ValueError(
            f"Guess length {len(guess)} does not match target length {len(target)}."
        )
    res = [Verdict.UNSCORED] * len(target)
    remain = Counter(target)

    # First pass: exact matches claim their letter
    for i, (t, g) in enumerate(zip(target, guess)):
        if t == g:
            res[i] = Verdict.CORRECT
            remain[g] -= 1

    # Second pass: left to right, misplaced letters take what is left
    for i, g in enumerate(guess):
        if res[i] == Verdict.CORRECT:
            continue
        if g not in remain:
            res[i] = Verdict.ABSENT
        elif remain[g] > 0:
            res[i] = Verdict.MISPLACED
            remain[g] -= 1
        else:
            res[i] = Verdict.ABSENT

    return res


def is_win(verdicts: List[Verdict]) -> bool:
    return all(v == Verdict.CORRECT for v in verdicts)


# ---------------- Game Config & Results ---------------- #

@dataclass
class GameConfig:
    """Game configuration: try budget, word length, I/O retry cap."""
    max_rounds: int = 5
    word_length: int = 5
    max_io_failures: int = 5


@dataclass
class RoundResult:
    """Single round result container."""
    guess: str
    verdicts: List[Verdict]
    remaining: int
    won: bool
    over: bool


# ---------------- Game ---------------- #

class WordleGame:
    """One game against a fixed target word."""
    def __init__(self, answer: str, cfg: GameConfig):
        self.answer = answer
        self.cfg = cfg
        self.round = 0
        self.history: List[RoundResult] = []

    @property
    def over(self) -> bool:
        return bool(self.history) and self.history[-1].over

    def guess_word(self, word: str) -> RoundResult:
        """Score a validated guess and return the result."""
        if self.over:
            raise GameOverError("Game already over.")

        verdicts = score_guess(self.answer, word)
        self.round += 1
        won = is_win(verdicts)
        over = won or self.round >= self.cfg.max_rounds
        rr = RoundResult(word, verdicts, self.cfg.max_rounds - self.round, won, over)
        self.history.append(rr)

        logger.debug("Round %d: %s -> %s (remaining=%d, won=%s, over=%s)",
                     self.round, word, " ".join(v.name for v in verdicts),
                     rr.remaining, rr.won, rr.over)

        return rr
