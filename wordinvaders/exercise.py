"""Spelling exercises: questions with a missing letter and letter options."""

from __future__ import annotations

import random
import re
import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

OPTIONS = string.ascii_lowercase
OPTION_COUNT = 4
DEFAULT_EXERCISE_PATH = "assets/exercise/unit3.txt"

_NON_LETTER = re.compile(r"[^a-zA-Z]")


@dataclass
class Question:
    """A word with one letter blanked out and the letters to choose from."""

    question: str
    word: str
    answer: str
    options: List[str] = field(default_factory=list)

    def audio_path(self) -> str:
        """Asset path of the pronunciation clip for this word."""
        return f"audios/{self.word.replace(' ', '_')}_1.mp3"


def parse_question(question_str: str, rng: Optional[random.Random] = None) -> Question:
    """Build a question from a ``word:meaning`` line.

    Without a colon the last character of the line is dropped from the word.
    """
    if not question_str:
        raise ValueError("empty question line")
    rng = rng or random.Random()
    idx = question_str.find(":")
    if idx < 0:
        idx = len(question_str) - 1
    word = question_str[:idx].strip().lower()
    meaning = question_str[idx + 1 :].strip()

    letters = _NON_LETTER.sub("", word)
    if not letters:
        raise ValueError(f"no letters to ask for in {question_str!r}")
    answer = rng.choice(letters)

    question = f"{word.replace(answer, '[ ]', 1)} :{meaning}"
    pool = OPTIONS.replace(answer, "")
    options = rng.sample(pool, OPTION_COUNT)
    options.append(answer)
    rng.shuffle(options)
    return Question(question=question, word=word, answer=answer, options=options)


@dataclass
class Exercise:
    """An ordered set of questions and the position of the current one."""

    questions: List[Question] = field(default_factory=list)
    current_index: int = 0

    def current(self) -> Optional[Question]:
        if 0 <= self.current_index < len(self.questions):
            return self.questions[self.current_index]
        return None

    def check(self, answer: str) -> bool:
        question = self.current()
        return question is not None and question.answer == answer

    def advance(self) -> None:
        self.current_index += 1


def parse_exercise(text: str, rng: Optional[random.Random] = None) -> Exercise:
    """Parse one question per line of ``text``."""
    rng = rng or random.Random()
    return Exercise(questions=[parse_question(line.strip(), rng) for line in text.splitlines()])


def load_exercise(path=DEFAULT_EXERCISE_PATH, rng: Optional[random.Random] = None) -> Exercise:
    """Read and parse an exercise file."""
    return parse_exercise(Path(path).read_text(encoding="utf-8"), rng)