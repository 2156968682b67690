"""
Discussion prompts shown during the hint-sharing phase.
"""

from pathlib import Path
from typing import List, Optional

import yaml

QUESTIONS_FILE = Path(__file__).parent / "data" / "hint_questions.yaml"


def load_hint_questions(path: Optional[str] = None) -> List[str]:
    """Load the list of discussion prompts from YAML."""
    with open(path or QUESTIONS_FILE, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    return [str(q) for q in data.get("questions", [])]


class HintQuestions:
    """Cycles through discussion prompts."""

    def __init__(self, questions: Optional[List[str]] = None):
        self.questions = questions if questions is not None else load_hint_questions()
        if not self.questions:
            raise ValueError("At least one hint question is required")
        self.index = 0

    @property
    def current(self) -> str:
        return self.questions[self.index]

    def next(self) -> str:
        """Move to the next prompt, wrapping around at the end."""
        self.index = (self.index + 1) % len(self.questions)
        return self.current
