"""
Request model for the quiz endpoint.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from src.services.prompts import EvaluateQuiz, GenerateQuiz, QuizMode


class QuizRequest(BaseModel):
    """Payload for quiz generation and evaluation.

    - type: "progress" or "diagnosis"
    - disorder: Condition the quiz is about
    - answers: Question -> answer mapping; absent when asking for questions
    """
    type: str = Field(..., examples=["progress", "diagnosis"])
    disorder: str = Field(..., examples=["General Mental Health"])
    answers: Optional[Dict[str, Any]] = None

    def to_mode(self) -> QuizMode:
        if self.answers is None:
            return GenerateQuiz(type=self.type, disorder=self.disorder)
        return EvaluateQuiz(type=self.type, disorder=self.disorder, answers=self.answers)
