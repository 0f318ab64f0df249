"""
Quiz prompts: question generation and answer evaluation.
"""
import json
from dataclasses import dataclass
from typing import Any, Dict, Union

from .roster import GENERAL_MENTAL_HEALTH

PROGRESS = "progress"
DIAGNOSIS = "diagnosis"

QUESTION_COUNT = 10


@dataclass(frozen=True)
class GenerateQuiz:
    """No answers yet: ask the model for questions."""

    type: str
    disorder: str


@dataclass(frozen=True)
class EvaluateQuiz:
    """Answers submitted: ask the model to score them."""

    type: str
    disorder: str
    answers: Dict[str, Any]


QuizMode = Union[GenerateQuiz, EvaluateQuiz]


def lists_possible_conditions(mode: EvaluateQuiz) -> bool:
    """Only the general diagnosis quiz asks for candidate conditions."""
    return (
        mode.type == DIAGNOSIS
        and mode.disorder.strip().lower() == GENERAL_MENTAL_HEALTH.lower()
    )


def generate_questions_prompt(mode: GenerateQuiz) -> str:
    purpose = "track progress of" if mode.type == PROGRESS else "diagnose"
    return (
        f"Generate {QUESTION_COUNT} yes/no questions to {purpose} {mode.disorder}. "
        "Only provide the questions in a numbered list."
    )


def evaluate_answers_prompt(mode: EvaluateQuiz) -> str:
    instructions = [
        "Evaluate these answers and give a score out of 100.",
        "After the score, also provide a short recommendation on whether "
        "the person should consult a mental health professional or not.",
    ]
    reply_format = [
        '"Your score is X/100."',
        '"Recommendation: [your advice here]"',
    ]
    if lists_possible_conditions(mode):
        instructions.append(
            "Provide only a list of possible conditions they might have based on "
            "their answers and no explanations to why they might have these "
            "conditions to keep the response concise."
        )
        reply_format.append('"Possible conditions: [list of conditions]"')

    numbered = "\n".join(f"{i}. {line}" for i, line in enumerate(instructions, 1))
    return (
        f"Here are the answers to a {mode.type} quiz for {mode.disorder}.\n"
        f"Questions and answers: {json.dumps(mode.answers)}.\n\n"
        f"{numbered}\n\n"
        "Format the reply as:\n"
        + "\n".join(reply_format)
    )


def quiz_prompt(mode: QuizMode) -> str:
    """Render the prompt for either quiz mode."""
    if isinstance(mode, EvaluateQuiz):
        return evaluate_answers_prompt(mode)
    if isinstance(mode, GenerateQuiz):
        return generate_questions_prompt(mode)
    raise TypeError(f"Unknown quiz mode: {type(mode).__name__}")
