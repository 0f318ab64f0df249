from .checklist_prompts import (
    CHECKLIST,
    REMARKS,
    ChecklistMode,
    ChecklistRemarks,
    DailyChecklist,
    checklist_prompt,
)
from .counsellor_prompts import (
    general_chat_prompt,
    specialised_chat_prompt,
)
from .quiz_prompts import (
    DIAGNOSIS,
    PROGRESS,
    EvaluateQuiz,
    GenerateQuiz,
    QuizMode,
    quiz_prompt,
)
from .roster import (
    PROFILE_BASE_URL,
    ROSTER,
    profile_link,
    profile_slug,
)

__all__ = [
    "CHECKLIST",
    "REMARKS",
    "ChecklistMode",
    "ChecklistRemarks",
    "DailyChecklist",
    "checklist_prompt",
    "general_chat_prompt",
    "specialised_chat_prompt",
    "DIAGNOSIS",
    "PROGRESS",
    "EvaluateQuiz",
    "GenerateQuiz",
    "QuizMode",
    "quiz_prompt",
    "PROFILE_BASE_URL",
    "ROSTER",
    "profile_link",
    "profile_slug",
]
