"""
Daily checklist prompts: task generation and completion remarks.
"""
from dataclasses import dataclass
from typing import Union

CHECKLIST = "checklist"
REMARKS = "remarks"

TASK_COUNT = 5


@dataclass(frozen=True)
class DailyChecklist:
    disorder: str


@dataclass(frozen=True)
class ChecklistRemarks:
    disorder: str
    completed: int
    total: int

    @property
    def all_done(self) -> bool:
        return self.completed == self.total


ChecklistMode = Union[DailyChecklist, ChecklistRemarks]


def daily_checklist_prompt(mode: DailyChecklist) -> str:
    return (
        f"Provide a checklist of {TASK_COUNT} daily tasks to help manage {mode.disorder}.\n"
        "Keep them short, practical, and empathetic. Return only the tasks in numbered list."
    )


def remarks_prompt(mode: ChecklistRemarks) -> str:
    if mode.all_done:
        return (
            f"The user has successfully completed all {mode.total} tasks for {mode.disorder}.\n"
            "Write an empathetic and encouraging remark that motivates them to keep going."
        )
    return (
        f"The user completed {mode.completed} out of {mode.total} tasks for {mode.disorder}.\n"
        "Write a supportive remark: explain kindly why finishing all tasks is important,\n"
        "mention possible consequences of missing tasks, and motivate them to try again tomorrow."
    )


def checklist_prompt(mode: ChecklistMode) -> str:
    """Render the prompt for either checklist mode."""
    if isinstance(mode, ChecklistRemarks):
        return remarks_prompt(mode)
    if isinstance(mode, DailyChecklist):
        return daily_checklist_prompt(mode)
    raise TypeError(f"Unknown checklist mode: {type(mode).__name__}")
