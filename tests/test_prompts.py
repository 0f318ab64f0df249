"""
Tests for the roster, profile links and prompt templates.
"""
import pytest

from src.services.prompts import (
    PROFILE_BASE_URL,
    ROSTER,
    ChecklistRemarks,
    DailyChecklist,
    EvaluateQuiz,
    GenerateQuiz,
    checklist_prompt,
    general_chat_prompt,
    profile_link,
    profile_slug,
    quiz_prompt,
    specialised_chat_prompt,
)

ALL_PROFESSIONALS = [name for names in ROSTER.values() for name in names]


def test_roster_has_two_professionals_per_category():
    assert list(ROSTER) == [
        "General Mental Health",
        "Anxiety & Depression",
        "OCD",
        "ADHD",
        "Bipolar Disorder",
        "PTSD",
    ]
    assert all(len(names) == 2 for names in ROSTER.values())


def test_profile_slug():
    assert profile_slug("Dr. Priya Sharma") == "dr-priya-sharma"
    assert profile_slug("Dr. Nisha  Malhotra") == "dr-nisha-malhotra"


@pytest.mark.parametrize("name", ALL_PROFESSIONALS)
def test_every_professional_gets_a_lowercase_hyphenated_link(name):
    link = profile_link(name)
    slug = link[len(PROFILE_BASE_URL) + 1:]

    assert link.startswith(PROFILE_BASE_URL + "/")
    assert slug == slug.lower()
    assert " " not in slug
    assert slug.count("-") == len(name.split()) - 1


def test_general_chat_prompt_lists_roster_and_link_format():
    prompt = general_chat_prompt("I keep checking the door is locked")

    for category, names in ROSTER.items():
        assert f"- {category}: {names[0]}, {names[1]}" in prompt
    assert "https://sanctomind.com/connect/dr-priya-sharma" in prompt
    assert "Provide the name of the mental health condition." in prompt
    assert prompt.rstrip().endswith('"I keep checking the door is locked"')


def test_specialised_chat_prompt_uses_callers_condition():
    prompt = specialised_chat_prompt("Anxiety & Depression", "I feel low")

    assert "specializing in Anxiety & Depression" in prompt
    assert "general advice relevant to Anxiety & Depression" in prompt
    assert "Dr. Neha Singh, Dr. Rahul Kapoor" in prompt
    assert "Provide the name of the mental health condition." not in prompt


def test_quiz_generation_wording():
    progress = quiz_prompt(GenerateQuiz(type="progress", disorder="PTSD"))
    diagnosis = quiz_prompt(GenerateQuiz(type="diagnosis", disorder="PTSD"))

    assert "Generate 10 yes/no questions to track progress of PTSD." in progress
    assert "Generate 10 yes/no questions to diagnose PTSD." in diagnosis


@pytest.mark.parametrize(
    "quiz_type, disorder, lists_conditions",
    [
        ("diagnosis", "General Mental Health", True),
        ("diagnosis", "general mental health", True),
        ("progress", "General Mental Health", False),
        ("diagnosis", "OCD", False),
    ],
)
def test_possible_conditions_only_for_general_diagnosis(quiz_type, disorder, lists_conditions):
    prompt = quiz_prompt(EvaluateQuiz(type=quiz_type, disorder=disorder, answers={"Q1": "yes"}))

    assert '"Your score is X/100."' in prompt
    assert '"Recommendation: [your advice here]"' in prompt
    assert ("Possible conditions" in prompt) is lists_conditions


def test_remarks_branches_on_completion():
    done = checklist_prompt(ChecklistRemarks(disorder="ADHD", completed=3, total=3))
    partial = checklist_prompt(ChecklistRemarks(disorder="ADHD", completed=1, total=3))

    assert "completed all 3 tasks for ADHD" in done
    assert "completed 1 out of 3 tasks for ADHD" in partial
    assert "try again tomorrow" in partial


def test_daily_checklist_prompt():
    prompt = checklist_prompt(DailyChecklist(disorder="PTSD"))

    assert "checklist of 5 daily tasks to help manage PTSD" in prompt
    assert "numbered list" in prompt
