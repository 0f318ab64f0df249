"""
Professional roster and profile link rules.
"""
import re
from typing import Dict, Tuple

PROFILE_BASE_URL = "https://sanctomind.com/connect"

GENERAL_MENTAL_HEALTH = "General Mental Health"

# Category -> the two professionals the counsellor may refer to
ROSTER: Dict[str, Tuple[str, str]] = {
    GENERAL_MENTAL_HEALTH: ("Dr. Priya Sharma", "Dr. Amit Verma"),
    "Anxiety & Depression": ("Dr. Neha Singh", "Dr. Rahul Kapoor"),
    "OCD": ("Dr. Anjali Rao", "Dr. Karan Mehta"),
    "ADHD": ("Dr. Sameer Joshi", "Dr. Pooja Iyer"),
    "Bipolar Disorder": ("Dr. Alok Bhatt", "Dr. Nisha Malhotra"),
    "PTSD": ("Dr. Rekha Menon", "Dr. Tarun Chawla"),
}


def profile_slug(name: str) -> str:
    """
    Turn a professional's name into a URL slug.

    "Dr. Priya Sharma" -> "dr-priya-sharma"
    """
    slug = re.sub(r"[^\w\s-]", "", name.lower())
    return re.sub(r"\s+", "-", slug.strip())


def profile_link(name: str) -> str:
    """Full profile URL for a professional."""
    return f"{PROFILE_BASE_URL}/{profile_slug(name)}"


def render_roster() -> str:
    """Roster as the bullet list embedded in counsellor prompts."""
    return "\n".join(
        f"- {category}: {', '.join(professionals)}"
        for category, professionals in ROSTER.items()
    )
