"""Bootstrap badge styles for tier labels."""

BADGE_CLASSES = {
    "Untrained": "badge bg-secondary",
    "Beginner": "badge bg-warning",
    "Intermediate": "badge bg-primary",
    "Advanced": "badge bg-info",
    "Elite": "badge bg-success",
    "Freak": "badge bg-danger",
}

DEFAULT_BADGE_CLASS = "badge bg-dark"


def badge_class(label: str) -> str:
    """Get the badge CSS classes for a label (unknown labels get the dark badge)."""
    return BADGE_CLASSES.get(label, DEFAULT_BADGE_CLASS)
