"""Quiz-related constants shared across console and core layers."""

MIXED_CATEGORY: str = "Mixed"
DEFAULT_PLAYER_NAME: str = "Anonymous"
DEFAULT_QUESTION_POINTS: int = 10
PRACTICE_QUESTION_COUNT: int = 5
INVALID_ANSWER_TEXT: str = "Invalid answer index"

# Inclusive point bands per difficulty tier.
DIFFICULTY_BANDS: dict[str, tuple[int, int]] = {
    "easy": (1, 5),
    "medium": (6, 10),
    "hard": (11, 20),
}

# Sorted top-down; the first band whose lower bound is met wins.
GRADE_THRESHOLDS: tuple[tuple[float, str, str], ...] = (
    (90.0, "A+", "Excellent! Outstanding performance!"),
    (80.0, "A", "Great job! Very good performance!"),
    (70.0, "B", "Good work! Above average performance!"),
    (60.0, "C", "Fair performance. Keep practicing!"),
    (50.0, "D", "Below average. More study needed."),
)
FAILING_GRADE: str = "F"
FAILING_MESSAGE: str = "Poor performance. Please review the material."

REPORT_WIDTH: int = 60
QUESTION_PREVIEW_LIMIT: int = 50
REPORT_TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S"
