"""Static metadata describing the console quiz."""

APP_NAME = "Quiz Console"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Quiz Console is a terminal quiz runner. Pick a category or a mixed set, "
    "answer multiple-choice questions, and review your grade, history and statistics."
)

HELP_TEXT = (
    "1. START NEW QUIZ\n"
    "   - Enter your name\n"
    "   - Choose a category or Mixed for random questions\n"
    "   - Select the number of questions\n"
    "   - Answer each question by typing its letter (A, B, C, ...)\n"
    "\n"
    "2. SCORING SYSTEM\n"
    "   - Each question has its own point value\n"
    "   - Easy questions: 1-5 points\n"
    "   - Medium questions: 6-10 points\n"
    "   - Hard questions: 11-20 points\n"
    "\n"
    "3. GRADING SCALE\n"
    "   - A+: 90-100%  - A: 80-89%  - B: 70-79%\n"
    "   - C: 60-69%    - D: 50-59%  - F: Below 50%\n"
    "\n"
    "4. FEATURES\n"
    "   - Quiz History: track all attempts of this session\n"
    "   - Statistics: question bank and performance analytics\n"
    "   - Search: find questions by keyword\n"
    "   - Practice Mode: study answers without scoring"
)
