"""Monitoring configuration for the application."""
from prometheus_client import Counter, Histogram, start_http_server

# Session metrics
study_sessions = Counter(
    "aidu_study_sessions_total",
    "Total number of flashcard and quiz sessions started",
    ["area"],
)

sets_completed = Counter(
    "aidu_sets_completed_total",
    "Total number of problem sets completed",
    ["area"],
)

quiz_scores = Histogram(
    "aidu_quiz_score",
    "Distribution of quiz scores",
    ["area"],
    buckets=[20, 40, 60, 70, 80, 90, 100],
)

quiz_duration = Histogram(
    "aidu_quiz_duration_seconds",
    "Time spent on a quiz in seconds",
    ["area"],
    buckets=[30, 60, 120, 300, 600, 1200],
)

# Flashcard metrics
words_marked = Counter(
    "aidu_flashcard_marks_total",
    "Total number of flashcard words marked",
    ["outcome"],
)

# Question source metrics
questions_generated = Counter(
    "aidu_questions_generated_total",
    "Total number of questions produced by question sources",
    ["source"],
)

question_source_fallbacks = Counter(
    "aidu_question_source_fallbacks_total",
    "Total number of times the AI question source fell back to static questions",
    ["reason"],
)

# Storage metrics
progress_saves = Counter(
    "aidu_progress_saves_total",
    "Total number of progress document writes",
)

storage_errors = Counter(
    "aidu_storage_errors_total",
    "Total number of progress storage errors",
    ["error_type"],
)


def start_monitoring(port: int = 9090) -> None:
    """Start the Prometheus metrics server."""
    start_http_server(port)
