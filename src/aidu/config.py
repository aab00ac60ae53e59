"""Configuration settings for the application."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Define base directory
BASE_DIR = Path(__file__).parent.parent.parent

# Load environment variables from .env file
env_file = ".env.test" if os.getenv("ENV") == "test" else ".env"
load_dotenv(env_file)


# Define data directories from environment variables
DATA_DIR = Path(os.getenv("DATA_DIR", "./data"))
MEDIA_DIR = DATA_DIR / "media"
PRONUNCIATIONS_DIR = MEDIA_DIR / "pronunciations"

# Progress document key in the blob table
STORAGE_KEY = "aidu-english-progress"

# Placeholder value shipped in example env files
GEMINI_PLACEHOLDER_KEY = "your-gemini-api-key-here"


def ensure_directories() -> None:
    """Ensure all required directories exist."""
    directories = [
        DATA_DIR,
        MEDIA_DIR,
        PRONUNCIATIONS_DIR,
    ]

    for directory in directories:
        directory.mkdir(parents=True, exist_ok=True)


@dataclass
class PathSettings:
    """Path configuration settings."""
    base_dir: Path = BASE_DIR
    data_dir: Path = DATA_DIR
    media_dir: Path = MEDIA_DIR
    pronunciations_dir: Path = PRONUNCIATIONS_DIR


@dataclass
class DatabaseSettings:
    """Database configuration settings."""
    url: str = os.getenv("DATABASE_URL", "sqlite:///aidu.db")
    echo: bool = os.getenv("DATABASE_ECHO", "false").lower() == "true"
    storage_key: str = STORAGE_KEY


@dataclass
class LoggingSettings:
    """Logging configuration settings."""
    level: str = os.getenv("LOG_LEVEL", "INFO")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    dir: Optional[str] = os.getenv("LOG_DIR", None)
    rotation: str = os.getenv("LOG_ROTATION", "midnight")
    interval: int = int(os.getenv("LOG_INTERVAL", "1"))
    backup_count: int = int(os.getenv("LOG_BACKUP_COUNT", "7"))


@dataclass
class AISettings:
    """Generative AI question source settings."""
    api_key: Optional[str] = os.getenv("GEMINI_API_KEY")
    model: str = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
    temperature: float = float(os.getenv("GEMINI_TEMPERATURE", "0.7"))

    @property
    def enabled(self) -> bool:
        return bool(self.api_key) and self.api_key != GEMINI_PLACEHOLDER_KEY


@dataclass
class LearningSettings:
    """Learning process settings."""
    pass_score: int = int(os.getenv("PASS_SCORE", "70"))
    vocab_question_count: int = int(os.getenv("VOCAB_QUESTION_COUNT", "10"))
    grammar_question_count: int = int(os.getenv("GRAMMAR_QUESTION_COUNT", "8"))
    reading_question_count: int = int(os.getenv("READING_QUESTION_COUNT", "5"))
    options_per_question: int = 4


@dataclass
class SpeechSettings:
    """Text-to-speech settings."""
    enabled: bool = os.getenv("SPEECH_ENABLED", "true").lower() == "true"
    slow: bool = os.getenv("SPEECH_RATE_SLOW", "false").lower() == "true"


@dataclass
class MonitoringSettings:
    """Prometheus exporter settings."""
    port: int = int(os.getenv("METRICS_PORT", "0"))


def get_path_settings() -> PathSettings:
    """Get path settings."""
    return PathSettings()


def get_database_settings() -> DatabaseSettings:
    """Get database settings."""
    return DatabaseSettings()


def get_logging_settings() -> LoggingSettings:
    """Get logging settings."""
    return LoggingSettings()


def get_ai_settings() -> AISettings:
    """Get AI settings."""
    return AISettings()


def get_learning_settings() -> LearningSettings:
    """Get learning settings."""
    return LearningSettings()


def get_speech_settings() -> SpeechSettings:
    """Get speech settings."""
    return SpeechSettings()


def get_monitoring_settings() -> MonitoringSettings:
    """Get monitoring settings."""
    return MonitoringSettings()


@dataclass
class Settings:
    """Main settings class that combines all configuration settings."""
    paths: PathSettings = field(default_factory=get_path_settings)
    database: DatabaseSettings = field(default_factory=get_database_settings)
    logging: LoggingSettings = field(default_factory=get_logging_settings)
    ai: AISettings = field(default_factory=get_ai_settings)
    learning: LearningSettings = field(default_factory=get_learning_settings)
    speech: SpeechSettings = field(default_factory=get_speech_settings)
    monitoring: MonitoringSettings = field(default_factory=get_monitoring_settings)

    def validate(self) -> None:
        """Validate settings and raise ValueError if invalid."""
        if self.learning.pass_score < 0 or self.learning.pass_score > 100:
            raise ValueError("PASS_SCORE must be between 0 and 100")

        for name in ("vocab_question_count", "grammar_question_count", "reading_question_count"):
            if getattr(self.learning, name) < 1:
                raise ValueError(f"{name.upper()} must be positive")

        if self.learning.options_per_question < 2:
            raise ValueError("A question needs at least two options")

        if self.monitoring.port < 0:
            raise ValueError("METRICS_PORT cannot be negative")


# Create global settings instance
settings = Settings()
settings.validate()
