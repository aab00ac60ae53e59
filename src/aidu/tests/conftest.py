"""Test configuration."""
import os
from pathlib import Path
from typing import Callable, Generator

import pytest
from dotenv import load_dotenv

# Set test environment before any imports
os.environ["ENV"] = "test"
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SPEECH_ENABLED", "false")
os.environ.pop("GEMINI_API_KEY", None)

# Load test environment variables
test_env_path = Path(__file__).parent.parent.parent.parent / ".env.test"
load_dotenv(test_env_path)

# Import after environment setup
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from aidu.models.base import init_db
from aidu.services.curriculum_service import CurriculumService
from aidu.services.progress_store import ProgressStore


@pytest.fixture
def session_factory(tmp_path: Path) -> Generator[Callable[[], Session], None, None]:
    """A session factory bound to a fresh SQLite file for each test."""
    engine = create_engine(f"sqlite:///{tmp_path / 'aidu-test.db'}")
    init_db(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def store(session_factory: Callable[[], Session]) -> ProgressStore:
    """Create a progress store instance."""
    return ProgressStore(session_factory)


@pytest.fixture
def curriculum() -> CurriculumService:
    return CurriculumService()
