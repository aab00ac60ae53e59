"""Tests for the speech service."""
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from aidu.services.speech_service import SpeechService


@pytest.fixture
def speech(tmp_path: Path) -> SpeechService:
    return SpeechService(output_dir=tmp_path, enabled=True)


def test_synthesize_english(speech: SpeechService, tmp_path: Path) -> None:
    """Test generating an American English pronunciation."""
    with patch("aidu.services.speech_service.gTTS") as mock_gtts:
        path = speech.synthesize("wake up")

    mock_gtts.assert_called_once_with(text="wake up", lang="en", tld="com", slow=False)
    mock_gtts.return_value.save.assert_called_once_with(str(tmp_path / "en-US_wake_up.mp3"))
    assert path == tmp_path / "en-US_wake_up.mp3"


@pytest.mark.parametrize(
    "locale, lang, tld",
    [("en-GB", "en", "co.uk"), ("ko-KR", "ko", "com"), ("fr-FR", "en", "com")],
)
def test_synthesize_locales(speech: SpeechService, locale: str, lang: str, tld: str) -> None:
    """Test the accent chosen for each locale."""
    with patch("aidu.services.speech_service.gTTS") as mock_gtts:
        speech.synthesize("hello", locale)

    assert mock_gtts.call_args.kwargs["lang"] == lang
    assert mock_gtts.call_args.kwargs["tld"] == tld


def test_synthesize_reuses_existing_file(speech: SpeechService, tmp_path: Path) -> None:
    """Test that existing audio files are not generated again."""
    existing = tmp_path / "en-US_school.mp3"
    existing.write_bytes(b"mp3")

    with patch("aidu.services.speech_service.gTTS") as mock_gtts:
        path = speech.synthesize("school")

    mock_gtts.assert_not_called()
    assert path == existing


def test_synthesize_failure_returns_none(speech: SpeechService) -> None:
    """Test that speech errors are never raised."""
    with patch("aidu.services.speech_service.gTTS", side_effect=RuntimeError("no network")):
        assert speech.synthesize("school") is None


def test_disabled_speech_does_nothing(tmp_path: Path) -> None:
    """Test that disabled speech skips synthesis."""
    speech = SpeechService(output_dir=tmp_path, enabled=False)

    with patch("aidu.services.speech_service.gTTS") as mock_gtts, \
            patch("aidu.services.speech_service.threading.Thread") as mock_thread:
        assert speech.synthesize("school") is None
        speech.speak_english("school")

    mock_gtts.assert_not_called()
    mock_thread.assert_not_called()


def test_speak_runs_in_background(speech: SpeechService) -> None:
    """Test that speaking starts a daemon thread and returns."""
    with patch("aidu.services.speech_service.threading.Thread") as mock_thread:
        mock_thread.return_value = MagicMock()
        speech.speak_korean("학교")

    mock_thread.assert_called_once_with(target=speech.synthesize, args=("학교", "ko-KR"), daemon=True)
    mock_thread.return_value.start.assert_called_once()


def test_sanitize_filename() -> None:
    """Test filename sanitization."""
    assert SpeechService._sanitize_filename("Get ready for!") == "get_ready_for_"
