"""Text-to-speech playback using gTTS."""
import logging
import re
import threading
from pathlib import Path
from typing import Dict, Optional, Tuple

from gtts import gTTS

from aidu.config import settings

logger = logging.getLogger(__name__)

# Browser-style locale -> (gTTS language, Google top-level domain for the accent)
LOCALES: Dict[str, Tuple[str, str]] = {
    "en-US": ("en", "com"),
    "en-GB": ("en", "co.uk"),
    "ko-KR": ("ko", "com"),
}


class SpeechService:
    """Fire-and-forget pronunciation of words and sentences."""

    def __init__(
        self,
        output_dir: Optional[Path] = None,
        enabled: bool = settings.speech.enabled,
        slow: bool = settings.speech.slow,
    ):
        self.output_dir = Path(output_dir or settings.paths.pronunciations_dir)
        self.enabled = enabled
        self.slow = slow

    def synthesize(self, text: str, locale: str = "en-US") -> Optional[Path]:
        """Write an MP3 for the text and return its path; None on any failure."""
        if not self.enabled or not text.strip():
            return None

        lang, tld = LOCALES.get(locale, LOCALES["en-US"])
        path = self.output_dir / f"{locale}_{self._sanitize_filename(text)}.mp3"
        if path.exists():
            return path

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            tts = gTTS(text=text, lang=lang, tld=tld, slow=self.slow)
            tts.save(str(path))
            logger.info(f"Pronunciation generated for: {text}, file: {path.name}")
            return path
        except Exception as e:
            logger.error(f"Error generating pronunciation for: {text}, error: {e}")
            return None

    def speak(self, text: str, locale: str = "en-US") -> None:
        """Start synthesis in the background; nothing is returned or awaited."""
        if not self.enabled:
            return
        thread = threading.Thread(target=self.synthesize, args=(text, locale), daemon=True)
        thread.start()

    def speak_english(self, text: str) -> None:
        self.speak(text, "en-US")

    def speak_english_uk(self, text: str) -> None:
        self.speak(text, "en-GB")

    def speak_korean(self, text: str) -> None:
        self.speak(text, "ko-KR")

    @staticmethod
    def _sanitize_filename(text: str) -> str:
        """Sanitize text for use in a filename."""
        # Replace any non-word characters with underscore
        return re.sub(r"[^\w]", "_", text.lower())[:80]
