from __future__ import annotations
from dataclasses import dataclass
import logging
import random
from typing import Optional

from app.config import Settings
from app.timer import Timer
from app.validation import sanitize_input
from services.text_generator import GeneratorKind, TextGenerator, make_generator
from services.typing_engine import TypingSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LiveStats:
    accuracy: float
    wpm: int
    elapsed: float
    complete: bool


@dataclass(frozen=True)
class SessionResult:
    wpm: int
    accuracy: float
    elapsed: float
    correct_chars: int
    total_chars: int
    generator: GeneratorKind


class PracticeController:
    """
    Owns one generator, one TypingSession and one Timer for a practice run.

    The plain operations (generate_text, start_session, update_input, ...)
    map one-to-one onto the session/timer. new_test/feed/tick/finish layer the
    run flow on top: text is generated up front, timing starts with the first
    keystroke, and the run completes on full length or on the time limit.
    """

    def __init__(self, settings: Optional[Settings] = None, rng: Optional[random.Random] = None,
                 timer: Optional[Timer] = None):
        self.settings = settings or Settings()
        self._rng = rng
        self.session = TypingSession()
        self.timer = timer or Timer()
        self._kind = GeneratorKind.RANDOM_WORDS
        self.generator: Optional[TextGenerator] = None
        self.set_generator_variant(self.settings.default_generator)
        self._pending = ""
        self._started = False
        self._finished = False

    # ---------------- core operations ----------------
    @property
    def kind(self) -> GeneratorKind:
        return self._kind

    def set_generator_variant(self, kind):
        generator = make_generator(kind, self._rng)
        self._kind = generator.kind
        self.generator = generator

    def generate_text(self, count) -> str:
        return self.generator.generate_text(count)

    def start_session(self, text: str):
        self.session.start_session(text)
        self.timer.start()
        logger.debug("Session started, %d target chars", len(self.session.target_text))

    def update_input(self, text: str):
        self.session.update_input(text)

    def get_accuracy(self) -> float:
        return self.session.accuracy()

    def get_wpm(self, elapsed_seconds: float) -> int:
        return self.session.wpm(elapsed_seconds)

    def reset_session(self):
        self.session.reset()
        self.timer.stop()

    def get_elapsed_seconds(self) -> float:
        return self.timer.elapsed_seconds()

    # ---------------- run flow ----------------
    @property
    def target_text(self) -> str:
        return self.session.target_text if self._started else self._pending

    @property
    def started(self) -> bool:
        return self._started

    @property
    def finished(self) -> bool:
        return self._finished

    def default_count(self, kind: Optional[GeneratorKind] = None) -> int:
        return self.settings.count_for(self._kind if kind is None else kind)

    def new_test(self, kind=None) -> str:
        if kind is not None:
            self.set_generator_variant(kind)
        self.reset_session()
        self._pending = self.generate_text(self.default_count())
        self._started = False
        self._finished = False
        return self._pending

    def restart(self) -> str:
        return self.new_test()

    def feed(self, typed: str) -> LiveStats:
        if self._finished:
            return self.stats()
        typed = sanitize_input(typed)
        if not self._started:
            if not typed:
                return self.stats()
            self.start_session(self._pending)
            self._started = True
        self.update_input(typed)
        return self.stats()

    def tick(self) -> LiveStats:
        return self.stats()

    def stats(self) -> LiveStats:
        # the timer still holds the previous run until the first keystroke
        elapsed = self.get_elapsed_seconds() if self._started else 0.0
        return LiveStats(
            accuracy=self.get_accuracy(),
            wpm=self.get_wpm(elapsed),
            elapsed=elapsed,
            complete=self._finished or self._is_complete(elapsed),
        )

    def _is_complete(self, elapsed: float) -> bool:
        if not self._started:
            return False
        target = self.session.target_text
        if len(self.session.user_input) >= len(target):
            return True
        limit = self.settings.time_limit_seconds
        return limit > 0 and elapsed >= limit

    def finish(self) -> SessionResult:
        self.timer.stop()
        self._finished = True
        if not self._started:
            result = SessionResult(0, 100.0, 0.0, 0, 0, self._kind)
        else:
            elapsed = self.get_elapsed_seconds()
            result = SessionResult(
                wpm=self.get_wpm(elapsed),
                accuracy=round(self.get_accuracy(), 1),
                elapsed=round(elapsed, 1),
                correct_chars=self.session.correct_chars,
                total_chars=self.session.total_chars,
                generator=self._kind,
            )
        logger.info("Run finished: %d WPM, %.1f%% accuracy, %.1fs (%s)",
                    result.wpm, result.accuracy, result.elapsed, self._kind.label)
        return result
