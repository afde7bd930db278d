"""Abstract base classes for dependency injection."""

from abc import ABC, abstractmethod


class StatsSink(ABC):
    """Abstract base class for recording drill outcomes.

    The scheduler never reads from a sink; it is for display only.
    """

    @abstractmethod
    def record_correct(self, key: str, answer_seconds: float | None = None) -> None:
        """Record a correct answer for a character."""
        pass

    @abstractmethod
    def record_wrong(self, key: str) -> None:
        """Record a wrong answer for a character."""
        pass

    @abstractmethod
    def to_dict(self) -> dict:
        """Snapshot of the recorded stats."""
        pass
