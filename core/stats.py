"""In-memory drill statistics."""

from .interfaces import StatsSink


class SessionStats(StatsSink):
    """Tracks score and per-character results for one drill session."""

    def __init__(self):
        self.score = 0
        self.correct_answers = 0
        self.wrong_answers = 0
        self.character_history = []  # Characters answered correctly, in order
        self.correct_answer_times = []  # Seconds per correct answer
        # {character: {correct: int, wrong: int}}
        self.character_scores = {}

    def _character(self, key: str) -> dict:
        if key not in self.character_scores:
            self.character_scores[key] = {'correct': 0, 'wrong': 0}
        return self.character_scores[key]

    def record_correct(self, key: str, answer_seconds: float | None = None) -> None:
        self.score += 1
        self.correct_answers += 1
        self.character_history.append(key)
        if answer_seconds is not None:
            self.correct_answer_times.append(answer_seconds)
        self._character(key)['correct'] += 1

    def record_wrong(self, key: str) -> None:
        # Score never drops below zero
        self.score = max(self.score - 1, 0)
        self.wrong_answers += 1
        self._character(key)['wrong'] += 1

    def get_average_answer_time(self) -> float | None:
        if not self.correct_answer_times:
            return None
        return sum(self.correct_answer_times) / len(self.correct_answer_times)

    def get_accuracy_display(self) -> str:
        """Success percentage, e.g. "75%"."""
        total = self.correct_answers + self.wrong_answers
        if total == 0:
            return "0%"
        return f"{round(self.correct_answers / total * 100)}%"

    def to_dict(self) -> dict:
        return {
            'score': self.score,
            'correct_answers': self.correct_answers,
            'wrong_answers': self.wrong_answers,
            'character_history': list(self.character_history),
            'average_answer_time': self.get_average_answer_time(),
            'character_scores': {k: dict(v) for k, v in self.character_scores.items()},
            'accuracy_display': self.get_accuracy_display()
        }
