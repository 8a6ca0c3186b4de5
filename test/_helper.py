"""
Shared helpers: scripted console input/output and Prometheus sample lookup.
"""
from prometheus_client import REGISTRY


class ScriptedInput:
    """Feeds answers to input(); raises EOFError once exhausted, like a closed stdin."""

    def __init__(self, *answers: str) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._answers)


class CapturedOutput:
    def __init__(self) -> None:
        self.lines: list[str] = []

    def __call__(self, text: str = "") -> None:
        self.lines.extend(str(text).split("\n"))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def sample(name: str, labels: dict[str, str] | None = None) -> float:
    """Current value of a metric sample, 0.0 if it was never incremented."""
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0
