"""Processing environment and the base error raised by processors."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ProcEnv", "ProcessorError"]


@dataclass(frozen=True)
class ProcEnv:
    """Per-call information handed to processors that depend on timing."""

    sample_rate: float
    block_size: int = 1

    @property
    def sample_period(self) -> float:
        """Duration of one sample in seconds."""
        return 1.0 / self.sample_rate


class ProcessorError(Exception):
    """Raised when a processor fails to produce its outputs."""

    def __init__(self, error: object) -> None:
        super().__init__(str(error))
        self.error = error