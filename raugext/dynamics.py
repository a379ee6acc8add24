"""Dynamics processors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = ["PeakLimiter"]


@dataclass
class PeakLimiter:
    """Peak limiter with a decaying envelope and smoothed gain."""

    threshold: float = 0.988_553_1  # -0.1 dBFS
    attack: float = 0.9
    release: float = 0.9995
    input: float = 0.0
    gain: float = 1.0
    envelope: float = 0.0

    def process(
        self,
        input: Optional[float] = None,
        threshold: Optional[float] = None,
        attack: Optional[float] = None,
        release: Optional[float] = None,
    ) -> float:
        """Process one sample; omitted inputs use the stored defaults."""
        x = self.input if input is None else input
        threshold = self.threshold if threshold is None else threshold
        attack = self.attack if attack is None else attack
        release = self.release if release is None else release

        self.envelope = max(abs(x), self.envelope * release)
        target_gain = threshold / self.envelope if self.envelope > threshold else 1.0
        self.gain = self.gain * attack + target_gain * (1.0 - attack)
        return x * self.gain