"""Oscillator processors: phase ramp, sine, noise and band-limited saw."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Optional

from .env import ProcEnv

__all__ = [
    "PhaseAccumulator",
    "SineOscillator",
    "NoiseOscillator",
    "BlSawOscillator",
]

_U32 = 2**32
_TAU = 2.0 * math.pi


def _fmod(x: float, y: float) -> float:
    """Remainder with the sign of ``x``; NaN where it is undefined."""
    if not math.isfinite(x) or y == 0.0 or math.isnan(y):
        return math.nan
    return math.fmod(x, y)


@dataclass
class PhaseAccumulator:
    """Ramp that outputs the sample count multiplied by ``increment``."""

    increment: float = 0.0
    reset: bool = False
    t: int = 0

    def process(
        self, increment: Optional[float] = None, reset: Optional[bool] = None
    ) -> float:
        """Emit the current phase, then advance or reset the counter."""
        increment = self.increment if increment is None else increment
        reset = self.reset if reset is None else reset
        out = float(self.t) * increment
        self.t = 0 if reset else (self.t + 1) % _U32
        return out


@dataclass
class SineOscillator:
    """Sine oscillator with phase offset and reset."""

    frequency: float = 0.0
    phase: float = 0.0
    reset: bool = False
    t: float = 0.0

    def process(
        self,
        env: ProcEnv,
        frequency: Optional[float] = None,
        phase: Optional[float] = None,
        reset: Optional[bool] = None,
    ) -> float:
        """Emit one sample and advance the phase by one sample period."""
        frequency = self.frequency if frequency is None else frequency
        phase = self.phase if phase is None else phase
        reset = self.reset if reset is None else reset

        out = math.sin(self.t + phase)
        step = frequency / env.sample_rate * _TAU
        self.t = 0.0 if reset else self.t + step
        self.t = _fmod(self.t, _TAU)
        return out


@dataclass
class NoiseOscillator:
    """White noise uniformly distributed in ``[0, 1)``."""

    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def process(self) -> float:
        """Emit one random sample."""
        return self.rng.random()


@dataclass
class BlSawOscillator:
    """Band-limited sawtooth built from a leaky-integrated sinc train."""

    frequency: float = 440.0
    p: float = 0.0
    dp: float = 1.0
    saw: float = 0.0

    def process(self, env: ProcEnv, frequency: Optional[float] = None) -> float:
        """Emit one sample; non-positive frequencies produce silence."""
        frequency = self.frequency if frequency is None else frequency
        if frequency <= 0.0:
            return 0.0

        pmax = 0.5 * env.sample_rate / frequency
        dc = -0.498 / pmax

        self.p += self.dp
        if self.p < 0.0:
            self.p = -self.p
            self.dp = -self.dp
        elif self.p > pmax:
            self.p = 2.0 * pmax - self.p
            self.dp = -self.dp

        x = max(math.pi * self.p, 0.00001)
        self.saw = 0.995 * self.saw + dc + math.sin(x) / x
        return self.saw