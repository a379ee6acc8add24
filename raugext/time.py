"""Timing processors: metronome and exponential decay envelope."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .env import ProcEnv

__all__ = ["Metro", "DecayEnv"]


@dataclass
class Metro:
    """Emits ``True`` once every ``period`` seconds."""

    period: float = 0.0
    reset: bool = False
    last_time: float = 0.0
    next_time: float = 0.0
    time: float = 0.0

    def process(
        self,
        env: ProcEnv,
        period: Optional[float] = None,
        reset: Optional[bool] = None,
    ) -> bool:
        """Advance one sample; return whether a tick occurs on it."""
        period = self.period if period is None else period
        reset = self.reset if reset is None else reset

        if reset:
            self.last_time = 0.0
            self.next_time = 0.0
            self.time = 0.0

        if self.time >= self.next_time:
            self.last_time = self.time
            self.next_time = self.time + period * env.sample_rate
            out = True
        else:
            out = False

        self.time += 1.0
        return out


@dataclass
class DecayEnv:
    """Envelope that jumps to 1 on a rising trigger and decays with time constant ``tau``."""

    tau: float = 0.0
    trig: bool = False
    last_trig: bool = False
    value: float = 0.0
    time: float = 0.0

    def process(
        self,
        env: ProcEnv,
        trig: Optional[bool] = None,
        tau: Optional[float] = None,
    ) -> float:
        """Advance one sample and return the envelope value."""
        trig = self.trig if trig is None else trig
        tau = self.tau if tau is None else tau
        tau = tau if tau > 0.0 or math.isnan(tau) else 0.0

        if trig and not self.last_trig:
            self.value = 1.0
            self.time = 0.0
        elif self.value > 0.0:
            self.time += 1.0 / env.sample_rate
            rate = math.inf if tau == 0.0 else 1.0 / tau
            self.value = math.exp(-rate * self.time)

        self.last_trig = trig
        self.value = min(max(self.value, 0.0), 1.0)
        return self.value