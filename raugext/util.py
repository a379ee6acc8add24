"""Utility processors: casts, optional values, latches, random choice and channels."""

from __future__ import annotations

import math
import random
import weakref
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Deque, Generic, Optional, Sequence, Tuple, TypeVar, Union

import numpy as np

from .env import ProcEnv, ProcessorError

__all__ = [
    "SignalKind",
    "ChannelError",
    "cast",
    "sample_rate",
    "unwrap_or",
    "some",
    "Message",
    "Register",
    "SampleAndHold",
    "RandomChoice",
    "Tx",
    "Rx",
    "signal_channel",
]

T = TypeVar("T")

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class SignalKind(Enum):
    """Numeric signal types that values can be cast between."""

    F32 = "f32"
    F64 = "f64"
    I64 = "i64"


class ChannelError(ProcessorError):
    """Raised when a signal channel cannot deliver a message."""


def _saturate_i64(value: float) -> int:
    if math.isnan(value):
        return 0
    if value >= 2.0**63:
        return _I64_MAX
    if value <= -(2.0**63):
        return _I64_MIN
    return math.trunc(value)


def cast(value: Union[int, float], to: Union[SignalKind, str]) -> Union[int, float]:
    """Convert ``value`` to the numeric kind ``to``.

    Integers convert only to f32; floats convert to f32, f64 or i64 (truncating
    and saturating, with NaN becoming 0).
    """
    kind = SignalKind(to)
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("booleans cannot be cast")
    if isinstance(value, (int, np.integer)):
        if kind is not SignalKind.F32:
            raise TypeError(f"cannot cast i64 to {kind.value}")
        return float(np.float32(int(value)))
    if isinstance(value, (float, np.floating)):
        number = float(value)
        if kind is SignalKind.F32:
            with np.errstate(all="ignore"):
                return float(np.float32(number))
        if kind is SignalKind.F64:
            return number
        return _saturate_i64(number)
    raise TypeError(f"cannot cast {type(value).__name__}")


def sample_rate(env: ProcEnv) -> float:
    """The sample rate of the processing environment."""
    return env.sample_rate


def unwrap_or(a: Optional[T], b: T) -> T:
    """``a`` if present, else ``b``."""
    return b if a is None else a


def some(a: T) -> Optional[T]:
    """Wrap ``a`` as a present optional value."""
    return a


@dataclass
class Message(Generic[T]):
    """Emits the last received message whenever triggered."""

    last_message: T
    trig: bool = False
    message: Optional[T] = None

    def process(
        self, trig: Optional[bool] = None, message: Optional[T] = None
    ) -> Optional[T]:
        """Store a new message if given; return the stored one when triggered."""
        trig = self.trig if trig is None else trig
        message = self.message if message is None else message
        if message is not None:
            self.last_message = message
        return self.last_message if trig else None


@dataclass
class Register(Generic[T]):
    """Holds the last set value until cleared."""

    last_value: Optional[T] = None
    set: Optional[T] = None
    clear: bool = False

    def process(self, set: Optional[T] = None, clear: Optional[bool] = None) -> Optional[T]:
        """Update the held value and return it."""
        set = self.set if set is None else set
        clear = self.clear if clear is None else clear
        if set is not None:
            self.last_value = set
        if clear:
            self.last_value = None
        return self.last_value


@dataclass
class SampleAndHold(Generic[T]):
    """Captures its input when triggered and holds it otherwise."""

    last_value: Any = 0.0
    input: Any = 0.0
    trig: bool = False

    def process(self, input: Optional[T] = None, trig: Optional[bool] = None) -> T:
        """Capture ``input`` on trigger and return the held value."""
        input = self.input if input is None else input
        trig = self.trig if trig is None else trig
        if trig:
            self.last_value = input
        return self.last_value


@dataclass
class RandomChoice(Generic[T]):
    """Picks a random option on each trigger and holds it."""

    state: Optional[T] = None
    trig: bool = False
    options: Sequence[T] = ()
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def process(
        self, trig: Optional[bool] = None, options: Optional[Sequence[T]] = None
    ) -> Optional[T]:
        """Choose a new option when triggered; empty options give ``None``."""
        trig = self.trig if trig is None else trig
        options = self.options if options is None else options
        if trig:
            self.state = self.rng.choice(options) if len(options) else None
        return self.state


class Rx(Generic[T]):
    """Receiving end of a signal channel."""

    def __init__(self, queue: Deque[T], default: T) -> None:
        self._queue = queue
        self.default = default

    def process(self) -> T:
        """Return the oldest pending value, or the default when none is pending."""
        try:
            return self._queue.popleft()
        except IndexError:
            return self.default


class Tx(Generic[T]):
    """Sending end of a signal channel."""

    def __init__(self, queue: Deque[T], receiver: Rx[T], input: T) -> None:
        self._queue = queue
        self._receiver = weakref.ref(receiver)
        self.input = input

    def process(self, input: Optional[T] = None) -> None:
        """Send a value; raises ChannelError once the receiver is gone."""
        value = self.input if input is None else input
        if self._receiver() is None:
            raise ChannelError("Failed to send message")
        self._queue.append(value)


def signal_channel(default: T) -> Tuple[Tx[T], Rx[T]]:
    """Create a connected, unbounded sender/receiver pair."""
    queue: Deque[T] = deque()
    rx = Rx(queue, default)
    tx = Tx(queue, rx, default)
    return tx, rx