# raugext

Small, per-sample signal processors for audio work in Python: maths and
comparison operations, a peak limiter, oscillators, a metronome and decay
envelope, WAV sample playback, and utilities for casting, holding,
choosing and passing values.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## How it is organised

Stateless operations are plain functions. Stateful processors are
dataclasses (or, for channels, small classes) that are called once per
sample through their `process` method. Every input of `process` may be
omitted; an omitted input falls back to the field of the same name stored
on the processor. Processors that depend on the sample rate take a
`ProcEnv`.

| Module                 | Contents |
|------------------------|----------|
| `raugext.env`          | `ProcEnv` (sample rate, block size, `sample_period`), `ProcessorError` |
| `raugext.math`         | `powf`, `powi`, `sqrt`, `cbrt`, `exp`, `exp2`, `ln`, `log`, `log2`, `log10`, `sin`, `cos`, `tan`, `asin`, `acos`, `atan`, `atan2`, `hypot`, `sinh`, `cosh`, `tanh`, `asinh`, `acosh`, `atanh`, `abs_`, `signum`, `floor`, `ceil`, `round_`, `trunc`, `fract`, `recip`, `max_`, `min_`, `clamp`, `lerp`, `smooth_step` |
| `raugext.control`      | `cond`, `gt`, `lt`, `ge`, `le`, `eq`, `ne` |
| `raugext.lists`        | `get`, `ListError` |
| `raugext.dynamics`     | `PeakLimiter` |
| `raugext.oscillators`  | `PhaseAccumulator`, `SineOscillator`, `NoiseOscillator`, `BlSawOscillator` |
| `raugext.storage`      | `Sample` |
| `raugext.time`         | `Metro`, `DecayEnv` |
| `raugext.util`         | `SignalKind`, `cast`, `sample_rate`, `some`, `unwrap_or`, `Message`, `Register`, `SampleAndHold`, `RandomChoice`, `Tx`, `Rx`, `signal_channel`, `ChannelError` |

### Maths

The floating-point functions in `raugext.math` compute in single
precision and return Python floats. Invalid arguments give NaN or an
infinity rather than raising (for example `sqrt(-1.0)` is NaN and
`recip(0.0)` is infinite). `round_` rounds halves away from zero,
`fract(a)` is `a - trunc(a)`, `signum` returns `1.0` or `-1.0` following
the sign bit, and `powi` takes an integer exponent that wraps to 32 bits.
`max_`, `min_` and `clamp` work on any ordered values.

### Lists

`raugext.lists.get(items, index)` returns `items[index]`; a negative or
too large index raises `ListError`, which is both a `ProcessorError` and
an `IndexError`.

### Casting

`raugext.util.cast(value, to)` converts between the kinds of
`SignalKind` (`"f32"`, `"f64"`, `"i64"`). Integers convert only to f32.
Floats convert to f32, f64 or i64; the conversion to i64 truncates,
saturates at the 64-bit limits and turns NaN into 0. Booleans and other
types raise `TypeError`.

## Example

A sine tone that is retriggered by a metronome, shaped by a decay
envelope and passed through a peak limiter:

```python
from raugext.env import ProcEnv
from raugext.oscillators import SineOscillator
from raugext.time import Metro, DecayEnv
from raugext.dynamics import PeakLimiter

env = ProcEnv(sample_rate=48_000.0)
osc = SineOscillator()
metro = Metro()
decay = DecayEnv()
limiter = PeakLimiter()

samples = []
for _ in range(48_000):
    trig = metro.process(env, period=0.25, reset=False)
    level = decay.process(env, trig=trig, tau=0.05)
    tone = osc.process(env, frequency=440.0, phase=0.0, reset=False)
    samples.append(limiter.process(tone * level, 0.98, 0.9, 0.9995))
```

`PeakLimiter()` defaults to a threshold of about -0.1 dBFS, an attack
coefficient of 0.9 and a release coefficient of 0.9995.
`NoiseOscillator` draws from its `rng` field, so a seeded
`random.Random` makes its output repeatable; `RandomChoice` does the same.

## Sample playback

`Sample.load(path)` reads the first channel of a WAV file holding 8 to 32
bit integer PCM or 32-bit float samples. Integer samples are divided by
`2 ** bits_per_sample`. `allocate(sample_rate, block_size)` resamples the
buffer to a new, positive rate, and `process(index, wrap)` returns the
linearly interpolated value at a fractional index together with the
buffer length. Positions outside the buffer read as 0.0 unless `wrap` is
set.

```python
from raugext.storage import Sample

sample = Sample.load("drums.wav")
sample.allocate(48_000.0, 512)
out, length = sample.process(index=1234.5, wrap=True)
```

A `Sample` can also be built directly from an array:
`Sample(buf=[0.0, 0.5, 1.0], sample_rate=44_100.0)`.

## Passing values

```python
from raugext.util import signal_channel

tx, rx = signal_channel(0.0)
tx.process(0.5)
rx.process()   # 0.5
rx.process()   # 0.0, the default, when nothing is waiting
```

The channel is unbounded. Sending after the receiver has been discarded
raises `ChannelError`.

## What it does not do

The package provides the processors only. It has no graph for wiring
processors together, no scheduler that runs them block by block, no audio
device input or output, and no way to write WAV files. Callers drive each
processor themselves, one sample at a time, and pass values between them.