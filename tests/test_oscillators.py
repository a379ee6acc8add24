import math
import random

import pytest

from raugext.env import ProcEnv
from raugext.oscillators import (
    BlSawOscillator,
    NoiseOscillator,
    PhaseAccumulator,
    SineOscillator,
)


def test_phase_accumulator_ramps_by_increment():
    acc = PhaseAccumulator(increment=0.25)
    outputs = [acc.process() for _ in range(5)]
    assert outputs == [n * 0.25 for n in range(5)]


def test_phase_accumulator_reset_restarts_from_zero():
    acc = PhaseAccumulator(increment=2.0)
    for _ in range(3):
        acc.process()
    acc.process(reset=True)
    assert acc.t == 0
    assert acc.process() == 0.0


def test_phase_accumulator_counter_wraps_at_32_bits():
    acc = PhaseAccumulator(increment=1.0, t=2**32 - 1)
    acc.process()
    assert acc.t == 0


def test_sine_first_sample_is_sine_of_phase():
    osc = SineOscillator()
    assert osc.process(ProcEnv(48000.0), frequency=440.0, phase=0.3) == pytest.approx(
        math.sin(0.3)
    )


def test_sine_quarter_rate_steps_quarter_turn():
    env = ProcEnv(400.0)
    osc = SineOscillator(frequency=100.0)
    outputs = [osc.process(env) for _ in range(8)]
    expected = [math.sin(k * math.pi / 2) for k in range(8)]
    assert outputs == pytest.approx(expected, abs=1e-9)


def test_sine_phase_stays_within_one_turn():
    env = ProcEnv(1000.0)
    osc = SineOscillator(frequency=333.0)
    for _ in range(100):
        osc.process(env)
        assert 0.0 <= osc.t < 2 * math.pi


def test_sine_reset_returns_to_phase_offset():
    env = ProcEnv(1000.0)
    osc = SineOscillator(frequency=50.0, phase=0.7)
    for _ in range(10):
        osc.process(env)
    osc.process(env, reset=True)
    assert osc.process(env) == pytest.approx(math.sin(0.7))


def test_noise_in_unit_interval_and_reproducible():
    first = NoiseOscillator(rng=random.Random(5))
    second = NoiseOscillator(rng=random.Random(5))
    a = [first.process() for _ in range(200)]
    b = [second.process() for _ in range(200)]
    assert a == b
    assert all(0.0 <= v < 1.0 for v in a)


@pytest.mark.parametrize("freq", [0.0, -10.0])
def test_blsaw_silent_for_non_positive_frequency(freq):
    osc = BlSawOscillator()
    assert osc.process(ProcEnv(44100.0), frequency=freq) == 0.0
    assert osc.p == 0.0


def test_blsaw_default_frequency():
    assert BlSawOscillator().frequency == 440.0


def test_blsaw_output_bounded_and_phase_in_range():
    env = ProcEnv(44100.0)
    osc = BlSawOscillator(frequency=220.0)
    pmax = 0.5 * env.sample_rate / 220.0
    for _ in range(2000):
        value = osc.process(env)
        assert math.isfinite(value)
        assert abs(value) < 5.0
        assert 0.0 <= osc.p <= pmax