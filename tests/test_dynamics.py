import pytest

from raugext.dynamics import PeakLimiter


def test_defaults_pass_quiet_signal():
    limiter = PeakLimiter()
    assert limiter.threshold == 0.988_553_1
    assert limiter.attack == 0.9
    assert limiter.release == 0.9995
    out = limiter.process(0.25)
    assert out == pytest.approx(0.25)
    assert limiter.gain == pytest.approx(1.0)


def test_loud_signal_converges_to_threshold():
    limiter = PeakLimiter()
    out = 0.0
    for _ in range(2000):
        out = limiter.process(2.0)
    assert out == pytest.approx(limiter.threshold, rel=1e-4)


def test_output_never_exceeds_input_magnitude():
    limiter = PeakLimiter(threshold=0.5)
    for x in [0.1, 0.9, -1.2, 3.0, -0.4, 0.0, 2.5]:
        out = limiter.process(x)
        assert abs(out) <= abs(x) + 1e-12


def test_envelope_decays_by_release():
    limiter = PeakLimiter(threshold=0.5, attack=0.9, release=0.9)
    limiter.process(1.0)
    before = limiter.envelope
    limiter.process(0.0)
    assert limiter.envelope == pytest.approx(before * 0.9)


def test_explicit_inputs_override_stored():
    limiter = PeakLimiter(threshold=10.0)
    limiter.process(1.0, threshold=0.5, attack=0.0, release=1.0)
    assert limiter.gain == pytest.approx(0.5)
    assert limiter.threshold == 10.0


def test_stored_input_used_when_omitted():
    limiter = PeakLimiter(input=0.3)
    assert limiter.process() == pytest.approx(0.3)