import dataclasses

import pytest

from raugext.env import ProcEnv, ProcessorError


def test_proc_env_holds_sample_rate():
    env = ProcEnv(sample_rate=44100.0, block_size=256)
    assert env.sample_rate == 44100.0
    assert env.block_size == 256


def test_proc_env_sample_period_is_reciprocal():
    env = ProcEnv(sample_rate=48000.0)
    assert env.sample_period * env.sample_rate == pytest.approx(1.0)


def test_proc_env_is_frozen():
    env = ProcEnv(sample_rate=48000.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        env.sample_rate = 1.0  # type: ignore[misc]
    assert env.sample_rate == 48000.0


def test_proc_env_equality():
    assert ProcEnv(22050.0, 64) == ProcEnv(22050.0, 64)
    assert ProcEnv(22050.0, 64) != ProcEnv(22050.0, 128)


def test_processor_error_wraps_cause():
    cause = ValueError("bad input")
    err = ProcessorError(cause)
    assert err.error is cause
    assert str(err) == "bad input"


def test_processor_error_can_be_raised():
    err = ProcessorError("failure")
    assert err.error == "failure"
    with pytest.raises(ProcessorError) as info:
        raise err
    assert info.value is err
    assert str(info.value) == "failure"