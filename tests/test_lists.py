import pytest

from raugext.env import ProcessorError
from raugext.lists import ListError, get


def test_get_returns_element():
    items = [10.0, 20.0, 30.0]
    assert get(items, 0) == 10.0
    assert get(items, 2) == 30.0


def test_get_every_index_matches():
    items = ["a", "b", "c", "d"]
    assert [get(items, i) for i in range(len(items))] == items


def test_get_past_end_raises():
    with pytest.raises(ListError) as info:
        get([1, 2, 3], 3)
    assert info.value.index == 3
    assert str(info.value) == "Index out of bounds: 3"


def test_get_negative_index_raises_wrapped():
    with pytest.raises(ListError) as info:
        get([1, 2, 3], -1)
    assert info.value.index == 2**64 - 1


def test_list_error_is_processor_error():
    with pytest.raises(ProcessorError):
        get([], 0)