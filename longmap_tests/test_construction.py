import json
import math

import pytest

from longmap.errors import InvalidArgument, InvalidCapacity, InvalidLoadFactor
from longmap.long_map import (
    LongMap,
    DEFAULT_INITIAL_CAPACITY,
    DEFAULT_LOAD_FACTOR,
)


def test_defaults():
    long_map = LongMap()

    assert long_map.capacity == DEFAULT_INITIAL_CAPACITY
    assert long_map.load_factor == DEFAULT_LOAD_FACTOR
    assert long_map.threshold == DEFAULT_INITIAL_CAPACITY * DEFAULT_LOAD_FACTOR
    assert long_map.is_empty()


def test_custom_capacity_and_load_factor():
    long_map = LongMap(300, 0.5)

    assert long_map.capacity == 300
    assert long_map.load_factor == 0.5
    assert long_map.threshold == 150.0


@pytest.mark.parametrize("capacity", [0, -1, -300, 1.5, "16", None, True])
def test_invalid_capacity(capacity):
    with pytest.raises(InvalidCapacity):
        LongMap(capacity)


@pytest.mark.parametrize("load_factor", [0, -2, -0.1, math.nan, -10 ** 400, "0.75", None, False])
def test_invalid_load_factor(load_factor):
    with pytest.raises(InvalidLoadFactor):
        LongMap(300, load_factor)


def test_invalid_arguments_share_base_class():
    assert issubclass(InvalidCapacity, InvalidArgument)
    assert issubclass(InvalidLoadFactor, InvalidArgument)
    assert issubclass(InvalidArgument, ValueError)


def test_invalid_argument_is_logged(mock_logger):
    with pytest.raises(InvalidCapacity):
        LongMap(0)

    mock_logger.error.assert_called_once()
    payload = json.loads(mock_logger.error.call_args[0][0])
    assert payload["event"] == "invalid_argument"
    assert "initial_capacity" in payload["error"]


def test_infinite_load_factor_never_resizes():
    long_map = LongMap(2, math.inf)
    for i in range(100):
        long_map.put(i, i)

    assert long_map.capacity == 2
    assert long_map.size() == 100


@pytest.mark.parametrize("load_factor", [10 ** 400, 2 ** 1024, math.inf])
def test_load_factor_beyond_float_range_is_infinite(load_factor):
    long_map = LongMap(4, load_factor)

    assert long_map.load_factor == math.inf
    assert long_map.threshold == math.inf
    for i in range(20):
        long_map.put(i, i)
    assert long_map.capacity == 4


def test_integer_load_factor_accepted():
    long_map = LongMap(4, 2)

    assert long_map.load_factor == 2.0
    assert long_map.threshold == 8.0


def test_copy_from_none():
    long_map = LongMap.from_map(None)

    assert long_map.is_empty()
    assert long_map.capacity == DEFAULT_INITIAL_CAPACITY


def test_copy_from_empty_map():
    long_map = LongMap.from_map(LongMap(2))

    assert long_map.is_empty()
    assert long_map.capacity == DEFAULT_INITIAL_CAPACITY


def test_copy_from_long_map(sample_entries):
    source = LongMap()
    for key, value in sample_entries.items():
        source.put(key, value)
    source.put(5, None)

    copy = LongMap.from_map(source)

    assert copy.size() == 4
    assert sorted(copy.items(), key=lambda item: item[0]) == sorted(source.items(), key=lambda item: item[0])
    assert copy.contains_key(5)
    assert copy.load_factor == DEFAULT_LOAD_FACTOR


def test_copy_is_independent():
    source = LongMap()
    source.put(1, "one")

    copy = LongMap.from_map(source)
    copy.put(2, "two")
    copy.remove(1)

    assert source.get(1) == "one"
    assert not source.contains_key(2)


def test_copy_sizes_table_to_source(mock_logger):
    source = LongMap()
    for i in range(40):
        source.put(i, i)
    mock_logger.debug.reset_mock()

    copy = LongMap.from_map(source)

    created = json.loads(mock_logger.debug.call_args_list[0][0][0])
    assert created["event"] == "map_created"
    assert created["capacity"] == 40
    assert copy.capacity == 80
    assert copy.threshold == 80 * DEFAULT_LOAD_FACTOR
    assert sorted(copy.keys()) == list(range(40))


def test_copy_of_small_map_uses_default_capacity():
    source = LongMap()
    for i in range(10):
        source.put(i, i)

    copy = LongMap.from_map(source)

    assert copy.capacity == DEFAULT_INITIAL_CAPACITY
    assert sorted(copy.keys()) == list(range(10))


def test_copy_from_dict():
    copy = LongMap.from_map({1: "a", -2: "b"})

    assert copy.get(1) == "a"
    assert copy.get(-2) == "b"
    assert copy.size() == 2
