from DynamicArray import DynamicArray
from ContainerErrors import IndexOutOfRangeError
from SortStrategy import SortStrategy

import numpy as np
import pytest
import logging, os


def test_AppendGrowth():
    arr = DynamicArray()
    for i in range(11):
        arr.add(i)

    assert arr.size() == 11
    assert arr.capacity() == 20
    for i in range(11):
        assert arr.get(i) == i


def test_InsertAtCapacity():
    arr = DynamicArray(initialCapacity=4)
    for i in range(4):
        arr.add(i)
    arr.add(99, 2)

    assert arr.capacity() == 8
    assert str(arr) == "[0, 1, 99, 2, 3]"


def test_InsertAtHead():
    arr = DynamicArray()
    for i in range(25):
        arr.add(i, 0)

    assert arr.size() == 25
    for i in range(25):
        assert arr.get(i) == 24 - i


def test_InsertShiftsRight():
    arr = DynamicArray()
    for v in [10, 20, 30]:
        arr.add(v)
    arr.add(15, 1)
    arr.add(40, 4)

    assert arr.get(1) == 15
    assert str(arr) == "[10, 15, 20, 30, 40]"


def test_InsertOutOfRange():
    arr = DynamicArray()
    arr.add(1)
    with pytest.raises(IndexOutOfRangeError):
        arr.add(2, 2)
    with pytest.raises(IndexOutOfRangeError):
        arr.add(2, -1)
    assert arr.size() == 1


def test_Remove():
    arr = DynamicArray()
    for v in [1, 2, 3, 4]:
        arr.add(v)

    assert arr.remove(1) == 2
    assert arr.size() == 3
    assert str(arr) == "[1, 3, 4]"
    assert arr.remove(2) == 4
    assert str(arr) == "[1, 3]"
    assert arr.storage[2] is None


def test_GetOutOfRange():
    arr = DynamicArray()
    arr.add(7)
    with pytest.raises(IndexOutOfRangeError) as err:
        arr.get(1)
    assert str(err.value) == "Index: 1, Size: 1"
    with pytest.raises(IndexError):
        arr.get(-1)
    with pytest.raises(IndexOutOfRangeError):
        arr.remove(5)


def test_Clear():
    arr = DynamicArray()
    for i in range(15):
        arr.add(i)
    arr.clear()

    assert arr.size() == 0
    assert arr.isEmpty()
    assert arr.capacity() == 20
    assert str(arr) == "[]"
    with pytest.raises(IndexOutOfRangeError):
        arr.get(0)


def test_Trim():
    arr = DynamicArray()
    for v in [None, 1, None, None, 2, 3, None]:
        arr.add(v)
    arr.trim()

    assert arr.size() == 3
    assert str(arr) == "[1, 2, 3]"


def test_SmallSort():
    arr = DynamicArray()
    for v in [5, 3, 8]:
        arr.add(v)

    assert arr.sort() == SortStrategy.BUBBLE
    assert str(arr) == "[3, 5, 8]"


def test_EmptySort():
    arr = DynamicArray()
    assert arr.sort() == SortStrategy.BUBBLE
    assert str(arr) == "[]"


def test_SortThreshold():
    rng = np.random.default_rng(3)
    data = rng.integers(0, 100, size=101, endpoint=True)

    large = DynamicArray()
    small = DynamicArray()
    for v in data:
        large.add(int(v))
    for v in data[:99]:
        small.add(int(v))

    assert large.sort() == SortStrategy.QUICK
    assert small.sort() == SortStrategy.BUBBLE

    assert [large.get(i) for i in range(101)] == np.sort(data).tolist()
    assert [small.get(i) for i in range(99)] == np.sort(data[:99]).tolist()


def test_SameResultBothStrategies():
    rng = np.random.default_rng(11)
    data = rng.integers(-50, 50, size=80)

    bubble = DynamicArray()
    quick = DynamicArray(sortThreshold=10)
    for v in data:
        bubble.add(int(v))
        quick.add(int(v))

    assert bubble.sort() == SortStrategy.BUBBLE
    assert quick.sort() == SortStrategy.QUICK
    assert str(bubble) == str(quick)


def test_SortIdempotent():
    rng = np.random.default_rng(7)
    arr = DynamicArray()
    for v in rng.integers(0, 100, size=1000, endpoint=True):
        arr.add(int(v))

    arr.sort()
    once = str(arr)
    arr.sort()

    assert str(arr) == once


def test_SortStrings():
    arr = DynamicArray()
    for v in ["pear", "apple", "fig"]:
        arr.add(v)
    arr.sort()

    assert str(arr) == "[apple, fig, pear]"


def test_SortLogging():
    logFile = "test_SortLogging_array.log"
    if os.path.exists(logFile):
        os.remove(logFile)

    arr = DynamicArray(logLevel=logging.INFO, logFile=logFile)
    for v in [2, 1]:
        arr.add(v)
    arr.sort()

    for handler in arr.logger.handlers[:]:
        handler.close()
        arr.logger.removeHandler(handler)

    with open(logFile) as f:
        assert "Bubble sort done" in f.read()
    os.remove(logFile)


if __name__ == "__main__":
    test_AppendGrowth()
    test_SortThreshold()
