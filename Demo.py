from DynamicArray import DynamicArray
from DoublyLinkedList import DoublyLinkedList
from SequenceContainer import SequenceContainer

import numpy as np


def FillWithNumbers(
    container: SequenceContainer,
    rng: np.random.Generator = None,
    maxCount: int = 1000,
    maxValue: int = 100,
    atHead: bool = False,
) -> int:
    """
    Populate a container with a random number of random integers.

    Only the container's public add() is used.

    Args:
        container (SequenceContainer): The container to fill.
        rng (np.random.Generator, optional): Random source. Defaults to a fresh default_rng().
        maxCount (int, optional): Largest number of values to add. Defaults to 1000.
        maxValue (int, optional): Largest value to generate. Defaults to 100.
        atHead (bool, optional): If True, every value is inserted at index 0 instead of appended. Defaults to False.

    Returns:
        int: The number of values added.
    """
    if rng is None:
        rng = np.random.default_rng()

    count = int(rng.integers(0, maxCount, endpoint=True))
    for value in rng.integers(0, maxValue, size=count, endpoint=True):
        if atHead:
            container.add(int(value), 0)
        else:
            container.add(int(value))
    return count


def main(rng: np.random.Generator = None):
    arrayList = DynamicArray()
    FillWithNumbers(arrayList, rng, atHead=True)
    print("array list:\n" + str(arrayList))
    print(arrayList.size())
    arrayList.trim()
    arrayList.sort()
    print("sorted array list:\n" + str(arrayList))
    arrayList.clear()
    print("cleared array list:\n" + str(arrayList))

    linkedList = DoublyLinkedList()
    FillWithNumbers(linkedList, rng)
    print("linked list:\n" + str(linkedList))
    linkedList.sort()
    print("sorted linked list:\n" + str(linkedList))
    linkedList.clear()
    print("cleared linked list:\n" + str(linkedList))


if __name__ == "__main__":
    main()
