from SequenceContainer import SequenceContainer
from SortStrategy import SortStrategy

import logging
import numpy as np


class DynamicArray(SequenceContainer):
    """
    A growable list backed by a contiguous numpy object buffer.

    Elements occupy buffer slots [0, size) contiguously; slots [size, capacity)
    hold None. When an insertion would exceed the capacity, the buffer is
    reallocated at twice its capacity and the existing elements are copied
    over, so appends run in amortized O(1).

    Sorting picks one of two algorithms by size: quicksort above
    sortThreshold elements, bubble sort otherwise.

    Attributes:
        storage (np.array): The backing buffer (dtype=object).
        sortThreshold (int): Sizes strictly above this use quicksort.
        (Also inherits all attributes from SequenceContainer)
    """

    LOGGER_NAME = "DYNAMIC_ARRAY"
    INITIAL_CAPACITY = 10
    QUICKSORT_THRESHOLD = 100

    def __init__(
        self,
        initialCapacity: int = None,
        sortThreshold: int = None,
        logFile=None,
        logLevel=logging.WARNING,
        logger: logging.Logger = None,
    ):
        """
        Initialize an empty dynamic array.

        Args:
            initialCapacity (int, optional): Number of slots allocated up front. Defaults to INITIAL_CAPACITY.
            sortThreshold (int, optional): Size above which sort() uses quicksort. Defaults to QUICKSORT_THRESHOLD.
            logFile (str, optional): Path to log file. Defaults to None.
            logLevel (int, optional): Logging level. Defaults to logging.WARNING.
            logger (logging.Logger, optional): Custom logger. If None, creates new one. Defaults to None.
        """
        super().__init__(logFile, logLevel, logger)

        if initialCapacity is None:
            initialCapacity = self.INITIAL_CAPACITY
        if sortThreshold is None:
            sortThreshold = self.QUICKSORT_THRESHOLD

        assert initialCapacity >= 1, f"Error! The initial capacity must be positive, not {initialCapacity}"

        self.storage = np.empty(initialCapacity, dtype=object)
        self.sortThreshold = sortThreshold

    def capacity(self) -> int:
        return len(self.storage)

    def _grow(self):
        """
        Double the buffer's capacity, keeping every present element.
        """
        oldCap = len(self.storage)
        newStorage = np.empty(oldCap * 2, dtype=object)
        newStorage[: self._size] = self.storage[: self._size]
        self.storage = newStorage
        self.logger.debug("Grew storage from %s to %s slots.", oldCap, oldCap * 2)

    def add(self, value, index: int = None):
        """
        Insert a value, appending when no index is given.

        Elements at [index, size) are shifted one slot to the right before the
        new value is written at index.

        Args:
            value: The value to insert.
            index (int, optional): Insertion position, 0 <= index <= size. Defaults to None (append).

        Raises:
            IndexOutOfRangeError: If index is outside [0, size].
        """
        if index is None:
            index = self._size
        else:
            self._checkIndex(index, self._size + 1)

        if self._size == len(self.storage):
            self._grow()

        if index < self._size:
            self.storage[index + 1 : self._size + 1] = self.storage[index : self._size]
        self.storage[index] = value
        self._size += 1

    def get(self, index: int):
        self._checkIndex(index, self._size)
        return self.storage[index]

    def remove(self, index: int):
        """
        Remove the value at index, shifting later elements one slot to the left.

        Args:
            index (int): Position to remove, 0 <= index < size.

        Returns:
            The removed value.

        Raises:
            IndexOutOfRangeError: If index is outside [0, size).
        """
        self._checkIndex(index, self._size)
        value = self.storage[index]

        if index < self._size - 1:
            self.storage[index : self._size - 1] = self.storage[index + 1 : self._size]
        self._size -= 1
        self.storage[self._size] = None

        return value

    def clear(self):
        """
        Drop every element. The capacity is left unchanged.
        """
        self.storage[: self._size] = None
        self._size = 0

    def trim(self):
        """
        Remove every None entry from [0, size).

        Scans from the last element down to the first so that removals do not
        disturb the positions still to be visited.
        """
        for i in range(self._size - 1, -1, -1):
            if self.storage[i] is None:
                self.remove(i)

    def sort(self) -> SortStrategy:
        """
        Sort the elements ascending.

        Uses quicksort when size > sortThreshold, bubble sort otherwise.

        Returns:
            SortStrategy: The algorithm that was applied.
        """
        if self._size > self.sortThreshold:
            self._quickSort(0, self._size - 1)
            strategy = SortStrategy.QUICK
        else:
            self._bubbleSort(0, self._size - 1)
            strategy = SortStrategy.BUBBLE

        self.logger.info("%s sort done on %s elements.", strategy.name.capitalize(), self._size)
        return strategy

    def _quickSort(self, low: int, high: int):
        # Recurse on the smaller side, loop on the larger one.
        while low < high:
            pivotIndex = self._partition(low, high)
            if pivotIndex - low < high - pivotIndex:
                self._quickSort(low, pivotIndex - 1)
                low = pivotIndex + 1
            else:
                self._quickSort(pivotIndex + 1, high)
                high = pivotIndex - 1

    def _partition(self, low: int, high: int) -> int:
        """
        Lomuto partition of [low, high] around the last element.

        Returns:
            int: The final position of the pivot.
        """
        pivot = self.storage[high]
        i = low - 1

        for j in range(low, high):
            if self.storage[j] <= pivot:
                i += 1
                self._swap(i, j)

        self._swap(i + 1, high)
        return i + 1

    def _bubbleSort(self, low: int, high: int):
        for _ in range(low, high):
            for j in range(low, high):
                if self.storage[j] > self.storage[j + 1]:
                    self._swap(j, j + 1)

    def _swap(self, i: int, j: int):
        temp = self.storage[i]
        self.storage[i] = self.storage[j]
        self.storage[j] = temp

    def _values(self):
        for i in range(self._size):
            yield self.storage[i]
