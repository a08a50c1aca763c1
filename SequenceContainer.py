from abc import ABC, abstractmethod

from ContainerErrors import IndexOutOfRangeError
from SortStrategy import SortStrategy

import logging


class SequenceContainer(ABC):
    """
    Abstract base class for the index-addressable sequence containers.

    Provides the shared surface of DynamicArray and DoublyLinkedList: logger
    configuration, element counting, bounds checking and the "[e0, e1, ...]"
    text form. Concrete containers supply the storage and the algorithms.

    Attributes:
        logger (logging.Logger): Logger for container diagnostics.
    """

    LOGGER_NAME = "SEQUENCE_CONTAINER"

    def __init__(
        self,
        logFile=None,
        logLevel=logging.WARNING,
        logger: logging.Logger = None,
    ):
        """
        Initialize the container's logging configuration.

        Args:
            logFile (str, optional): Path to log file. If None, no file logging. Defaults to None.
            logLevel (int, optional): Logging level (e.g., logging.INFO). Defaults to logging.WARNING.
            logger (logging.Logger, optional): Custom logger instance. If None, creates new one. Defaults to None.
        """
        if logger is None:
            self.logger = logging.getLogger(self.LOGGER_NAME)
            self.logger.setLevel(logLevel)

            if logFile is not None:
                file_handler = logging.FileHandler(logFile)
                file_handler.setLevel(logLevel)

                formatter = logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                )
                file_handler.setFormatter(formatter)

                self.logger.addHandler(file_handler)
        else:
            self.logger = logger

        self._size = 0

    @abstractmethod
    def add(self, value, index: int = None):
        """
        Insert a value.

        Args:
            value: The value to insert.
            index (int, optional): Position to insert at, 0 <= index <= size.
                If None, the value is appended. Defaults to None.

        Raises:
            IndexOutOfRangeError: If index is outside [0, size].
        """
        pass

    @abstractmethod
    def get(self, index: int):
        """
        Return the value at the given position.

        Raises:
            IndexOutOfRangeError: If index is outside [0, size).
        """
        pass

    @abstractmethod
    def remove(self, index: int):
        """
        Remove and return the value at the given position.

        Raises:
            IndexOutOfRangeError: If index is outside [0, size).
        """
        pass

    @abstractmethod
    def clear(self):
        pass

    @abstractmethod
    def sort(self) -> SortStrategy:
        """
        Reorder the elements ascending under their natural ordering.

        Returns:
            SortStrategy: The algorithm that was applied.
        """
        pass

    @abstractmethod
    def _values(self):
        """
        Yield the stored values in positional order. Internal use only.
        """
        pass

    def size(self) -> int:
        return self._size

    def isEmpty(self) -> bool:
        return self._size == 0

    def _checkIndex(self, index: int, upper: int):
        """
        Make sure that 0 <= index < upper.

        Args:
            index (int): The index to check.
            upper (int): Exclusive upper bound (size for reads, size + 1 for inserts).

        Raises:
            IndexOutOfRangeError: If the index is out of range.
        """
        if index < 0 or index >= upper:
            error = IndexOutOfRangeError(index, self._size)
            self.logger.error("%s", error)
            raise error

    def __len__(self):
        return self._size

    def __str__(self):
        return "[" + ", ".join(str(v) for v in self._values()) + "]"

    def __repr__(self):
        return f"{type(self).__name__}({self})"
