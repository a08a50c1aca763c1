from SequenceContainer import SequenceContainer
from SortStrategy import SortStrategy

import logging
import weakref


class LinkedListNode:
    """
    A node in a doubly-linked list structure.

    Each node owns the node that follows it. The link to the previous node is
    a weak back-reference, used for lookup only, so a chain never forms a
    reference cycle and is released as soon as its head is dropped.

    Attributes:
        value: The data stored in this node.
        nextNode (LinkedListNode): The next node in the list (owning).
        prevNode (LinkedListNode): The previous node in the list (non-owning).
    """
    def __init__(self,value,prevNode=None):
        """
        Initialize a new linked list node.

        Args:
            value: The data to store in this node.
            prevNode (LinkedListNode, optional): The previous node in the list. Defaults to None.
        """
        self.value = value

        self.nextNode = None
        self.prevNode = prevNode

    @property
    def prevNode(self):
        if self._prevRef is None:
            return None
        return self._prevRef()

    @prevNode.setter
    def prevNode(self,node):
        self._prevRef = None if node is None else weakref.ref(node)


class DoublyLinkedList(SequenceContainer):
    """
    A doubly-linked list with index-based access.

    Positional lookups walk from whichever end of the list is closer to the
    requested index. Sorting is an insertion sort that moves values between
    nodes rather than relinking them.

    Attributes:
        headNode (LinkedListNode): First node in the list.
        tailNode (LinkedListNode): Last node in the list.
        (Also inherits all attributes from SequenceContainer)
    """

    LOGGER_NAME = "DOUBLY_LINKED_LIST"

    def __init__(
        self,
        logFile=None,
        logLevel=logging.WARNING,
        logger: logging.Logger = None,
    ):
        """
        Initialize an empty linked list.

        Args:
            logFile (str, optional): Path to log file. Defaults to None.
            logLevel (int, optional): Logging level. Defaults to logging.WARNING.
            logger (logging.Logger, optional): Custom logger. If None, creates new one. Defaults to None.
        """
        super().__init__(logFile, logLevel, logger)
        self.headNode = None
        self.tailNode = None

    def _append(self,newVal):
        newNode = LinkedListNode(newVal,self.tailNode)

        if self.headNode is None:
            self.headNode = newNode
            self.tailNode = newNode
        else:
            self.tailNode.nextNode = newNode
            self.tailNode = newNode

        self._size += 1

    def _prepend(self,newVal):
        newNode = LinkedListNode(newVal)

        if self.headNode is None:
            self.headNode = newNode
            self.tailNode = newNode
        else:
            newNode.nextNode = self.headNode
            self.headNode.prevNode = newNode
            self.headNode = newNode

        self._size += 1

    def add(self, value, index: int = None):
        """
        Insert a value, appending when no index is given.

        Index 0 makes the value the new head and index == size makes it the new
        tail. Any other index splices a new node in front of the node that
        currently sits at that index.

        Args:
            value: The value to insert.
            index (int, optional): Insertion position, 0 <= index <= size. Defaults to None (append).

        Raises:
            IndexOutOfRangeError: If index is outside [0, size].
        """
        if index is None:
            self._append(value)
            return

        self._checkIndex(index, self._size + 1)

        if index == 0:
            self._prepend(value)
        elif index == self._size:
            self._append(value)
        else:
            current = self._getNode(index)
            prevNode = current.prevNode
            newNode = LinkedListNode(value,prevNode)

            newNode.nextNode = current
            prevNode.nextNode = newNode
            current.prevNode = newNode

            self._size += 1

    def get(self, index: int):
        self._checkIndex(index, self._size)
        return self._getNode(index).value

    def remove(self, index: int):
        """
        Unlink the node at index and return its value.

        Args:
            index (int): Position to remove, 0 <= index < size.

        Returns:
            The removed value.

        Raises:
            IndexOutOfRangeError: If index is outside [0, size).
        """
        self._checkIndex(index, self._size)

        node = self._getNode(index)
        nextNode = node.nextNode
        prevNode = node.prevNode

        if nextNode is not None:
            nextNode.prevNode = prevNode
        if prevNode is not None:
            prevNode.nextNode = nextNode

        if self.headNode is node:
            self.headNode = nextNode
        if self.tailNode is node:
            self.tailNode = prevNode

        self._size -= 1
        return node.value

    def clear(self):
        self.headNode = None
        self.tailNode = None
        self._size = 0

    def sort(self) -> SortStrategy:
        """
        Insertion sort by value.

        Each key is carried backward through the already-sorted prefix, shifting
        greater values one node forward, until its predecessor is not greater.
        The node chain itself is never relinked.

        Returns:
            SortStrategy: Always SortStrategy.INSERTION.
        """
        if self._size >= 2:
            current = self.headNode.nextNode

            while current is not None:
                node = current
                key = node.value
                prevNode = node.prevNode

                while prevNode is not None and prevNode.value > key:
                    node.value = prevNode.value
                    node = prevNode
                    prevNode = node.prevNode

                node.value = key
                current = current.nextNode

        self.logger.info("Insertion sort done on %s elements.", self._size)
        return SortStrategy.INSERTION

    def _getNode(self, index: int) -> LinkedListNode:
        """
        Walk to the node at index, starting from the closer end of the list.

        Assumes 0 <= index < size.
        """
        if index < self._size // 2:
            self.logger.debug("Locating index %s from the head.", index)
            nodei = self.headNode
            for _ in range(index):
                nodei = nodei.nextNode
        else:
            self.logger.debug("Locating index %s from the tail.", index)
            nodei = self.tailNode
            for _ in range(self._size - 1 - index):
                nodei = nodei.prevNode
        return nodei

    def _values(self):
        nodei = self.headNode
        while nodei is not None:
            yield nodei.value
            nodei = nodei.nextNode
