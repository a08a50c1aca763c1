class IndexOutOfRangeError(IndexError):
    """Exception raised when an index falls outside a container's valid window."""

    def __init__(self, index, size):
        """
        Initialize the error.

        Args:
            index (int): The offending index.
            size (int): The container size at the time of the access.
        """
        super().__init__(f"Index: {index}, Size: {size}")
        self.index = index
        self.size = size
