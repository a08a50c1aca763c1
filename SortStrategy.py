from enum import Enum

class SortStrategy(Enum):
    """
    Enumeration of the sorting algorithms the containers can apply.

    Both containers report which algorithm a call to sort() actually used,
    allowing callers (and tests) to see which branch was taken.

    Values:
        QUICK: Lomuto-partition quicksort (large arrays).
        BUBBLE: Full-pass bubble sort (small arrays).
        INSERTION: Value-moving insertion sort (linked lists).
    """
    QUICK = 1
    BUBBLE = 2
    INSERTION = 3
