"""Classic comparison and counting sorts.

Every function takes any iterable and returns a new sorted list, in
non-decreasing order, leaving its argument untouched.
"""

from __future__ import annotations

import random
from itertools import accumulate
from typing import Any, Iterable, List, Optional


def is_sorted(items: Iterable[Any]) -> bool:
    """Return True if the items are in non-decreasing order."""
    values = list(items)
    return all(not (later < earlier) for earlier, later in zip(values, values[1:]))


def bogosort(items: Iterable[Any], rng: Optional[random.Random] = None) -> List[Any]:
    """Shuffle the items until they happen to be in order."""
    rng = rng if rng is not None else random.Random()
    values = list(items)
    while not is_sorted(values):
        rng.shuffle(values)
    return values


def bubblesort(items: Iterable[Any]) -> List[Any]:
    """Bubble sort that stops early once a pass makes no swap."""
    values = list(items)
    size = len(values)
    for done in range(size - 1):
        swapped = False
        for j in range(size - 1 - done):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break
    return values


def combsort(items: Iterable[Any]) -> List[Any]:
    """Comb sort with shrink factor 1.3 and the rule of 11."""
    values = list(items)
    size = len(values)
    gap = size
    swapped = True
    while gap > 1 or swapped:
        gap = gap * 10 // 13
        if gap in (9, 10):
            gap = 11
        if gap < 1:
            gap = 1
        swapped = False
        for i in range(size - gap):
            j = i + gap
            if values[i] > values[j]:
                values[i], values[j] = values[j], values[i]
                swapped = True
    return values


def countingsort(items: Iterable[int], k: Optional[int] = None) -> List[int]:
    """Stable counting sort of integers in the range 0..k.

    When k is omitted the largest item is used. Raises ValueError for an
    item outside the range and TypeError for a non-integer item.
    """
    values = list(items)
    for value in values:
        if not isinstance(value, int):
            raise TypeError(f"counting sort needs integers, got {value!r}")
    if k is None:
        k = max(values, default=0)
    if k < 0:
        raise ValueError(f"upper bound must not be negative, got {k}")
    for value in values:
        if not 0 <= value <= k:
            raise ValueError(f"value {value} lies outside 0..{k}")

    counts = [0] * (k + 1)
    for value in values:
        counts[value] += 1
    positions = list(accumulate(counts))

    output: List[int] = [0] * len(values)
    for value in reversed(values):
        positions[value] -= 1
        output[positions[value]] = value
    return output


def _sift_down(heap: List[Any], root: int, size: int) -> None:
    while True:
        left = 2 * root + 1
        right = left + 1
        largest = root
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heapsort(items: Iterable[Any]) -> List[Any]:
    """Heap sort using an in-list max-heap."""
    values = list(items)
    size = len(values)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(values, root, size)
    for end in range(size - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        _sift_down(values, 0, end)
    return values


def insertionsort(items: Iterable[Any]) -> List[Any]:
    """Insertion sort that shifts larger items to the right."""
    values = list(items)
    for i in range(1, len(values)):
        chosen = values[i]
        j = i - 1
        while j >= 0 and values[j] > chosen:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = chosen
    return values


def _merge(left: List[Any], right: List[Any]) -> List[Any]:
    merged: List[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def mergesort(items: Iterable[Any]) -> List[Any]:
    """Top-down merge sort; the left half takes the middle item."""
    values = list(items)
    if len(values) < 2:
        return values
    middle = (len(values) - 1) // 2 + 1
    return _merge(mergesort(values[:middle]), mergesort(values[middle:]))


def _partition(values: List[Any], low: int, high: int) -> int:
    pivot = values[low]
    i = low + 1
    j = high
    while True:
        while i < high and pivot > values[i]:
            i += 1
        while pivot < values[j]:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
            i += 1
            j -= 1
        else:
            values[low], values[j] = values[j], values[low]
            return j


def quicksort(items: Iterable[Any]) -> List[Any]:
    """Quicksort with the first item of each range as pivot."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(values, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return values


def selectionsort(items: Iterable[Any]) -> List[Any]:
    """Selection sort that swaps only when the minimum differs."""
    values = list(items)
    size = len(values)
    for i in range(size - 1):
        smallest = i
        for j in range(i + 1, size):
            if values[smallest] > values[j]:
                smallest = j
        if values[i] != values[smallest]:
            values[i], values[smallest] = values[smallest], values[i]
    return values