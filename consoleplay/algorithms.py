"""Binary search, bubble sort and selection sort with small demonstrations."""

from __future__ import annotations

import argparse

SEARCH_ITEMS = (15, 24, 43, 65, 75, 81, 85, 91, 95)
SEARCH_TARGET = 85
BUBBLE_ITEMS = (5, 4, 3, 2, 1)
SELECTION_ITEMS = (5, 2, 4, 1, 3)


def binary_search(items, item):
    """Return the index of ``item`` in sorted ``items``, or None if absent."""
    left, right = 0, len(items) - 1
    while left <= right:
        middle = (left + right) // 2
        if items[middle] == item:
            return middle
        if item < items[middle]:
            right = middle - 1
        else:
            left = middle + 1
    return None


def bubble_sort(items):
    """Return a sorted copy, stopping early once a pass makes no swap."""
    result = list(items)
    for done in range(len(result) - 1):
        swapped = False
        for j in range(len(result) - 1 - done):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def selection_sort(items):
    """Return a sorted copy, placing the minimum of the rest at each position."""
    result = list(items)
    for i in range(len(result)):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def _line(label: str, values) -> str:
    return label + "".join(f"{value} " for value in values)


def _demo_search() -> None:
    index = binary_search(SEARCH_ITEMS, SEARCH_TARGET)
    if index is None:
        print("Item not found in the array")
    else:
        print(f"{SEARCH_TARGET} is found at index {index}")


def _demo_sort(items, sorter) -> None:
    print(_line("Array: ", items))
    print(_line("Sorted array: ", sorter(items)))


def main(argv=None):
    """Run one demonstration, or all of them."""
    parser = argparse.ArgumentParser(
        prog="algorithms", description="Demonstrate searching and sorting."
    )
    parser.add_argument(
        "demo",
        nargs="?",
        default="all",
        choices=["search", "bubble", "selection", "all"],
    )
    args = parser.parse_args(argv)
    if args.demo in ("search", "all"):
        _demo_search()
    if args.demo in ("bubble", "all"):
        _demo_sort(BUBBLE_ITEMS, bubble_sort)
    if args.demo in ("selection", "all"):
        _demo_sort(SELECTION_ITEMS, selection_sort)
    return 0