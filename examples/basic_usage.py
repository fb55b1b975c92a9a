"""Basic usage example for dlinkedlist."""

from dlinkedlist import NOT_PRESENT, DoublyLinkedList


def by_value(a: int, b: int) -> int:
    """Order integers ascending."""
    return (a > b) - (a < b)


def main() -> None:
    """Demonstrate positional, search and sort operations."""
    scores = DoublyLinkedList[int]()

    print("=== Building the list ===\n")
    for score in [5, 3, 8, 1]:
        scores.append(score)
    scores.insert_at(2, 7)
    print(f"Scores: {scores.to_list()} (size {scores.size()})")
    print(f"Score at 2: {scores.get(2)}")
    print(f"Score at 10: {scores.get(10)}\n")

    print("=== Searching ===\n")
    print(f"First score above 4: index {scores.index_of(lambda s: s > 4)}")
    print(f"Last score above 4: index {scores.last_index_of(lambda s: s > 4)}")
    if scores.index_of(lambda s: s > 100) == NOT_PRESENT:
        print("No score above 100\n")

    print("=== Sorting ===\n")
    scores.sort(by_value)
    print(f"Sorted: {scores.to_list()}")
    for pattern in (5, 4):
        result = scores.sorted_search(pattern, by_value)
        if result >= 0:
            print(f"  {pattern} found at {result}")
        else:
            print(f"  {pattern} missing, would go at {-(result + 1)}")

    print("\n=== Removing ===\n")
    print(f"Removed at 0: {scores.remove_at(0)}")
    scores.remove_if(lambda s: s % 2 == 1)
    print(f"After dropping odd scores: {scores.to_list()}")

    scores.clear()
    print(f"Final size: {scores.size()}")


if __name__ == "__main__":
    main()
