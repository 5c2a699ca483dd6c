from typing import Any, Optional, TextIO

from ordered_tree import OrderedTree


def print_tree(tree: OrderedTree[Any], file: Optional[TextIO] = None) -> None:
    """Write the elements in ascending order, one per line."""
    if tree.is_empty():
        print("Empty tree", file=file)
        return
    for value in tree.in_order():
        print(value, file=file)


def print_levels(tree: OrderedTree[Any], file: Optional[TextIO] = None) -> None:
    """Write one line per depth, elements separated by spaces."""
    for level in tree.level_order():
        print(" ".join(str(value) for value in level), file=file)
