import numpy as np


def pretty_print(array) -> str:
    """Format an N-dimensional numeric array for debug output.

    Every element uses two decimals and is right-aligned to the widest element.
    Each dimension is wrapped in braces; sub-arrays are separated by a comma,
    a newline and one space per nesting level.

    >>> print(pretty_print([[1, 2.5], [10, 4]]))
    {{ 1.00,  2.50},
     {10.00,  4.00}}
    """
    if array is None:
        return "{}"
    arr = np.asarray(array)
    if arr.ndim == 0:
        return f"{arr.item():.2f}"
    width = max((len(f"{v:.2f}") for v in arr.flat), default=0)
    return _pretty_print_recursive(arr, 0, width)


def _pretty_print_recursive(arr: np.ndarray, dimension: int, width: int) -> str:
    if arr.ndim == 1:
        return "{" + ", ".join(f"{v:>{width}.2f}" for v in arr) + "}"
    sep = ",\n" + " " * (dimension + 1)
    return "{" + sep.join(_pretty_print_recursive(sub, dimension + 1, width) for sub in arr) + "}"
