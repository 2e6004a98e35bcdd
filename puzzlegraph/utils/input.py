from typing import Iterable, Iterator, Tuple, TypeVar

T = TypeVar("T")


def read_lines(path: str) -> Iterator[str]:
    """
    Yields the lines of a text file one at a time, without trailing newlines.

    :param path: Path of the file to read.
    """
    with open(path) as f:
        for line in f:
            yield line.rstrip("\n")


def split_in_two(text: str, separator: str) -> Tuple[str, str]:
    """
    Splits ``text`` on ``separator``, which must occur exactly once.

    :raises ValueError: If the separator does not split the text into exactly
        two parts.
    """
    parts = text.split(separator)
    if len(parts) != 2:
        raise ValueError(
            f"Expected exactly one {separator!r} in {text!r}, found {len(parts) - 1}"
        )
    return parts[0], parts[1]


def assert_single(items: Iterable[T]) -> T:
    """
    Returns the only element of ``items``.

    :raises ValueError: If there is not exactly one element.
    """
    items = list(items)
    if len(items) != 1:
        raise ValueError(f"Expected exactly one item, got {len(items)}")
    return items[0]
