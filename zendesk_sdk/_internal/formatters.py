"""Query-string formatting helpers."""

from collections.abc import Iterable


def to_csv(ids: Iterable[int]) -> str:
    """Join ids into the comma-separated form Zendesk expects for ``ids=``.

    >>> to_csv([1, 2, 3])
    '1,2,3'
    >>> to_csv([])
    ''
    """
    return ",".join(str(int(i)) for i in ids)
