"""Sort parameter parsing for list queries."""

import logging
import typing as t

LOGGER: logging.Logger = logging.getLogger(__name__)


class SortKey(t.NamedTuple):
    """A resolved sort field and direction."""

    field: str
    descending: bool = False


def parse_sort(
    sort: str | None, allowed: t.Collection[str], default: str
) -> SortKey:
    """Resolve a ``field`` / ``-field`` sort string against an allow-list.

    Blank values and fields outside ``allowed`` fall back to ``default``
    in ascending order. Field names are matched exactly, without trimming
    surrounding whitespace.

    Args:
        sort (str | None): The raw sort parameter.
        allowed (t.Collection[str]): Field names the caller can sort by.
        default (str): Field used when ``sort`` is missing or unknown.

    Returns:
        SortKey: The field to sort by and whether to reverse it.
    """
    if sort is None or not sort.strip():
        return SortKey(default)

    field: str = sort.lstrip("-")
    if field not in allowed:
        LOGGER.debug("Unknown sort field %r, using %r", field, default)
        return SortKey(default)

    return SortKey(field, descending=sort.startswith("-"))
