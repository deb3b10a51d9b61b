"""Decide whether a friendship edge counts as active at a given moment."""

from typing import Iterable, List

from friendships.models import Friendship


def is_active(edge: Friendship, now) -> bool:
    """
    Return True when ``edge`` is approved and its window admits ``now``.

    The window is checked branch by branch with strict comparisons:

      * no start, no end            -> active
      * start only, start < now     -> active
      * end only, end > now         -> active
      * both, start < now < end     -> active

    Anything else, including a start that has not arrived yet, is inactive.
    """
    if edge.approved_at is None:
        return False

    start, end = edge.start, edge.end

    if start is None and end is None:
        return True
    if end is None and start < now:
        return True
    if start is None and end > now:
        return True
    if start is not None and end is not None and start < now < end:
        return True
    return False


def active_edges(edges: Iterable[Friendship], now) -> List[Friendship]:
    """Return the edges from ``edges`` that are active at ``now``, order kept."""
    return [edge for edge in edges if is_active(edge, now)]
