from datetime import datetime, timedelta, timezone as dt_timezone

from django.test import SimpleTestCase

from friendships.models import Friendship
from friendships.services.activity import active_edges, is_active

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=dt_timezone.utc)
SECOND = timedelta(seconds=1)


def edge(approved=True, start=None, end=None, name=""):
    """Unsaved edge; the activity check never touches the database."""
    return Friendship(
        approved_at=NOW - timedelta(days=1) if approved else None,
        start=start,
        end=end,
        name=name,
    )


class IsActiveTests(SimpleTestCase):

    def test_unbounded_approved_edge_is_active(self):
        self.assertTrue(is_active(edge(), NOW))

    def test_pending_edge_is_never_active(self):
        self.assertFalse(is_active(edge(approved=False), NOW))
        self.assertFalse(is_active(edge(approved=False, start=NOW - SECOND), NOW))
        self.assertFalse(is_active(edge(approved=False, start=NOW - SECOND, end=NOW + SECOND), NOW))

    def test_started_with_no_end_is_active(self):
        self.assertTrue(is_active(edge(start=NOW - SECOND), NOW))

    def test_future_start_with_no_end_is_inactive(self):
        self.assertFalse(is_active(edge(start=NOW + SECOND), NOW))

    def test_start_equal_to_now_is_inactive(self):
        self.assertFalse(is_active(edge(start=NOW), NOW))

    def test_past_end_with_no_start_is_inactive(self):
        self.assertFalse(is_active(edge(end=NOW - SECOND), NOW))

    def test_future_end_with_no_start_is_active(self):
        self.assertTrue(is_active(edge(end=NOW + SECOND), NOW))

    def test_end_equal_to_now_is_inactive(self):
        self.assertFalse(is_active(edge(end=NOW), NOW))

    def test_inside_window_is_active(self):
        self.assertTrue(is_active(edge(start=NOW - SECOND, end=NOW + SECOND), NOW))

    def test_window_not_started_is_inactive(self):
        self.assertFalse(is_active(edge(start=NOW + SECOND, end=NOW + 2 * SECOND), NOW))

    def test_window_over_is_inactive(self):
        self.assertFalse(is_active(edge(start=NOW - 2 * SECOND, end=NOW - SECOND), NOW))

    def test_inverted_window_is_inactive(self):
        self.assertFalse(is_active(edge(start=NOW + SECOND, end=NOW - SECOND), NOW))


class ActiveEdgesTests(SimpleTestCase):

    def test_filters_and_keeps_order(self):
        a = edge(name="a")
        b = edge(approved=False, name="b")
        c = edge(end=NOW + SECOND, name="c")
        d = edge(start=NOW + SECOND, name="d")
        self.assertEqual([e.name for e in active_edges([a, b, c, d], NOW)], ["a", "c"])

    def test_empty_input(self):
        self.assertEqual(active_edges([], NOW), [])
