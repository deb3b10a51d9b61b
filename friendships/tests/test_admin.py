from django.test import TestCase
from django.urls import reverse

from friendships.models import Friendship
from friendships.services import default_resolver
from friendships.tests.helpers import make_friendship, make_user


class FriendshipAdminTests(TestCase):
    def setUp(self):
        default_resolver.cache.clear()
        self.admin = make_user(username="admin", is_staff=True, is_superuser=True)
        self.alice = make_user(username="alice")
        self.bob = make_user(username="bob")
        self.client.force_login(self.admin)
        self.url = reverse("admin:friendships_friendship_changelist")

    def tearDown(self):
        default_resolver.cache.clear()

    def test_changelist_renders(self):
        make_friendship(self.alice, self.bob)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "pending")

    def test_approve_action_approves_pending_and_invalidates(self):
        edge = make_friendship(self.alice, self.bob)
        self.assertEqual(default_resolver.get_current_friends(self.alice), [])

        self.client.post(self.url, {"action": "approve_edges", "_selected_action": [str(edge.pk)]})

        edge.refresh_from_db()
        self.assertIsNotNone(edge.approved_at)
        self.assertEqual(default_resolver.get_current_friends(self.alice), [self.bob])

    def test_terminate_action_soft_deletes(self):
        edge = make_friendship(self.alice, self.bob, approved=True)
        self.assertEqual(default_resolver.get_current_friends(self.bob), [self.alice])

        self.client.post(self.url, {"action": "terminate_edges", "_selected_action": [str(edge.pk)]})

        edge.refresh_from_db()
        self.assertTrue(edge.is_deleted)
        self.assertTrue(Friendship.objects.filter(pk=edge.pk).exists())
        self.assertEqual(default_resolver.get_current_friends(self.bob), [])
