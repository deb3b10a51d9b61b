from io import StringIO

from django.core.management import call_command
from django.db.models import F
from django.test import TestCase

from friendships.models import Friendship, User
from friendships.tests.helpers import make_friendship, make_user


class SeedCommandTests(TestCase):

    def test_seed_creates_users_and_requests(self):
        out = StringIO()
        call_command("seed", users=6, requests_per_user=2, approve_ratio=1.0, stdout=out)

        self.assertEqual(User.objects.count(), 6)
        self.assertGreater(Friendship.objects.count(), 0)
        self.assertFalse(Friendship.objects.filter(source=F("target")).exists())
        self.assertIn("Seeding complete", out.getvalue())

    def test_seed_never_duplicates_outstanding_pairs(self):
        call_command("seed", users=5, requests_per_user=4, approve_ratio=0.5, stdout=StringIO())
        pairs = list(Friendship.objects.alive().values_list("source_id", "target_id"))
        self.assertEqual(len(pairs), len(set(pairs)))

    def test_seed_with_zero_approval_leaves_everything_pending(self):
        call_command("seed", users=4, requests_per_user=2, approve_ratio=0.0, stdout=StringIO())
        self.assertFalse(Friendship.objects.approved().exists())


class UnseedCommandTests(TestCase):

    def test_unseed_removes_non_staff_users_and_edges(self):
        admin = make_user(username="admin", is_staff=True)
        alice = make_user(username="alice")
        bob = make_user(username="bob")
        make_friendship(alice, bob, approved=True)
        make_friendship(alice, admin, deleted=True)

        out = StringIO()
        call_command("unseed", stdout=out)

        self.assertEqual(list(User.objects.all()), [admin])
        self.assertFalse(Friendship.objects.exists())
        self.assertIn("Deleted 2 non-staff users and 2 friendship edges.", out.getvalue())
