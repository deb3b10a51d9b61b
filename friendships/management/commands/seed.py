"""Management command to seed the database with sample users and friendships."""

import re
from datetime import timedelta
from random import random, sample, choice

from faker import Faker
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from friendships.exceptions import FriendshipError
from friendships.models import User
from friendships.services import FriendshipService, RelationshipResolver


class Command(BaseCommand):
    """Management command to seed the database with sample users and friend edges."""
    USER_COUNT = 50
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample users and friendships'

    def add_arguments(self, parser):
        """Add sizing flags for the seed run."""
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Total users to reach.")
        parser.add_argument("--requests-per-user", type=int, default=4, help="Friend requests each user sends.")
        parser.add_argument(
            "--approve-ratio",
            type=float,
            default=0.7,
            help="Share of requests that get approved (0-1).",
        )

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')
        self.resolver = RelationshipResolver()

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        users = self.create_users(options["users"])
        created, approved = self.seed_friendships(
            users,
            per_user=options["requests_per_user"],
            approve_ratio=options["approve_ratio"],
        )
        self.stdout.write(self.style.SUCCESS(
            f"Seeding complete: {len(users)} users, {created} requests, {approved} approved"
        ))

    def create_users(self, total):
        """Create random users until ``total`` users exist; return them all."""
        while User.objects.count() < total:
            self.try_create_user()
        return list(User.objects.all())

    def try_create_user(self):
        """Create one random user, skipping username/email collisions."""
        first_name = self.faker.first_name()
        last_name = self.faker.last_name()
        username = re.sub(r"\W", "", f"{first_name}{last_name}{self.faker.random_int(1, 999)}".lower())[:30]
        email = f"{username}@example.org"
        if User.objects.filter(username=username).exists() or User.objects.filter(email=email).exists():
            return None
        return User.objects.create_user(
            username=username,
            email=email,
            password=self.DEFAULT_PASSWORD,
            first_name=first_name,
            last_name=last_name,
        )

    def random_window(self):
        """Return (start, end) metadata; most edges are unbounded."""
        now = timezone.now()
        roll = random()
        if roll < 0.7:
            return None, None
        if roll < 0.8:
            return now - timedelta(days=self.faker.random_int(1, 365)), None
        if roll < 0.9:
            return None, now + timedelta(days=self.faker.random_int(1, 365))
        return now - timedelta(days=30), now + timedelta(days=30)

    @transaction.atomic
    def seed_friendships(self, users, *, per_user, approve_ratio):
        """Send random requests between users and approve a share of them."""
        created = approved = 0
        for user in users:
            others = [u for u in users if u.pk != user.pk]
            for target in sample(others, min(per_user, len(others))):
                start, end = self.random_window()
                try:
                    FriendshipService(user, resolver=self.resolver).request(
                        target,
                        name=choice(["", self.faker.word()]),
                        start=start,
                        end=end,
                    )
                except FriendshipError:
                    continue
                created += 1
                if random() < approve_ratio and FriendshipService(target, resolver=self.resolver).approve(user):
                    approved += 1
        return created, approved
