from django.core.management.base import BaseCommand
from django.db import transaction
from django.db.models import Q
from friendships.models import Friendship, User

class Command(BaseCommand):
    """
    Management command to remove (unseed) sample data from the database.

    Deletes every friendship edge touching a non-staff user, soft-deleted
    ones included, then the non-staff users themselves. Administrative
    accounts are preserved.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        """Delete non-staff users and their edges."""
        non_staff_users = User.objects.filter(is_staff=False)

        with transaction.atomic():
            edges = Friendship.objects.filter(
                Q(source__in=non_staff_users) | Q(target__in=non_staff_users)
            )
            edge_count = edges.count()
            edges.delete()
            user_count = non_staff_users.count()
            non_staff_users.delete()

        self.stdout.write(self.style.SUCCESS(
            f"Deleted {user_count} non-staff users and {edge_count} friendship edges."
        ))
