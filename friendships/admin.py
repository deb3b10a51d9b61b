from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.utils import timezone
from friendships.models import Friendship, User
from friendships.services import default_resolver


@admin.register(User)
class FriendlyUserAdmin(UserAdmin):
    """Stock user admin for the custom user model."""
    list_display = ('username', 'email', 'first_name', 'last_name', 'is_staff')


@admin.register(Friendship)
class FriendshipAdmin(admin.ModelAdmin):
    """Admin configuration for friendship edges with moderation actions."""
    list_display = ('id', 'source', 'target', 'state_display', 'start', 'end', 'created_at')
    list_filter = (
        ('approved_at', admin.EmptyFieldListFilter),
        ('deleted_at', admin.EmptyFieldListFilter),
        'created_at',
    )
    search_fields = ('source__username', 'target__username', 'name', 'other_name')
    readonly_fields = ('approved_at', 'created_at', 'updated_at', 'deleted_at')
    actions = ['approve_edges', 'terminate_edges']

    @admin.display(description='State')
    def state_display(self, obj):
        """Return pending/approved/deleted for the list view."""
        if obj.is_deleted:
            return "deleted"
        return "approved" if obj.approved_at else "pending"

    def _forget(self, edges):
        for edge in edges:
            default_resolver.invalidate(edge.source_id)
            default_resolver.invalidate(edge.target_id)

    @admin.action(description='Approve selected pending edges')
    def approve_edges(self, request, queryset):
        """Approve the live pending edges in the selection."""
        edges = list(queryset.alive().pending())
        now = timezone.now()
        count = queryset.alive().pending().update(approved_at=now, updated_at=now)
        self._forget(edges)
        self.message_user(request, f"{count} edge(s) approved.")

    @admin.action(description='Terminate selected edges')
    def terminate_edges(self, request, queryset):
        """Soft-delete the live edges in the selection."""
        edges = list(queryset.alive())
        now = timezone.now()
        count = queryset.alive().update(deleted_at=now, updated_at=now)
        self._forget(edges)
        self.message_user(request, f"{count} edge(s) terminated.")
