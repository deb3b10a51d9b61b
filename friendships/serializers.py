from rest_framework import serializers
from friendships.models import Friendship, User


class UserSummarySerializer(serializers.ModelSerializer):
    """Public fields of a user shown in friend lists."""

    class Meta:
        model = User
        fields = ["id", "username", "first_name", "last_name"]
        read_only_fields = fields


class FriendshipSerializer(serializers.ModelSerializer):
    """Serializer for a friendship edge with both users inlined."""
    source = UserSummarySerializer(read_only=True)
    target = UserSummarySerializer(read_only=True)

    class Meta:
        model = Friendship
        fields = [
            "id",
            "source",
            "target",
            "name",
            "other_name",
            "start",
            "end",
            "approved_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class FriendRequestSerializer(serializers.Serializer):
    """Optional metadata a requester attaches to a new edge."""
    name = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    other_name = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    start = serializers.DateTimeField(required=False, allow_null=True, default=None)
    end = serializers.DateTimeField(required=False, allow_null=True, default=None)
