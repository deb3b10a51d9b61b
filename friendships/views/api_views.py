from django.contrib.auth import get_user_model
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from friendships.exceptions import FriendshipError
from friendships.serializers import (
    FriendRequestSerializer,
    FriendshipSerializer,
    UserSummarySerializer,
)
from friendships.services import FriendshipService, default_resolver

User = get_user_model()


def _counterpart(username):
    return get_object_or_404(User, username=username)


def _outcome(done, label):
    return Response({"status": label if done else "noop"})


@api_view(['GET'])
def current_friends(request):
    """List the users the caller is actively friends with right now."""
    friends = default_resolver.get_current_friends(request.user)
    return Response(UserSummarySerializer(friends, many=True).data)


@api_view(['GET'])
def pending_requests(request):
    """List requests awaiting the caller's decision."""
    edges = default_resolver.incoming_pending(request.user)
    return Response(FriendshipSerializer(edges, many=True).data)


@api_view(['GET'])
def sent_requests(request):
    """List edges the caller initiated, pending or approved."""
    edges = default_resolver.outgoing(request.user)
    return Response(FriendshipSerializer(edges, many=True).data)


@api_view(['GET'])
def friendship_status(request, username):
    """
    Report whether the named user has an edge pointing at the caller, and
    whether they are currently an active friend.
    """
    other = _counterpart(username)
    service = FriendshipService(request.user)
    active_ids = {u.pk for u in default_resolver.get_current_friends(request.user)}
    return Response({
        "username": other.username,
        "is_friends": service.is_friends_with(other),
        "is_active": other.pk in active_ids,
    })


@api_view(['POST'])
def request_friendship(request, username):
    """Send a friend request to the named user."""
    target = _counterpart(username)
    serializer = FriendRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    try:
        edge = FriendshipService(request.user).request(target, **serializer.validated_data)
    except FriendshipError as e:
        return Response({"error": e.messages[0]}, status=status.HTTP_400_BAD_REQUEST)
    return Response(FriendshipSerializer(edge).data, status=status.HTTP_201_CREATED)


@api_view(['POST'])
def approve_friendship(request, username):
    """Approve the named user's pending request to the caller."""
    requester = _counterpart(username)
    return _outcome(FriendshipService(request.user).approve(requester), "approved")


@api_view(['POST'])
def deny_friendship(request, username):
    """Deny the named user's pending request to the caller."""
    requester = _counterpart(username)
    return _outcome(FriendshipService(request.user).deny(requester), "denied")


@api_view(['POST'])
def block_friendship(request, username):
    """Terminate the caller's edges with the named user."""
    target = _counterpart(username)
    return _outcome(FriendshipService(request.user).block(target), "blocked")
