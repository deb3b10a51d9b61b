"""
URL configuration for the friendly project.

The friendship API lives under ``api/friends/``; every route requires an
authenticated session.
"""
from django.contrib import admin
from django.urls import path

from friendships.views import api_views

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/friends/', api_views.current_friends, name='current_friends'),
    path('api/friends/requests/', api_views.pending_requests, name='pending_requests'),
    path('api/friends/sent/', api_views.sent_requests, name='sent_requests'),
    path('api/friends/<str:username>/status/', api_views.friendship_status, name='friendship_status'),
    path('api/friends/<str:username>/request/', api_views.request_friendship, name='request_friendship'),
    path('api/friends/<str:username>/approve/', api_views.approve_friendship, name='approve_friendship'),
    path('api/friends/<str:username>/deny/', api_views.deny_friendship, name='deny_friendship'),
    path('api/friends/<str:username>/block/', api_views.block_friendship, name='block_friendship'),
]
