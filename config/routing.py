"""
WebSocket routing configuration for the school portal.
"""

from django.urls import path

from apps.core.consumers import LiveQueryConsumer

# Define WebSocket URL patterns
websocket_urlpatterns = [
    # Live query snapshots for a named collection
    path('ws/live/<str:collection>/', LiveQueryConsumer.as_asgi()),
]
