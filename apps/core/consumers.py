import json
import logging

from channels.generic.websocket import AsyncWebsocketConsumer
from channels.db import database_sync_to_async
from django.core.serializers.json import DjangoJSONEncoder

from apps.users.session import SessionContext
from .live import get_live_query

logger = logging.getLogger(__name__)


class LiveQueryConsumer(AsyncWebsocketConsumer):
    """
    WebSocket consumer streaming snapshots of a named live query.

    The client receives the full result set on connect and again after every
    committed change to the collection. Closing the socket (or the page that
    owns it) unsubscribes.
    """

    async def connect(self):
        """Handle WebSocket connection."""
        collection = self.scope['url_route']['kwargs']['collection']
        self.live_query = get_live_query(collection)

        if self.live_query is None:
            await self.close()
            return

        session = SessionContext.for_user(self.scope.get('user'))
        if not self.live_query.public and not session.is_admin:
            await self.close()
            return

        self.group_name = self.live_query.group_name
        await self.channel_layer.group_add(
            self.group_name,
            self.channel_name
        )

        await self.accept()
        logger.info(f"Live query '{collection}' subscribed by {session.user or 'anonymous'}")

        await self.send_snapshot()

    async def disconnect(self, close_code):
        """Handle WebSocket disconnection."""
        if hasattr(self, 'group_name'):
            await self.channel_layer.group_discard(
                self.group_name,
                self.channel_name
            )

    async def receive(self, text_data=None, bytes_data=None):
        """Clients may ask for a fresh snapshot explicitly."""
        try:
            data = json.loads(text_data)
        except (TypeError, json.JSONDecodeError):
            data = None

        if not isinstance(data, dict):
            await self.send(text_data=json.dumps({
                'type': 'error',
                'message': 'Invalid JSON format'
            }))
            return

        if data.get('type') == 'refresh':
            await self.send_snapshot()

    # Event handlers for group messages
    async def collection_changed(self, event):
        """Re-run the query and push the new snapshot."""
        await self.send_snapshot()

    async def send_snapshot(self):
        records = await self.fetch_snapshot()
        await self.send(text_data=json.dumps({
            'type': 'snapshot',
            'collection': self.live_query.name,
            'records': records,
        }, cls=DjangoJSONEncoder))

    # Database operations
    @database_sync_to_async
    def fetch_snapshot(self):
        return self.live_query.snapshot()
