"""
Live queries: named querysets whose subscribers receive a fresh snapshot
whenever a record of the underlying model is saved or deleted.

Subscribers are websocket consumers (see ``apps.core.consumers``) that join
the channel-layer group of a query. Change notifications are sent after the
surrounding transaction commits; nothing orders a local write against the
next snapshot a subscriber receives.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.db import transaction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LiveQuery:
    """
    A subscribable query.

    ``get_queryset`` is called for every snapshot; ``public`` queries accept
    anonymous subscribers, the rest require an admin session.
    """
    name: str
    model: type
    serializer_class: type
    get_queryset: Callable
    public: bool = False

    @property
    def group_name(self):
        return f'live_{self.name}'

    def snapshot(self) -> List[dict]:
        """Serialize the current result set of the query."""
        return list(self.serializer_class(self.get_queryset(), many=True).data)


_registry: Dict[str, LiveQuery] = {}


def register(query: LiveQuery) -> LiveQuery:
    _registry[query.name] = query
    return query


def get_live_query(name) -> Optional[LiveQuery]:
    return _registry.get(name)


def queries_for_model(model) -> List[LiveQuery]:
    return [query for query in _registry.values() if query.model is model]


def broadcast_change(query: LiveQuery):
    """Tell every subscriber of ``query`` to refresh its snapshot."""
    channel_layer = get_channel_layer()
    if channel_layer is None:
        return
    async_to_sync(channel_layer.group_send)(
        query.group_name,
        {'type': 'collection.changed', 'collection': query.name},
    )
    logger.debug(f"Live query '{query.name}' change broadcast")


def notify_model_changed(model):
    """Schedule a broadcast for each live query over ``model`` once the write commits."""
    for query in queries_for_model(model):
        transaction.on_commit(lambda query=query: broadcast_change(query))
