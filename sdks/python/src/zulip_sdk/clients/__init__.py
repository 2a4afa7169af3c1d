from .base import BaseClient
from .emojis import EmojisClient
from .messages import MessagesClient
from .queues import QueuesClient
from .streams import StreamsClient, SubscriptionsClient, TopicsClient
from .users import OwnUserClient, UsersClient

__all__ = [
    "BaseClient",
    "EmojisClient",
    "MessagesClient",
    "OwnUserClient",
    "QueuesClient",
    "StreamsClient",
    "SubscriptionsClient",
    "TopicsClient",
    "UsersClient",
]
