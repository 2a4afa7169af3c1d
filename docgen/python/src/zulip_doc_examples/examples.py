"""
Documented API examples.

Each example body runs against a live server. The lines between the
``{code_example|start}`` / ``{code_example|end}`` markers are what the
documentation shows; everything else is plumbing for the generator.
"""

from __future__ import annotations

from typing import Any

from .registry import ExampleRegistry
from .results import MultiResult, OperationResult, SingleResult

DEFAULT_ORDER: tuple[str, ...] = (
    "send_message",
    "create_user",
    "get_custom_emoji",
    "delete_queue",
    "get_messages",
    "get_own_user",
    "get_stream_id",
    "get_stream_topics",
    "get_subscriptions",
    "get_users",
    "register_queue",
)


async def send_message(client: Any) -> OperationResult:
    # {code_example|start}
    # Send a stream message
    params = {
        "to": "social",
        "type": "stream",
        "topic": "Castle",
        "content": "I come not, friends, to steal away your hearts.",
    }
    result_1 = await client.messages.send(params)
    # {code_example|end}

    # {code_example|start}
    # Send a private message
    user_id = 9
    params = {
        "to": [user_id],
        "type": "private",
        "content": "With mirth and laughter let old wrinkles come.",
    }
    result_2 = await client.messages.send(params)
    # {code_example|end}
    return MultiResult([result_1, result_2])


async def create_user(client: Any) -> OperationResult:
    # {code_example|start}
    params = {
        "email": "notnewbie@zulip.com",
        "password": "temp",
        "full_name": "New User",
        "short_name": "newbie",
    }

    result = await client.users.create(params)
    # {code_example|end}
    return SingleResult(result)


async def get_custom_emoji(client: Any) -> OperationResult:
    # {code_example|start}
    result = await client.emojis.retrieve()
    # {code_example|end}
    return SingleResult(result)


async def delete_queue(client: Any) -> OperationResult:
    # {code_example|start}
    # Register a queue
    queue_params = {
        "event_types": ["message"],
    }
    res = await client.queues.register(queue_params)

    # Delete a queue
    deregister_params = {
        "queue_id": res["queue_id"],
    }

    result = await client.queues.deregister(deregister_params)
    # {code_example|end}
    return SingleResult(result)


async def get_messages(client: Any) -> OperationResult:
    # {code_example|start}
    read_params = {
        "anchor": "newest",
        "num_before": 100,
        "num_after": 0,
        "narrow": [
            {"operator": "sender", "operand": "iago@zulip.com"},
            {"operator": "stream", "operand": "Verona"},
        ],
    }

    # Get the 100 last messages sent by "iago@zulip.com" to the stream "Verona"
    result = await client.messages.retrieve(read_params)
    # {code_example|end}
    return SingleResult(result)


async def get_own_user(client: Any) -> OperationResult:
    # {code_example|start}
    # Get the profile of the user/bot that requests this endpoint,
    # which is `client` in this case:
    result = await client.users.me.get_profile()
    # {code_example|end}
    return SingleResult(result)


async def get_stream_id(client: Any) -> OperationResult:
    # {code_example|start}
    # Get the ID of a given stream
    result = await client.streams.get_stream_id("Denmark")
    # {code_example|end}
    return SingleResult(result)


async def get_stream_topics(client: Any) -> OperationResult:
    # {code_example|start}
    # Get all the topics in stream with ID 1
    result = await client.streams.topics.retrieve({"stream_id": 1})
    # {code_example|end}
    return SingleResult(result)


async def get_subscriptions(client: Any) -> OperationResult:
    # {code_example|start}
    # Get all streams that the user is subscribed to
    result = await client.streams.subscriptions.retrieve()
    # {code_example|end}
    return SingleResult(result)


async def get_users(client: Any) -> OperationResult:
    # {code_example|start}
    # Get all users in the realm
    result_1 = await client.users.retrieve()
    # {code_example|end}

    # {code_example|start}
    # You may pass the `client_gravatar` query parameter as follows:
    result_2 = await client.users.retrieve({"client_gravatar": True})
    # {code_example|end}
    return MultiResult([result_1, result_2])


async def register_queue(client: Any) -> OperationResult:
    # {code_example|start}
    # Register a queue
    params = {
        "event_types": ["message"],
    }

    result = await client.queues.register(params)
    # {code_example|end}
    return SingleResult(result)


def build_registry() -> ExampleRegistry:
    registry = ExampleRegistry()
    registry.register("send_message", "/messages:post", 200, send_message)
    registry.register("create_user", "/users:post", 200, create_user)
    registry.register("get_custom_emoji", "/realm/emoji:get", 200, get_custom_emoji)
    registry.register("delete_queue", "/events:delete", 200, delete_queue)
    registry.register("get_messages", "/messages:get", 200, get_messages)
    registry.register("get_own_user", "/users/me:get", 200, get_own_user)
    registry.register("get_stream_id", "/get_stream_id:get", 200, get_stream_id)
    registry.register("get_stream_topics", "/users/me/{stream_id}/topics:get", 200, get_stream_topics)
    registry.register("get_subscriptions", "/users/me/subscriptions:get", 200, get_subscriptions)
    registry.register("get_users", "/users:get", 200, get_users)
    registry.register("register_queue", "/register:post", 200, register_queue)
    return registry
