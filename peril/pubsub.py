"""JSON publishing and subscribing over AMQP queues."""

from __future__ import annotations

import json
import logging
from enum import IntEnum
from typing import Any, Callable, Optional, Tuple, TypeVar

import pika
import pika.exceptions

T = TypeVar("T")

_log = logging.getLogger(__name__)


class SimpleQueueType(IntEnum):
    """Whether a queue survives broker restarts or lives with its connection."""

    DURABLE = 0
    TRANSIENT = 1


class PubSubError(Exception):
    """A queue could not be set up."""


def declare_and_bind(
    connection: Any,
    exchange: str,
    queue_name: str,
    key: str,
    queue_type: SimpleQueueType,
) -> Tuple[Any, str]:
    """Open a channel, declare a queue and bind it; returns channel and queue name."""
    try:
        channel = connection.channel()
    except pika.exceptions.AMQPError as exc:
        raise PubSubError(f"could not create channel: {exc}") from exc

    durable = queue_type == SimpleQueueType.DURABLE
    try:
        result = channel.queue_declare(
            queue=queue_name,
            durable=durable,
            auto_delete=not durable,
            exclusive=not durable,
        )
    except pika.exceptions.AMQPError as exc:
        channel.close()
        raise PubSubError(f"could not declare queue: {exc}") from exc

    try:
        channel.queue_bind(queue=queue_name, exchange=exchange, routing_key=key)
    except pika.exceptions.AMQPError as exc:
        channel.close()
        raise PubSubError(f"could not bind queue: {exc}") from exc

    method = getattr(result, "method", None)
    name = getattr(method, "queue", None) or queue_name
    return channel, name


def _to_jsonable(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    return to_dict() if callable(to_dict) else value


def publish_json(channel: Any, exchange: str, key: str, value: Any) -> None:
    """Publish a value as a JSON message."""
    body = json.dumps(_to_jsonable(value)).encode("utf-8")
    channel.basic_publish(
        exchange=exchange,
        routing_key=key,
        body=body,
        properties=pika.BasicProperties(content_type="application/json"),
    )


def subscribe_json(
    connection: Any,
    exchange: str,
    queue_name: str,
    key: str,
    queue_type: SimpleQueueType,
    handler: Callable[[T], Any],
    decoder: Optional[Callable[[Any], T]] = None,
) -> Any:
    """Consume JSON messages from a bound queue, passing each to the handler.

    Messages are delivered while the returned channel's connection processes
    events. Undecodable messages are logged and left unacknowledged.
    """
    channel, name = declare_and_bind(connection, exchange, queue_name, key, queue_type)

    def on_message(ch: Any, method: Any, properties: Any, body: bytes) -> None:
        try:
            data = json.loads(body)
            payload = data if decoder is None else decoder(data)
        except (ValueError, TypeError, KeyError, AttributeError) as exc:
            _log.error("Failed to unmarshal message: %s", exc)
            return
        handler(payload)
        try:
            ch.basic_ack(delivery_tag=method.delivery_tag)
        except pika.exceptions.AMQPError as exc:
            _log.error("Failed to ack message: %s", exc)

    channel.basic_consume(queue=name, on_message_callback=on_message, auto_ack=False)
    return channel