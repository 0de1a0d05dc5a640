from __future__ import annotations

from typing import Any, Optional

from azure.servicebus import ServiceBusMessage
from azure.servicebus.aio import ServiceBusClient, ServiceBusSender
from loguru import logger

from src.unzip.notifications import UnzipNotification


class TopicPublisher:
    """
    Service Bus topic sender shared by every notification of one run.

    - One client and one sender are opened on enter and reused.
    - The sender and then the client are closed on exit, even when the
      block raised.
    """

    def __init__(
        self,
        namespace: Optional[str],
        topic_name: str,
        credential: Any,
        content_type: str = "application/json",
    ) -> None:
        self.namespace = namespace
        self.topic_name = topic_name
        self.credential = credential
        self.content_type = content_type
        self.client: Optional[ServiceBusClient] = None
        self.sender: Optional[ServiceBusSender] = None

    async def __aenter__(self) -> "TopicPublisher":
        if not self.namespace:
            raise ValueError(
                "Service Bus namespace is not configured; set SERVICEBUS_FULLY_QUALIFIED_NAMESPACE "
                "or pass ServiceBusNamespace"
            )
        self.client = ServiceBusClient(self.namespace, self.credential)
        try:
            self.sender = self.client.get_topic_sender(topic_name=self.topic_name)
        except BaseException:
            await self.client.close()
            self.client = None
            raise
        logger.debug("Opened sender for topic '{}' on {}", self.topic_name, self.namespace)
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def send(self, notification: UnzipNotification) -> None:
        if self.sender is None:
            raise RuntimeError("TopicPublisher must be entered before sending")
        message = ServiceBusMessage(
            notification.body(),
            message_id=notification.message_id,
            content_type=self.content_type,
            application_properties=notification.application_properties(),
        )
        await self.sender.send_messages(message)

    async def close(self) -> None:
        try:
            if self.sender is not None:
                await self.sender.close()
                self.sender = None
        finally:
            if self.client is not None:
                await self.client.close()
                self.client = None
                logger.debug("Closed Service Bus client for topic '{}'", self.topic_name)
