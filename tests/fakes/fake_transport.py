"""Fake transports for email service tests."""

from __future__ import annotations

import asyncio

from shikkha.email_transport import Accepted, DispatchResult, Failed, OutboundMessage


class RecordingTransport:
    """Records every submission; optionally fails or raises."""

    def __init__(
        self,
        *,
        fail_with: Exception | None = None,
        raise_with: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        self.fail_with = fail_with
        self.raise_with = raise_with
        self.delay = delay
        self.submissions: list[tuple[OutboundMessage, str]] = []

    async def submit(self, message: OutboundMessage, sender: str) -> DispatchResult:
        self.submissions.append((message, sender))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.raise_with is not None:
            raise self.raise_with
        if self.fail_with is not None:
            return Failed(error=self.fail_with)
        return Accepted(accepted=(message.to,))

    @property
    def messages(self) -> list[OutboundMessage]:
        return [message for message, _ in self.submissions]
