"""Slack notification adapter."""

import logging
import re
from typing import Optional

import httpx

from word_of_the_day.core.interfaces import NotificationService

logger = logging.getLogger(__name__)


class SlackNotifier(NotificationService):
    """Send word of the day lines to Slack via webhook."""

    def __init__(self, webhook_url: Optional[str] = None, timeout: float = 30.0) -> None:
        """Initialize Slack notifier.

        Args:
            webhook_url: Slack webhook URL. If None, notifications are skipped.
            timeout: Request timeout in seconds.
        """
        self.webhook_url = webhook_url
        self.timeout = timeout

    def _convert_markdown_to_mrkdwn(self, text: str) -> str:
        """Convert markdown bold ``**text**`` to Slack bold ``*text*``."""
        return re.sub(r'\*\*([^*]+)\*\*', r'*\1*', text)

    def _format_line(self, text: str) -> str:
        """Bold the headword in "Label: word - definition"."""
        label, sep, rest = text.partition(": ")
        if not sep or not rest:
            return text
        word, dash, definition = rest.partition(" - ")
        return f"{label}: **{word}**{dash}{definition}"

    async def send_message(self, text: str) -> None:
        """Post one line to Slack."""
        if not self.webhook_url:
            # Silently skip if no webhook configured
            return

        payload = {
            "text": f"📚 {self._convert_markdown_to_mrkdwn(self._format_line(text))}",
            "mrkdwn": True,
        }

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.post(self.webhook_url, json=payload)
                response.raise_for_status()
                logger.info("Word of the day sent to Slack")
            except httpx.HTTPError as e:
                logger.warning("Failed to send word of the day to Slack: %s", e)
