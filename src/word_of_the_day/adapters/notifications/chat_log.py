"""In-process chat log the host drains on its own thread."""

import queue

from word_of_the_day.core.interfaces import NotificationService

DEFAULT_COLOR = "#00ffff"


def wrap_with_color_tag(text: str, color: str) -> str:
    """Wrap text in a ``<col=rrggbb>`` chat colour tag."""
    return f"<col={color.lstrip('#').lower()}>{text}</col>"


class ChatLogNotifier(NotificationService):
    """Queue colour-tagged game messages.

    ``queue.Queue`` is thread-safe, so messages may be sent from any thread
    or event loop and drained from the host's main loop.
    """

    def __init__(self, color: str = DEFAULT_COLOR) -> None:
        self.color = color
        self._messages: "queue.Queue[str]" = queue.Queue()

    async def send_message(self, text: str) -> None:
        self.queue(text)

    def queue(self, text: str) -> None:
        self._messages.put(wrap_with_color_tag(text, self.color))

    def drain(self) -> list[str]:
        """Remove and return every queued message, oldest first."""
        messages = []
        while True:
            try:
                messages.append(self._messages.get_nowait())
            except queue.Empty:
                return messages
