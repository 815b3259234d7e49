"""Output surfaces for word of the day lines."""

from word_of_the_day.adapters.notifications.chat_log import ChatLogNotifier, wrap_with_color_tag
from word_of_the_day.adapters.notifications.slack_notifier import SlackNotifier

__all__ = ["ChatLogNotifier", "SlackNotifier", "wrap_with_color_tag"]
