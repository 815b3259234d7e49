"""CLI entry point for word of the day."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer

from word_of_the_day.adapters.notifications import ChatLogNotifier, SlackNotifier
from word_of_the_day.config import Settings, get_settings
from word_of_the_day.core import DailyGate, NotificationService, SourceConfig, SourceKind
from word_of_the_day.use_cases import WordOfTheDayFetcher, WordOfTheDayService, build_feeds


def main(
    config: Path = typer.Option(Path("config.yaml"), "--config", help="YAML config file"),
    source: Optional[SourceKind] = typer.Option(None, "--source", help="Primary source"),
    custom_url: Optional[str] = typer.Option(None, "--custom-url", help="Page to scrape for the custom feed"),
    custom_selector: Optional[str] = typer.Option(None, "--custom-selector", help="CSS selector for the custom word"),
    all_sources: bool = typer.Option(False, "--all", help="Print one line per built-in source"),
    no_slack: bool = typer.Option(False, "--no-slack", help="Disable Slack notifications"),
    debug: bool = False,
) -> None:
    """Fetch and show today's word of the day."""
    settings = get_settings(config)

    if source is not None:
        settings.source.kind = source
    if custom_url is not None:
        settings.source.custom_url = custom_url
        settings.display.custom_word_of_the_day = True
    if custom_selector is not None:
        settings.source.custom_selector = custom_selector

    logging.basicConfig(
        level=logging.DEBUG if debug else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if all_sources:
        asyncio.run(run_all(settings))
    else:
        asyncio.run(run_daily(settings, no_slack))


def app() -> None:
    """CLI entry point."""
    typer.run(main)


async def run_all(settings: Settings) -> None:
    """Print every built-in source, plus the custom page when configured."""
    fetcher = WordOfTheDayFetcher.from_settings(settings)
    sources = [SourceConfig(kind=kind) for kind in fetcher.registry.builtin_kinds]
    if settings.source.custom_url:
        sources.append(settings.custom_source)

    print("\n📚 Words of the day:")
    for line in await fetcher.fetch_all(sources):
        print(f"  • {line}")
    print()


async def run_daily(settings: Settings, no_slack: bool) -> None:
    """Show each enabled feed once, the way the host does on login."""
    chat_log = ChatLogNotifier(settings.message_color)
    notifiers: list[NotificationService] = [chat_log]

    if no_slack:
        print("⚠️  SLACK_WEBHOOK_URL - disabled by --no-slack")
    elif settings.slack_webhook_url:
        notifiers.append(SlackNotifier(settings.slack_webhook_url, timeout=settings.http.timeout))

    feeds = build_feeds(settings)
    if not feeds:
        print("❌ All word of the day feeds are disabled")
        return

    service = WordOfTheDayService(
        fetcher=WordOfTheDayFetcher.from_settings(settings),
        feeds=feeds,
        notifiers=notifiers,
        gate=DailyGate(),
    )

    try:
        lines = await service.announce()
    finally:
        service.shutdown()

    for message in chat_log.drain():
        print(message)

    if len(lines) < len(feeds):
        print(f"⚠️  {len(feeds) - len(lines)} of {len(feeds)} feeds failed, see log for details")


if __name__ == "__main__":
    app()
