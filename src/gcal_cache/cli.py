"""gcal-cache CLI - query a Google Calendar through the fetch cache."""

import asyncio
import json
import logging
import sys
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import click
import requests

from .adapters.requests_fetch import RequestsFetcher
from .config import Config, load_config
from .core.events import convert_to_datetime, is_all_day_event
from .core.ranges import InvalidRangeError
from .fetcher import ConfigurationError, FetchError

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S"]


@click.group()
@click.version_option(package_name="gcal-cache")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """gcal-cache - cached Google Calendar event fetching."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def _load(api_key: str | None, calendar_id: str | None, fresh: bool = False) -> Config:
    """Load config and apply command line overrides."""
    config = load_config()
    if api_key:
        config.api_key = api_key
    if calendar_id:
        config.calendar_id = calendar_id
    if fresh:
        config.always_fetch_fresh = True
    return config


def _zone(config: Config) -> ZoneInfo:
    try:
        return ZoneInfo(config.timezone)
    except ZoneInfoNotFoundError:
        click.echo(f"Configuration error: unknown timezone {config.timezone!r}", err=True)
        sys.exit(1)


def _localize(value: datetime, tz: ZoneInfo) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=tz)


def _show_events(events: list[dict], as_json: bool, tz: ZoneInfo, empty_msg: str = "No events.") -> None:
    """Shared event display logic."""
    if as_json:
        click.echo(json.dumps(events, indent=2))
        return

    if not events:
        click.echo(empty_msg)
        return

    rows = sorted(
        ((convert_to_datetime(e["start"], tz).astimezone(tz), e) for e in events),
        key=lambda row: row[0],
    )
    current_date = None
    for start, event in rows:
        if start.date() != current_date:
            if current_date is not None:
                click.echo()
            click.echo(f"### {start.strftime('%A, %B %d')}")
            current_date = start.date()

        time_str = "All day" if is_all_day_event(event) else start.strftime("%H:%M")
        loc = f" @ {event['location']}" if event.get("location") else ""
        click.echo(f"  {time_str:8} {event.get('summary', 'Untitled')}{loc}")


@main.command()
@click.argument("start", type=click.DateTime(DATE_FORMATS))
@click.argument("end", type=click.DateTime(DATE_FORMATS))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--fresh", is_flag=True, help="Skip the cache and always request")
@click.option("--api-key", default=None, help="Google API key (overrides config)")
@click.option("--calendar-id", default=None, help="Calendar ID (overrides config)")
def events(start: datetime, end: datetime, as_json: bool, fresh: bool, api_key: str | None, calendar_id: str | None):
    """Show events between START and END."""
    config = _load(api_key, calendar_id, fresh)
    tz = _zone(config)
    try:
        fetcher = config.build_fetcher()
        result = asyncio.run(fetcher.fetch_events(_localize(start, tz), _localize(end, tz)))
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except (InvalidRangeError, FetchError, requests.RequestException) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    _show_events(result, as_json, tz, "No events in this window.")


@main.command()
@click.argument("bounds", nargs=-1, required=True, type=click.DateTime(DATE_FORMATS))
@click.option("--api-key", default=None, help="Google API key (overrides config)")
@click.option("--calendar-id", default=None, help="Calendar ID (overrides config)")
def windows(bounds: tuple[datetime, ...], api_key: str | None, calendar_id: str | None):
    """Fetch several windows (START END pairs) and report the API calls made."""
    if len(bounds) % 2 != 0:
        raise click.BadParameter("windows must be given as START END pairs", param_hint="BOUNDS")

    config = _load(api_key, calendar_id)
    tz = _zone(config)
    pairs = [(_localize(bounds[i], tz), _localize(bounds[i + 1], tz)) for i in range(0, len(bounds), 2)]
    base_fetch = RequestsFetcher(timeout=config.timeout)
    calls = []

    async def counting_fetch(request):
        calls.append(request)
        return await base_fetch(request)

    async def run(fetcher):
        for window_start, window_end in pairs:
            before = len(calls)
            found = await fetcher.fetch_events(window_start, window_end)
            click.echo(
                f"{window_start.isoformat()} -> {window_end.isoformat()}: "
                f"{len(found)} event(s) total, {len(calls) - before} new call(s)"
            )

    try:
        asyncio.run(run(config.build_fetcher(fetch=counting_fetch)))
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except (InvalidRangeError, FetchError, requests.RequestException) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"{len(calls)} API call(s) for {len(pairs)} window(s)")


if __name__ == "__main__":
    main()
