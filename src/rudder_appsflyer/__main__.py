"""Command-line entry point for rudder-appsflyer.

The mapping engine has no I/O of its own; this CLI exists to replay captured
canonical events through it and show exactly which AppsFlyer calls would be
made:

1.  Loading `.env` and settings.
2.  Building the destination config (config file, CLI flag or settings).
3.  Reading JSON Lines of canonical events and validating each line.
4.  Running each event through `AppsFlyerIntegration` with a `JsonLinesSink`
    writing to stdout.
5.  Reporting processed/skipped counts on stderr.
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from .config import get_settings
from .integration import AppsFlyerIntegration
from .mapping.rules import ECOMMERCE_RULES
from .models.rudderstack import parse_event
from .sink import JsonLinesSink

app = typer.Typer(help="RudderStack to AppsFlyer event mapping CLI")
logger = logging.getLogger(__name__)


def _load_destination_config(path: Path) -> Dict[str, Any]:
    """Read a JSON destination config file.

    Raises:
        typer.Exit: With code 1 when the file is unreadable, not JSON, or not
            a JSON object.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        typer.echo(f"Invalid destination config {path}: {e}", err=True)
        raise typer.Exit(code=1) from e
    if not isinstance(raw, dict):
        typer.echo(
            f"Invalid destination config {path}: expected a JSON object, got {type(raw).__name__}",
            err=True,
        )
        raise typer.Exit(code=1)
    return raw


@app.callback()
def main() -> None:
    """rudder-appsflyer CLI.

    Use a subcommand like 'replay' to run a process.
    """
    env_file = find_dotenv(usecwd=True)
    if env_file:
        load_dotenv(env_file)
        logger.debug("Loaded environment from %s", env_file)


@app.command(help="Replay JSON Lines canonical events and print the resulting AppsFlyer calls.")
def replay(
    events_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="JSON Lines file of canonical events"
    ),
    rich_event_name: Optional[bool] = typer.Option(
        None,
        "--rich-event-name/--no-rich-event-name",
        help=(
            "Use 'Viewed <name> Screen' screen event names. Overrides the config file. "
            "If not specified, uses USE_RICH_EVENT_NAME from config/env."
        ),
    ),
    config_file: Optional[Path] = typer.Option(
        None, help="JSON destination config (e.g. {\"useRichEventName\": true})"
    ),
    log_level: Optional[str] = typer.Option(
        None, help="Override LOG_LEVEL (DEBUG logs every mapped call)"
    ),
) -> None:
    """Run every event of EVENTS_FILE through the integration.

    Output on stdout is one JSON object per sink call. Lines that are not
    valid JSON or not a valid canonical event are logged and skipped; they do
    not abort the replay.
    """
    settings = get_settings()
    level = "DEBUG" if settings.DEBUG else (log_level or settings.LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        typer.echo(f"Invalid log level: {level}", err=True)
        raise typer.Exit(code=1)
    logging.basicConfig(level=level)

    destination_config: Dict[str, Any]
    if config_file is not None:
        destination_config = _load_destination_config(config_file)
    else:
        destination_config = {"useRichEventName": settings.USE_RICH_EVENT_NAME}
    if rich_event_name is not None:
        destination_config = {**destination_config, "useRichEventName": rich_event_name}

    sink = JsonLinesSink(sys.stdout)
    integration = AppsFlyerIntegration(sink)
    integration.create(destination_config)

    processed = 0
    skipped = 0
    with events_file.open("r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                event = parse_event(json.loads(line))
            except json.JSONDecodeError as e:
                logger.warning("Line %d: invalid JSON (%s); skipping", line_no, e)
                skipped += 1
                continue
            except ValidationError as e:
                logger.warning(
                    "Line %d: not a canonical event (%d error(s)); skipping",
                    line_no,
                    e.error_count(),
                )
                skipped += 1
                continue
            integration.process(event)
            processed += 1

    typer.echo(
        f"Processed {processed} event(s), skipped {skipped}. sink_calls={sink.calls} "
        f"useRichEventName={integration.config.use_rich_event_name}",
        err=True,
    )


@app.command(help="List the ecommerce rule table (RudderStack event -> AppsFlyer event).")
def rules() -> None:
    for rule in ECOMMERCE_RULES:
        for name in rule.input_names:
            typer.echo(f"{name}\t{rule.output_name}")


if __name__ == "__main__":  # pragma: no cover
    app()
