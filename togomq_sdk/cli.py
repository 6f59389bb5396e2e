"""Command-line tool for publishing to and subscribing from TogoMQ."""

from __future__ import annotations

import sys

import click
from rich.console import Console
from rich.markup import escape

from .application.client import Client
from .domain.enums import LogLevel
from .domain.exceptions import TogoMQError
from .domain.models import Message, SubscribeOptions
from .infrastructure.config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    HOST_ENV,
    LOG_LEVEL_ENV,
    PORT_ENV,
    TOKEN_ENV,
    Config,
)


def _fail(error: TogoMQError) -> None:
    Console(stderr=True).print(
        f"[red]Error {escape(f'[{error.kind.value}]')}:[/red] {escape(error.message)}"
    )
    sys.exit(1)


def _parse_variables(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str]:
    variables: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {item!r}")
        variables[key] = value
    return variables


def _print_message(console: Console, message: Message) -> None:
    body = message.body_bytes.decode("utf-8", errors="replace")
    line = f"[bold]{escape(message.topic)}[/bold]"
    if message.uuid:
        line += f" [dim]{escape(message.uuid)}[/dim]"
    line += f" {escape(body)}"
    if message.variables:
        line += f" [cyan]{escape(str(message.variables))}[/cyan]"
    console.print(line)


@click.group()
@click.option("--token", envvar=TOKEN_ENV, required=True, help="Authentication token")
@click.option("--host", envvar=HOST_ENV, default=DEFAULT_HOST, show_default=True)
@click.option("--port", envvar=PORT_ENV, type=int, default=DEFAULT_PORT, show_default=True)
@click.option(
    "--log-level",
    envvar=LOG_LEVEL_ENV,
    type=click.Choice([level.value for level in LogLevel]),
    default=LogLevel.WARN.value,
    show_default=True,
    help="SDK log verbosity",
)
@click.pass_context
def main(ctx: click.Context, token: str, host: str, port: int, log_level: str):
    """Publish to and subscribe from TogoMQ topics."""
    try:
        ctx.obj = Config(token, host=host, port=port, log_level=log_level)
    except TogoMQError as e:
        _fail(e)


@main.command()
@click.argument("topic")
@click.argument("bodies", nargs=-1, required=True)
@click.option(
    "--var",
    "variables",
    multiple=True,
    callback=_parse_variables,
    help="Message variable as key=value (repeatable)",
)
@click.option("--postpone", type=int, default=0, help="Delay in seconds before delivery")
@click.option("--retention", type=int, default=0, help="Seconds to keep the message (0 = default)")
@click.pass_obj
def publish(
    config: Config,
    topic: str,
    bodies: tuple[str, ...],
    variables: dict[str, str],
    postpone: int,
    retention: int,
):
    """Publish one message per BODY to TOPIC in a single batch."""
    messages = [
        Message(topic, body)
        .with_variables(variables)
        .with_postpone(postpone)
        .with_retention(retention)
        for body in bodies
    ]
    try:
        with Client(config) as client:
            result = client.publish(messages)
    except TogoMQError as e:
        _fail(e)

    Console().print(
        f"[green]Published[/green] {result.messages_received} message(s) "
        f"to [bold]{escape(topic)}[/bold]"
    )


@main.command()
@click.argument("topic")
@click.option("--batch", type=int, default=0, help="Max messages per push (0 = server default)")
@click.option(
    "--speed", "speed_per_sec", type=int, default=0, help="Max messages per second (0 = unlimited)"
)
@click.option(
    "--limit",
    type=click.IntRange(min=0),
    default=0,
    help="Stop after this many messages (0 = until the stream ends)",
)
@click.pass_obj
def subscribe(config: Config, topic: str, batch: int, speed_per_sec: int, limit: int):
    """Print messages from TOPIC (a topic, '*' or 'prefix.*') as they arrive."""
    console = Console()
    options = SubscribeOptions(topic).with_batch(batch).with_speed_per_sec(speed_per_sec)
    received = 0
    try:
        with Client(config) as client, client.subscribe(options) as stream:
            for message in stream:
                received += 1
                _print_message(console, message)
                if limit and received >= limit:
                    break
    except TogoMQError as e:
        _fail(e)

    console.print(f"[dim]Received {received} message(s)[/dim]")


if __name__ == "__main__":
    main()
