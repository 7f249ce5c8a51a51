"""Command line interface for runbot."""

from __future__ import annotations

import asyncio
import sys

import typer
from loguru import logger

from runbot.app.bootstrap import build_runtime
from runbot.errors import RunbotError

app = typer.Typer(name="runbot", help="Run fenced code from chat messages.", add_completion=False)


@app.command()
def serve() -> None:
    """Connect to Discord and answer `!run` messages until interrupted."""

    from runbot.channels.discord import DiscordChannel

    try:
        runtime = build_runtime()
        channel = DiscordChannel(runtime)
        asyncio.run(channel.start())
    except RunbotError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(1) from exc
    except KeyboardInterrupt:
        logger.info("runbot.interrupted")


@app.command("exec")
def exec_message(
    message: str = typer.Argument("-", help="Fenced code block to run; '-' reads standard input"),
    language: str | None = typer.Option(None, "--language", "-l", help="Language, overriding the fence tag"),
    mode: str | None = typer.Option(None, "--mode", help="Output mode: chunk or crop"),
) -> None:
    """Run one message through the pipeline and print every reply."""

    if message == "-":
        message = sys.stdin.read()
    if mode is not None and mode not in {"chunk", "crop"}:
        raise typer.BadParameter("mode must be 'chunk' or 'crop'", param_hint="--mode")

    try:
        runtime = build_runtime(output_mode=mode)
    except RunbotError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(1) from exc

    replies = asyncio.run(runtime.handle_input(message, language))
    for reply in replies:
        typer.echo(reply)


@app.command()
def languages() -> None:
    """List supported languages and their aliases."""

    try:
        runtime = build_runtime()
    except RunbotError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(1) from exc

    for entry in runtime.registry:
        if entry.aliases:
            typer.echo(f"{entry.canonical_name}: {', '.join(entry.aliases)}")
        else:
            typer.echo(entry.canonical_name)
