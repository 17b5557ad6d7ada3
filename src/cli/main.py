"""CLI interface for Pasteboard Pro."""
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from core.actions import ActionKind, list_actions
from core.providers.base import ProcessingError
from src.config.settings import Settings
from src.rewrite.processor import TextProcessor
from src.rewrite.prompts import format_prompt

app = typer.Typer(help="Pasteboard Pro - rephrase, summarize or tweetify pasted text")

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def _read_input(text: Optional[str], file: Optional[Path]) -> str:
    """Text argument first, then the file, then stdin."""
    if text:
        return text
    if file is not None:
        return file.read_text(encoding="utf-8")
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return ""


def _parse_action(value: str) -> ActionKind:
    try:
        return ActionKind.parse(value)
    except ValueError as e:
        raise typer.BadParameter(str(e))


async def _process(processor: TextProcessor, action: ActionKind, text: str) -> str:
    try:
        return await processor.process(action, text)
    finally:
        await processor.aclose()


@app.command()
def process(
    action: str = typer.Argument(..., help="rephrase, summarize or tweetify"),
    text: Optional[str] = typer.Argument(None, help="Text to process (default: --file or stdin)"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, dir_okay=False, readable=True),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config YAML/JSON"),
    mock: bool = typer.Option(False, "--mock", help="Use the offline mock provider"),
    model: Optional[str] = typer.Option(None, "--model", help="Model identifier"),
    max_tokens: Optional[int] = typer.Option(None, "--max-tokens", min=1),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Process text with the selected action and print the result."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    kind = _parse_action(action)
    raw = _read_input(text, file)
    if not raw.strip():
        typer.secho("No input text. Pass TEXT, --file, or pipe it on stdin.", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=2)

    try:
        settings = Settings.load(config).merged(
            provider="mock" if mock else None,
            model=model,
            max_tokens=max_tokens,
        )
    except (ValidationError, ValueError) as e:
        typer.secho(f"Invalid settings: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)
    processor = TextProcessor.from_config(
        settings.to_provider_config(), provider_name=settings.provider,
    )
    logger.info("Processing %d chars with %s (%s)", len(raw), kind.value, processor.provider_name)

    try:
        output = asyncio.run(_process(processor, kind, raw))
    except ProcessingError as e:
        typer.secho(f"Processing failed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(output)


@app.command()
def actions():
    """List available actions."""
    for a in list_actions():
        typer.echo(f"{a['id']:<10} {a['label']:<10} {a['shortcut']}")


@app.command()
def prompt(
    action: str = typer.Argument(..., help="rephrase, summarize or tweetify"),
    text: Optional[str] = typer.Argument(None, help="Text to embed (default: stdin)"),
):
    """Print the prompt that would be sent, without calling any provider."""
    kind = _parse_action(action)
    typer.echo(format_prompt(kind, _read_input(text, None)))


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
):
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run("services.api.app.main:app", host=host, port=port, reload=reload)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
