"""Main CLI application using Typer."""
import asyncio
from pathlib import Path

import typer
from dotenv import find_dotenv, load_dotenv
from rich.markup import escape

from ..chat import ChatSession
from ..config import DEFAULT_CONFIG_PATH, ConfigError, MissingCredentialsError, load, require_credentials
from .console import INSTRUCTIONS, console, err_console, print_banner, setup_logging
from .providers import get_llm

# Create Typer app
app = typer.Typer(
    name="streamchat",
    help="Chat with a hosted language model from the terminal",
    add_completion=False,
)


@app.command()
def chat(
    config: Path = typer.Option(
        DEFAULT_CONFIG_PATH,
        "--config",
        "-c",
        help="Base settings file (TOML); APP_* environment variables override it"
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        "-l",
        help="Diagnostics on stderr: debug, info, warning, or error"
    ),
):
    """Start an interactive chat session. Type 'exit' to quit."""
    print_banner(console)
    load_dotenv(find_dotenv(usecwd=True))
    setup_logging(log_level)

    try:
        settings = require_credentials(load(config))
    except ConfigError as e:
        err_console.print(f"[red]Error loading configuration: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    except MissingCredentialsError:
        err_console.print(
            f"[red]Error: Azure OpenAI API key and endpoint must be set in "
            f"{escape(str(config))} or APP_AZURE__OPENAI_API_KEY / APP_AZURE__OPENAI_ENDPOINT[/red]"
        )
        raise typer.Exit(code=1)

    try:
        llm = get_llm(settings)
    except ValueError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[cyan]{INSTRUCTIONS}[/cyan]")

    async def _chat():
        async with llm:
            session = ChatSession(settings, llm, console=console)
            await session.run()

    asyncio.run(_chat())


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
