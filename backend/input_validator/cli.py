"""Command line entry points: run the server or the terminal form."""

from typing import Annotated, Optional

import typer
import uvicorn
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.text import Text

from input_validator.client import INVALID_HINT, ValidationClient, ValidationForm
from input_validator.config import get_settings
from input_validator.validators.models import ValidationResult

app = typer.Typer(help="Input Validator — validate text against length and digit rules")

console = Console()
err_console = Console(stderr=True)


def render_result(result: ValidationResult) -> Panel:
    """Build the result panel shown under the form."""
    body = Text()
    if result.valid:
        body.append("✅ Valid input!", style="bold green")
    else:
        body.append("❌ Invalid\n", style="bold red")
        body.append(INVALID_HINT)
    body.append(f"\n\nWords: {result.word_count}\nLetters: {result.letter_count}")
    return Panel(body, border_style="green" if result.valid else "red")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Bind address")] = None,
    port: Annotated[Optional[int], typer.Option(help="Bind port")] = None,
    reload: Annotated[bool, typer.Option(help="Reload on code changes")] = False,
) -> None:
    """Run the validation API."""
    settings = get_settings()
    uvicorn.run(
        "input_validator.main:app",
        host=host if host is not None else settings.HOST,
        port=port if port is not None else settings.PORT,
        reload=reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


@app.command()
def form(
    api_url: Annotated[Optional[str], typer.Option(help="Base URL of the validation API")] = None,
) -> None:
    """Interactive form. Submit an empty line to quit."""
    console.print("[bold]Input Validator[/]")

    def alert(message: str) -> None:
        err_console.print(f"[bold red]Error:[/] {message}")

    def focus() -> None:
        console.print("[dim]Input cleared, try again.[/]")

    with ValidationClient(base_url=api_url) as client:
        validation_form = ValidationForm(client, on_alert=alert, on_focus=focus)
        while True:
            try:
                value = Prompt.ask("Enter text", console=console)
            except (EOFError, KeyboardInterrupt):
                break
            validation_form.set_input(value)
            if not validation_form.can_submit:
                break

            with console.status("Checking..."):
                result = validation_form.submit()
            if result is not None:
                console.print(render_result(result))


if __name__ == "__main__":
    app()
