"""
Vigenere Breaker - CLI entry point.
"""

import sys
from pathlib import Path
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.table import Table
from loguru import logger

from core.config import settings
from core.file_service import read_text, write_text
from cryptanalysis.breaker import break_cipher
from cryptanalysis.errors import CipherError
from cryptanalysis.vigenere import decrypt as vigenere_decrypt, encrypt as vigenere_encrypt

logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
    level=settings.LOG_LEVEL,
)
logger.add(settings.LOG_FILE, rotation="10 MB", retention="7 days", level="DEBUG")

app = typer.Typer(help="Vigenere cipher tool: encrypt, decrypt and break without the key")
console = Console()


def _read_source(source: str) -> str:
    if not Path(source).exists():
        console.print(f"[red]Error:[/red] File not found: {source}")
        raise typer.Exit(1)
    text = read_text(source)
    if text is None:
        console.print(f"[red]Error:[/red] Could not read {source}")
        raise typer.Exit(1)
    return text


def _write_dest(dest: str, content: str) -> None:
    if not write_text(dest, content):
        console.print(f"[red]Error:[/red] Failed to save {dest}")
        raise typer.Exit(1)


def _run_keyed(source: str, dest: str, key: str, transform: Callable[[str, str], str], verb: str) -> None:
    text = _read_source(source)
    try:
        result = transform(text, key)
    except CipherError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    _write_dest(dest, result)
    console.print(f"[green]File {verb} successfully and saved to:[/green] {dest}")


@app.command()
def encrypt(
    source: str = typer.Argument(..., help="Plaintext file"),
    dest: str = typer.Argument(..., help="Where to write the ciphertext"),
    key: str = typer.Option(..., "--key", "-k", help="Keyword (letters only are used)"),
):
    """Encrypt a file with a Vigenere keyword."""
    _run_keyed(source, dest, key, vigenere_encrypt, "encrypted")


@app.command()
def decrypt(
    source: str = typer.Argument(..., help="Ciphertext file"),
    dest: str = typer.Argument(..., help="Where to write the plaintext"),
    key: str = typer.Option(..., "--key", "-k", help="Keyword (letters only are used)"),
):
    """Decrypt a file with a known Vigenere keyword."""
    _run_keyed(source, dest, key, vigenere_decrypt, "decrypted")


@app.command("break")
def break_(
    source: str = typer.Argument(..., help="Ciphertext file"),
    dest: Optional[str] = typer.Argument(None, help="Where to write the plaintext (printed if omitted)"),
    top: int = typer.Option(settings.TOP_N_CANDIDATES, "--top", "-n", help="Candidates to show per table"),
):
    """Recover key and plaintext without the key."""
    text = _read_source(source)
    try:
        result = break_cipher(text)
    except CipherError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if result.caesar_fallback:
        console.print("[yellow]Warning:[/yellow] text too short for a reliable analysis; only a Caesar shift was tested.")

    lengths = Table(title="Key length candidates")
    lengths.add_column("Length", justify="right")
    lengths.add_column("Average IC", justify="right")
    for length, ic in result.best_key_lengths(top):
        lengths.add_row(str(length), f"{ic:.4f}")
    console.print(lengths)

    columns = Table(title="Per-column key letters (chi-squared)")
    columns.add_column("Column", justify="right")
    columns.add_column("Best candidates")
    for i, analysis in enumerate(result.column_results):
        columns.add_row(str(i), ", ".join(f"{c} ({s:.1f})" for c, s in analysis.top(top)))
    console.print(columns)

    console.print(f"Key length: [bold]{result.key_length}[/bold]")
    console.print(f"Key: [bold green]{result.key}[/bold green]")
    if dest:
        _write_dest(dest, result.plaintext)
        console.print(f"[green]Cipher broken successfully and result saved to:[/green] {dest}")
    else:
        console.print(result.plaintext, soft_wrap=True)


@app.command()
def menu():
    """Interactive menu (encrypt / decrypt / break / exit)."""
    from ui.console import ConsoleUI
    ConsoleUI(console=console).run()


if __name__ == "__main__":
    app()
