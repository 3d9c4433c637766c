"""
Vigenere Breaker - Interactive menu (encrypt / decrypt / break / exit).
"""

from enum import IntEnum
from pathlib import Path
from typing import Callable, Dict, Optional

from loguru import logger
from rich.console import Console

from core.file_service import read_text, write_text
from cryptanalysis.breaker import break_cipher
from cryptanalysis.errors import CipherError
from cryptanalysis.vigenere import decrypt, encrypt


class Action(IntEnum):
    ENCRYPT = 1
    DECRYPT = 2
    BREAK = 3
    EXIT = 4


MENU = (
    "\n[bold cyan]--- Vigenere Cipher Tool ---[/bold cyan]\n"
    "1. Encrypt a file\n"
    "2. Decrypt a file\n"
    "3. Break a cipher\n"
    "4. Exit"
)


class ConsoleUI:
    """Menu loop. Console and input function are injectable so the loop can be scripted."""

    def __init__(self, console: Optional[Console] = None, input_func: Optional[Callable[[str], str]] = None):
        self.console = console or Console()
        self._input = input_func or self.console.input
        self._handlers: Dict[Action, Callable[[], None]] = {
            Action.ENCRYPT: self.handle_encryption,
            Action.DECRYPT: self.handle_decryption,
            Action.BREAK: self.handle_break_cipher,
        }

    def run(self) -> None:
        while True:
            self.console.print(MENU)
            choice = self._parse_choice(self._input("Select an action: "))
            if choice is Action.EXIT:
                self.console.print("Exiting the program.")
                return
            if choice is None:
                self.console.print("[yellow]Invalid input. Please choose an option from 1 to 4.[/yellow]")
            else:
                self._handlers[choice]()
            self._input("\nPress Enter to continue...")

    @staticmethod
    def _parse_choice(raw: str) -> Optional[Action]:
        try:
            return Action(int(raw.strip()))
        except ValueError:
            return None

    def prompt_for_existing_path(self, prompt: str) -> Optional[str]:
        """Ask until the path exists. Blank input cancels (None)."""
        while True:
            path = self._input(prompt).strip()
            if not path:
                self.console.print("Operation cancelled by user.")
                return None
            if Path(path).exists():
                return path
            self.console.print("File not found at the specified path. Please try again or press Enter to cancel.")

    def _prompt_output_path(self) -> Optional[str]:
        path = self._input("Enter the path to save the result: ").strip()
        if not path:
            self.console.print("Output path cannot be empty. Operation aborted.")
            return None
        return path

    def _save(self, output_path: str, content: str, success_msg: str) -> None:
        if write_text(output_path, content):
            self.console.print(f"[green]{success_msg}[/green] {output_path}")
        else:
            self.console.print("[red]Failed to save the file. Operation aborted.[/red]")

    def _run_keyed(self, title: str, source_prompt: str, transform: Callable[[str, str], str], success_msg: str) -> None:
        self.console.print(f"\n[bold]--- {title} ---[/bold]")
        input_path = self.prompt_for_existing_path(source_prompt)
        if input_path is None:
            return
        output_path = self._prompt_output_path()
        if output_path is None:
            return
        key = self._input("Enter the keyword: ")
        text = read_text(input_path)
        if text is None:
            self.console.print(f"[red]Could not read[/red] {input_path}")
            return
        try:
            result = transform(text, key)
        except CipherError as e:
            self.console.print(f"[red]Error:[/red] {e}")
            return
        self._save(output_path, result, success_msg)

    def handle_encryption(self) -> None:
        self._run_keyed(
            "File Encryption",
            "Enter the path to the source file: ",
            encrypt,
            "File encrypted successfully and saved to:",
        )

    def handle_decryption(self) -> None:
        self._run_keyed(
            "File Decryption",
            "Enter the path to the encrypted file: ",
            decrypt,
            "File decrypted successfully and saved to:",
        )

    def handle_break_cipher(self) -> None:
        self.console.print("\n[bold]--- Break Vigenere Cipher ---[/bold]")
        input_path = self.prompt_for_existing_path("Enter the path to the encrypted file: ")
        if input_path is None:
            return
        output_path = self._prompt_output_path()
        if output_path is None:
            return
        text = read_text(input_path)
        if text is None:
            self.console.print(f"[red]Could not read[/red] {input_path}")
            return
        try:
            result = break_cipher(text)
        except CipherError as e:
            self.console.print(f"[red]Error:[/red] {e}")
            return
        if result.caesar_fallback:
            self.console.print("[yellow]Warning:[/yellow] text too short, only a Caesar shift was tested.")
        self.console.print(f"Key length: {result.key_length}  Key: [bold]{result.key}[/bold]")
        logger.debug(f"Break of {input_path} recovered key {result.key}")
        self._save(output_path, result.plaintext, "Cipher broken successfully and result saved to:")
