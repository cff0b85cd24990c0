"""Console input and output for an interactive Mad Libs run."""

import sys
from typing import Dict, Optional, TextIO

import click

from .genres import genre_choices_text
from .utils.errors import IoFailureError


class ConsolePresenter:
    """
    Writes prompts and results to stdout and reads replies line by line.

    Args:
        show_replacements: Print each old/new word pair before the story
        input_stream: Stream to read replies from (default: sys.stdin)
        output_stream: Stream to write to (default: click's stdout)
    """

    def __init__(
        self,
        show_replacements: bool = True,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
    ):
        self.show_replacements = show_replacements
        self.input_stream = input_stream
        self.output_stream = output_stream

    def read_line(self) -> str:
        """
        Read one line of input without its line ending.

        Raises:
            IoFailureError: On end of input, a read error or undecodable bytes
        """
        stream = self.input_stream or sys.stdin
        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise IoFailureError(f"Could not read from standard input: {e}") from e
        if not line:
            raise IoFailureError("Standard input closed before all answers were given.")
        return line.rstrip("\r\n")

    def _write(self, message: str) -> None:
        try:
            click.echo(message, file=self.output_stream)
        except OSError as e:
            raise IoFailureError(f"Could not write to standard output: {e}") from e

    def ask_genre(self) -> str:
        self._write(f"Select a type of story ({genre_choices_text()}): ")
        return self.read_line()

    def show_pick(self, template: str) -> None:
        self._write(f"Random pick: {template}")

    def ask(self, placeholder: str) -> str:
        """Prompt for one placeholder and echo the raw reply."""
        self._write(f"Enter a {placeholder}: ")
        reply = self.read_line()
        self._write(f"{placeholder}: {reply}")
        return reply

    def show_replacement_pairs(self, replacements: Dict[str, str]) -> None:
        if not self.show_replacements:
            return
        for placeholder, replacement in replacements.items():
            self._write(f"old word: {placeholder}")
            self._write(f"new word: {replacement}")

    def show_story(self, story: str) -> None:
        self._write(f"Your new story:\n{story}")
