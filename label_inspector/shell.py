"""
==============================================================================
Interactive Shell Module
==============================================================================

Line-oriented debugging shell. Each line is handled to completion before
the next prompt.

Commands:
--------
    [código]      decode a label
    buscar TERMO  search the catalog
    testes        run the built-in sample labels
    listar        list the catalog grouped by supplier
    ajuda         show the layout of both label formats
    sair          quit (also: exit, q)

==============================================================================
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional

from label_inspector.scanner import SAMPLE_LABELS
from label_inspector.services import InspectorService
from label_inspector.utils.report import ReportPrinter


# Module logger
logger = logging.getLogger(__name__)


EXIT_COMMANDS = {"sair", "exit", "q"}
SEARCH_PREFIX = "buscar "
DIGITS_RE = re.compile(r"^[0-9]+$")


class CommandRunner:
    """
    Operations shared by the command line flags and the shell commands.
    """

    def __init__(self, service: InspectorService, printer: ReportPrinter) -> None:
        self._service = service
        self._printer = printer

    def inspect(self, digits: str) -> None:
        """Decode a label and print its report."""
        label = self._service.decode(digits)
        diagnostics = self._service.diagnose(label)
        self._printer.print_label(label, diagnostics)

    def run_samples(self) -> None:
        """Decode every built-in sample label."""
        self._printer.console.print("\n[bold]EXECUTANDO TESTES AUTOMÁTICOS[/bold]\n")
        for sample in SAMPLE_LABELS:
            self._printer.console.print(f"[dim]Testando: {sample.name}[/dim]")
            self.inspect(sample.code)

    def search(self, term: str) -> None:
        results = self._service.scan(term)
        self._printer.print_search(term, results, self._service.settings.search_limit)

    def list_products(self) -> None:
        self._printer.print_listing(
            self._service.group_by_supplier(),
            total=len(self._service.index),
            preview_limit=self._service.settings.listing_preview_limit,
        )


class InteractiveShell:
    """
    Read-one-command-at-a-time debugging shell.

    Example:
        >>> shell = InteractiveShell(runner, printer)
        >>> shell.handle("ajuda")
        True
    """

    PROMPT = "[cyan]> [/cyan]"

    def __init__(
        self,
        runner: CommandRunner,
        printer: ReportPrinter,
        input_func: Optional[Callable[[str], str]] = None
    ) -> None:
        """
        Initialize shell.

        Args:
            runner: Command operations
            printer: Report printer
            input_func: Line reader taking the prompt (console.input if None)
        """
        self._runner = runner
        self._printer = printer
        self._input = input_func or printer.console.input

    def print_intro(self) -> None:
        console = self._printer.console
        line = "═" * 59
        console.print(f"\n[bold cyan]{line}[/bold cyan]")
        console.print("[bold cyan]    MODO INTERATIVO - Sistema de Inventário Debug[/bold cyan]")
        console.print(f"[bold cyan]{line}[/bold cyan]")
        console.print("\nComandos:")
        console.print("  [yellow]\\[código][/yellow]     - Testar um código de barras")
        console.print("  [yellow]buscar TERMO[/yellow] - Buscar produto por nome/código")
        console.print("  [yellow]testes[/yellow]       - Rodar todos os testes automáticos")
        console.print("  [yellow]listar[/yellow]       - Listar todos os produtos")
        console.print("  [yellow]ajuda[/yellow]        - Mostrar estrutura dos códigos")
        console.print("  [yellow]sair[/yellow]         - Sair\n")

    def handle(self, line: str) -> bool:
        """
        Handle one input line.

        Args:
            line: Raw line typed by the operator

        Returns:
            False when the shell should stop, True otherwise
        """
        command = line.strip()

        if not command:
            return True

        if command in EXIT_COMMANDS:
            self._printer.console.print("Até logo!")
            return False

        if command == "testes":
            self._runner.run_samples()
        elif command == "listar":
            self._runner.list_products()
        elif command.startswith(SEARCH_PREFIX):
            self._runner.search(command[len(SEARCH_PREFIX):])
        elif command == "ajuda":
            self._printer.print_help()
        elif DIGITS_RE.match(command):
            self._runner.inspect(command)
        else:
            self._printer.console.print(
                "[yellow]Comando não reconhecido. Digite 'ajuda' para ver opções.[/yellow]"
            )

        return True

    def run(self) -> None:
        """Prompt for commands until the operator quits or input ends."""
        self.print_intro()

        while True:
            try:
                line = self._input(self.PROMPT)
            except (EOFError, KeyboardInterrupt):
                logger.debug("Input closed, leaving interactive mode")
                self._printer.console.print("\nAté logo!")
                break

            if not self.handle(line):
                break
