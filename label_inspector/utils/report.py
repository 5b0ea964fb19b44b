"""
==============================================================================
Report Printer Module
==============================================================================

Terminal reports for decoded labels, catalog searches and listings.

This module implements:
- ReportPrinter: Renders results on a rich Console with color markup

Report Contents (decoded label):
-------------------------------
- Code, length and detected format
- Field breakdown for the detected layout
- Matched product with the matching method, or the error followed by
  debugging suggestions

==============================================================================
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional

from rich.console import Console
from rich.markup import escape

from label_inspector.catalog import CatalogIndex, ProductView
from label_inspector.scanner.models import DecodedLabel, Diagnostics, LabelFormat


# Module logger
logger = logging.getLogger(__name__)


SEPARATOR = "═" * 60
DASH_SEPARATOR = "─" * 60

HELP_TEXT = """
[bold]ESTRUTURA LITORAL (33 dígitos):[/bold]
┌─────────┬─────────┬───┬─────────┬────────────────┐
│ 0-4     │ 5-12    │13 │ 14-18   │ 19-32          │
│ Prefixo │ Código  │   │ Qtd MT  │ Controle       │
└─────────┴─────────┴───┴─────────┴────────────────┘
Cor: MANUAL

[bold]ESTRUTURA EUROTEXTIL GS1 (45 dígitos, começa com 01):[/bold]
┌────┬───────┬─────┬────────┬──────────┬─────┬───┬───────┬───┬───────┬─────┐
│0-1 │ 2-7   │8-10 │ 11-17  │ 18-26    │27-29│30 │ 31-35 │36 │ 37-41 │42-44│
│ 01 │ PO    │     │ Código │          │ Cor │   │ Seq   │   │ Qtd   │     │
└────┴───────┴─────┴────────┴──────────┴─────┴───┴───────┴───┴───────┴─────┘
Cor: AUTOMÁTICA
"""


def format_quantity(quantity: Optional[float]) -> str:
    """Format a label quantity the way operators read it (123 MT, 1.5 MT)."""
    if quantity is None or math.isnan(quantity):
        return "NaN"
    if quantity.is_integer():
        return str(int(quantity))
    return str(quantity)


class ReportPrinter:
    """
    Colorized terminal report printer.

    Example:
        >>> printer = ReportPrinter()
        >>> printer.print_label(label, diagnostics)
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        preview_length: int = 40
    ) -> None:
        """
        Initialize printer.

        Args:
            console: Target console (stdout if None)
            preview_length: Description characters shown in listings
        """
        self.console = console or Console(highlight=False)
        self.preview_length = preview_length

    # =========================================================================
    # HEADERS
    # =========================================================================

    def print_banner(self, title: str) -> None:
        """Print the application banner."""
        self.console.print()
        self.console.print(f"[bold cyan]╔{'═' * 58}╗[/bold cyan]")
        self.console.print(f"[bold cyan]║     {escape(title):<53}║[/bold cyan]")
        self.console.print(f"[bold cyan]╚{'═' * 58}╝[/bold cyan]")
        self.console.print()

    def print_catalog_loaded(self, index: CatalogIndex) -> None:
        """Print catalog load summary."""
        self.console.print(f"[green]✓ {index.record_count} produtos carregados[/green]")
        self.console.print(f"[green]✓ {len(index)} códigos únicos no índice[/green]")
        self.console.print()

    def print_error(self, message: str) -> None:
        self.console.print(f"[red]✗ {escape(message)}[/red]")

    def print_help(self) -> None:
        """Print the layout of both label formats."""
        self.console.print(HELP_TEXT)

    # =========================================================================
    # DECODED LABEL
    # =========================================================================

    def print_label(self, label: DecodedLabel, diagnostics: Optional[Diagnostics] = None) -> None:
        """
        Print a decoded label report.

        Args:
            label: Decoded label
            diagnostics: Suggestions for an unmatched code (optional)
        """
        console = self.console

        console.print(f"[bold]{SEPARATOR}[/bold]")
        console.print(f"[bold]CÓDIGO:[/bold] {escape(label.raw)}")
        console.print(f"[bold]TAMANHO:[/bold] {label.length} dígitos")
        console.print(f"[bold]TIPO:[/bold] {label.format.value}")
        console.print(DASH_SEPARATOR)

        if label.format == LabelFormat.LITORAL:
            self._print_litoral_fields(label)
        elif label.format == LabelFormat.EUROTEXTIL:
            self._print_eurotextil_fields(label)

        console.print(DASH_SEPARATOR)

        if label.error:
            console.print(f"[bold red]✗ ERRO: {escape(label.error)}[/bold red]")
            if diagnostics:
                self._print_diagnostics(diagnostics)
        else:
            self._print_match(label)

        console.print(f"{SEPARATOR}\n")

    def _print_litoral_fields(self, label: DecodedLabel) -> None:
        console = self.console
        console.print("[cyan]Estrutura LITORAL (33 dígitos):[/cyan]")
        console.print(f"  Posição 5-12  (código):     [yellow]{escape(label.code)}[/yellow]")
        console.print(f"  Posição 14-18 (quantidade): [yellow]{format_quantity(label.quantity)} MT[/yellow]")
        console.print(f"  Posição 19-32 (controle):   [dim]{escape(label.control)}[/dim]")
        console.print("  Cor: [yellow]MANUAL (operador digita)[/yellow]")

    def _print_eurotextil_fields(self, label: DecodedLabel) -> None:
        console = self.console
        console.print("[blue]Estrutura EUROTEXTIL GS1 (45 dígitos):[/blue]")
        console.print(f"  Posição 2-7   (PO):         [dim]{escape(label.po)}[/dim]")
        console.print(f"  Posição 11-17 (código):     [yellow]{escape(label.code)}[/yellow]")
        console.print(f"  Posição 27-29 (cor):        [yellow]#{escape(label.color)}[/yellow]")
        console.print(f"  Posição 31-35 (sequência):  [dim]{escape(label.sequence)}[/dim]")
        console.print(f"  Posição 37-41 (quantidade): [yellow]{format_quantity(label.quantity)} MT[/yellow]")

    def _print_match(self, label: DecodedLabel) -> None:
        console = self.console
        match = label.match
        product = label.product

        console.print("[bold green]✓ SUCESSO![/bold green]")
        console.print(f"  Método de busca: [cyan]{match.method.value}[/cyan]")
        if match.base_used:
            console.print(f"  Base usada: {escape(match.base_used)}")

        console.print("\n[bold]Produto encontrado:[/bold]")
        console.print(f"  Código:    {escape(product.product_code)}")
        console.print(f"  Descrição: {escape(product.description)}")
        console.print(f"  ERP:       {escape(product.erp_code)} - {escape(product.erp_name)}")
        console.print(f"  Fornecedor: {escape(product.supplier_group)}")

    def _print_diagnostics(self, diagnostics: Diagnostics) -> None:
        console = self.console

        console.print("\n[yellow]Sugestões:[/yellow]")
        console.print(f"  1. Código sem zeros: {escape(diagnostics.stripped)}")
        for truncation in diagnostics.truncations:
            console.print(f"  {truncation.cut}. Base (corte {truncation.cut}): {escape(truncation.base)}")

        console.print("\n[yellow]Produtos similares no banco:[/yellow]")
        if not diagnostics.similar_found:
            console.print(
                f'  [dim]Nenhum produto encontrado com "{escape(diagnostics.base_search)}"[/dim]'
            )
            return

        for similar in diagnostics.similar:
            console.print(
                f"  - {escape(similar.code)}: {escape(similar.description)} "
                f"[dim](ERP: {escape(similar.erp_code)} - {escape(similar.erp_name)})[/dim]"
            )

    # =========================================================================
    # CATALOG
    # =========================================================================

    def print_search(self, term: str, results: List[ProductView], limit: int) -> None:
        """
        Print free-text search results.

        Args:
            term: Search term
            results: Matching products (already capped at limit)
            limit: Result cap used by the search
        """
        console = self.console
        console.print(f'\n[bold]Buscando: "{escape(term)}"[/bold]\n')

        for product in results:
            console.print(f"[yellow]{escape(product.product_code)}[/yellow]")
            console.print(f"  {escape(product.description)}")
            console.print(f"  [dim]ERP: {escape(product.erp_code)} - {escape(product.erp_name)}[/dim]")
            console.print(f"  [dim]Fornecedor: {escape(product.supplier_group)}[/dim]\n")

        if len(results) >= limit:
            console.print(f"[dim]... e mais resultados (mostrando {limit})[/dim]")

        if not results:
            console.print("[red]Nenhum produto encontrado[/red]")
        else:
            console.print(f"[green]{len(results)} produto(s) encontrado(s)[/green]")

    def print_listing(
        self,
        groups: Dict[str, List[ProductView]],
        total: int,
        preview_limit: int = 10
    ) -> None:
        """
        Print the catalog grouped by supplier.

        Args:
            groups: Products per supplier group
            total: Number of products in the index
            preview_limit: Products shown per group
        """
        console = self.console
        console.print(f"\n[bold]TODOS OS PRODUTOS ({total})[/bold]\n")

        for supplier, products in groups.items():
            console.print(f"\n[bold]{escape(supplier)} ({len(products)} produtos)[/bold]")
            console.print(DASH_SEPARATOR)
            for product in products[:preview_limit]:
                console.print(
                    f"  [yellow]{escape(product.product_code)}[/yellow] - "
                    f"{escape(product.description[:self.preview_length])}"
                )
            if len(products) > preview_limit:
                console.print(f"  [dim]... e mais {len(products) - preview_limit}[/dim]")
