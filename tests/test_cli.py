"""
==============================================================================
Command Line and Shell Tests
==============================================================================

Tests for argument dispatch, the interactive shell and report output.

==============================================================================
"""

from pathlib import Path
from typing import Iterable

import pytest
from rich.console import Console

from label_inspector.config import Settings
from label_inspector.main import Application, build_parser
from label_inspector.services import InspectorService
from label_inspector.shell import CommandRunner, InteractiveShell
from label_inspector.utils.report import ReportPrinter, format_quantity


# 33 characters with rich markup in the product code slice
MARKUP_LABEL = "00000" + "[/x]0000" + "0" + "00123" + "00099887766554"


def scripted_input(lines: Iterable[str]):
    """Line reader replaying the given lines, then signalling EOF."""
    pending = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(pending)
        except StopIteration:
            raise EOFError
    return read


class TestApplication:
    """Tests for command-line dispatch."""

    def test_decode_code_argument(self, settings: Settings, printer: ReportPrinter, console: Console):
        """Test a positional code is decoded and reported."""
        status = Application(settings, printer).run(["000004170000000012300099887766554"])
        output = console.export_text()
        assert status == 0
        assert "4 produtos carregados" in output
        assert "TIPO: LITORAL" in output
        assert "SUCESSO" in output
        assert "Método de busca: normalized" in output
        assert "Base usada: 417" in output
        assert "HELANCA LIGHT" in output

    def test_code_parts_are_joined(self, settings: Settings, printer: ReportPrinter, console: Console):
        """Test split positional arguments form a single code."""
        Application(settings, printer).run(["0000041700000000123", "00099887766554"])
        assert "CÓDIGO: 000004170000000012300099887766554" in console.export_text()

    def test_samples(self, settings: Settings, printer: ReportPrinter, console: Console):
        """Test the built-in sample battery."""
        status = Application(settings, printer).run(["--testes"])
        output = console.export_text()
        assert status == 0
        assert "EXECUTANDO TESTES AUTOMÁTICOS" in output
        assert output.count("Testando:") == 5
        assert "Produto 60000000 não encontrado" in output
        assert "Nenhum produto encontrado com \"6000\"" in output

    def test_search(self, settings: Settings, printer: ReportPrinter, console: Console):
        """Test free-text search flag."""
        Application(settings, printer).run(["--buscar", "helanca"])
        output = console.export_text()
        assert 'Buscando: "helanca"' in output
        assert "ERP: E1 - Helanca" in output
        assert "1 produto(s) encontrado(s)" in output

    def test_listing(self, settings: Settings, printer: ReportPrinter, console: Console):
        """Test supplier-grouped listing."""
        Application(settings, printer).run(["--listar"])
        output = console.export_text()
        assert "TODOS OS PRODUTOS (4)" in output
        assert "LITORAL (2 produtos)" in output
        assert "EUROTEXTIL (2 produtos)" in output

    def test_missing_catalog(self, tmp_path: Path, printer: ReportPrinter, console: Console, caplog):
        """Test catalog load failure stops with exit status 1."""
        settings = Settings(_env_file=None, products_file=str(tmp_path / "missing.json"))
        status = Application(settings, printer).run(["000004170000000012300099887766554"])
        assert status == 1
        output = console.export_text()
        assert "Erro ao carregar" in output
        assert "TIPO:" not in output
        assert "[CATALOG_NOT_FOUND]" in caplog.text

    def test_catalog_override(self, tmp_path: Path, catalog_file: Path, printer: ReportPrinter, console: Console):
        """Test --catalog replaces the configured catalog file."""
        settings = Settings(_env_file=None, products_file=str(tmp_path / "missing.json"))
        status = Application(settings, printer).run(["--catalog", str(catalog_file), "--listar"])
        assert status == 0
        assert "TODOS OS PRODUTOS (4)" in console.export_text()

    def test_empty_search_term_rejected(self, settings: Settings, printer: ReportPrinter, console: Console):
        """Test a blank --buscar term is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            Application(settings, printer).run(["--buscar", "  "])
        assert exc_info.value.code == 2
        assert "MODO INTERATIVO" not in console.export_text()

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.code == []
        assert not args.testes and not args.listar
        assert args.buscar is None


    def test_markup_in_code_argument(self, settings: Settings, printer: ReportPrinter, console: Console):
        """Test bracketed text in a code argument is printed literally."""
        status = Application(settings, printer).run([MARKUP_LABEL])
        output = console.export_text()
        assert status == 0
        assert "Produto [/x]0000 não encontrado" in output


class TestInteractiveShell:
    """Tests for the interactive command loop."""

    def make_shell(self, service: InspectorService, printer: ReportPrinter, lines=()):
        return InteractiveShell(CommandRunner(service, printer), printer, scripted_input(lines))

    def test_exit_commands(self, service: InspectorService, printer: ReportPrinter):
        """Test sair/exit/q stop the loop."""
        shell = self.make_shell(service, printer)
        for command in ("sair", "exit", "q"):
            assert shell.handle(command) is False

    def test_blank_line(self, service: InspectorService, printer: ReportPrinter, console: Console):
        """Test blank lines are ignored."""
        assert self.make_shell(service, printer).handle("   ") is True
        assert console.export_text() == ""

    def test_decode_digits(self, service: InspectorService, printer: ReportPrinter, console: Console):
        """Test bare digit strings are decoded."""
        shell = self.make_shell(service, printer)
        assert shell.handle("123") is True
        assert "Código inválido (3 dígitos, esperado 33 ou 45)" in console.export_text()

    def test_search_command(self, service: InspectorService, printer: ReportPrinter, console: Console):
        """Test buscar command."""
        self.make_shell(service, printer).handle("buscar crepe")
        assert "5142100" in console.export_text()

    def test_help(self, service: InspectorService, printer: ReportPrinter, console: Console):
        """Test ajuda shows both layouts."""
        self.make_shell(service, printer).handle("ajuda")
        output = console.export_text()
        assert "ESTRUTURA LITORAL (33 dígitos)" in output
        assert "ESTRUTURA EUROTEXTIL GS1 (45 dígitos, começa com 01)" in output

    def test_unknown_command(self, service: InspectorService, printer: ReportPrinter, console: Console):
        """Test unrecognised input prints a hint."""
        assert self.make_shell(service, printer).handle("abc") is True
        assert "Comando não reconhecido" in console.export_text()

    def test_run_until_exit(self, service: InspectorService, printer: ReportPrinter, console: Console):
        """Test the loop processes commands until sair."""
        shell = self.make_shell(service, printer, ["listar", "sair", "testes"])
        shell.run()
        output = console.export_text()
        assert "MODO INTERATIVO" in output
        assert "TODOS OS PRODUTOS (4)" in output
        assert "Até logo!" in output
        assert "EXECUTANDO TESTES" not in output

    def test_run_until_eof(self, service: InspectorService, printer: ReportPrinter, console: Console):
        """Test end of input leaves the loop."""
        self.make_shell(service, printer, ["000000326022600007400025117100856"]).run()
        output = console.export_text()
        assert "SATIN INDONESIA" in output
        assert "Até logo!" in output


class TestReport:
    """Tests for report formatting details."""

    def test_format_quantity(self):
        assert format_quantity(123.0) == "123"
        assert format_quantity(1.5) == "1.5"
        assert format_quantity(float("nan")) == "NaN"

    def test_eurotextil_fields(self, service: InspectorService, printer: ReportPrinter, console: Console):
        """Test EUROTEXTIL field breakdown."""
        label = service.decode("010000000005142100000000000012000010005000000")
        printer.print_label(label)
        output = console.export_text()
        assert "Posição 27-29 (cor):        #12" in output
        assert "Posição 37-41 (quantidade): 5000 MT" in output
        assert "Método de busca: exact" in output

    def test_diagnostics_output(self, service: InspectorService, printer: ReportPrinter, console: Console):
        """Test suggestions are printed for a not-found label."""
        label = service.decode("000516000000000050000123456789012")
        printer.print_label(label, service.diagnose(label))
        output = console.export_text()
        assert "1. Código sem zeros: 60000000" in output
        assert "2. Base (corte 2): 600000" in output
        assert "4. Base (corte 4): 6000" in output

    def test_label_fields_with_markup(self, service: InspectorService, printer: ReportPrinter, console: Console):
        """Test label fields and suggestions are not parsed as markup."""
        label = service.decode(MARKUP_LABEL)
        printer.print_label(label, service.diagnose(label))
        output = console.export_text()
        assert f"CÓDIGO: {MARKUP_LABEL}" in output
        assert "Posição 5-12  (código):     [/x]0000" in output
        assert "1. Código sem zeros: [/x]0000" in output
        assert "3. Base (corte 3): [/x]0" in output
        assert 'Nenhum produto encontrado com "[/x]"' in output

    def test_eurotextil_fields_with_markup(self, service: InspectorService, printer: ReportPrinter, console: Console):
        """Test EUROTEXTIL fields with brackets are printed literally."""
        digits = "01[red]0" + "000" + "[b]4210" + "000000000" + "[i]" + "0" + "[/b]0" + "0" + "05000" + "000"
        label = service.decode(digits)
        printer.print_label(label)
        output = console.export_text()
        assert "(PO):         [red]0" in output
        assert "(cor):        #[i]" in output
        assert "(sequência):  [/b]0" in output
