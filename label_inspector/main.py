"""
==============================================================================
Supplier Label Inspector - Application Entry Point
==============================================================================

Debugging tool for supplier label codes that fail to match the catalog.

Usage:
------
    label-inspector                       # Interactive mode
    label-inspector "CODIGO_AQUI"         # Decode a specific code
    label-inspector --testes              # Run the built-in sample labels
    label-inspector --buscar "4170"       # Search products by partial code/name
    label-inspector --listar              # List all products
    label-inspector --catalog other.json  # Use another catalog file

==============================================================================
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from label_inspector.config import Settings, get_settings
from label_inspector.core import AppException
from label_inspector.services import InspectorService
from label_inspector.shell import CommandRunner, InteractiveShell
from label_inspector.utils.report import ReportPrinter


logger = logging.getLogger(__name__)


# ============================================================================
# LOGGING SETUP
# ============================================================================

def configure_logging(settings: Settings) -> None:
    """Configure root logging (stderr, so reports on stdout stay clean)."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ============================================================================
# ARGUMENT PARSING
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="label-inspector",
        description="Ferramenta de debug - decodifica etiquetas LITORAL/EUROTEXTIL e busca o produto no catálogo",
    )
    parser.add_argument("code", nargs="*", help="Código de barras a testar (sem argumentos: modo interativo)")
    parser.add_argument("--testes", action="store_true", help="Rodar todos os testes automáticos")
    parser.add_argument("--buscar", metavar="TERMO", help="Buscar produto por nome/código")
    parser.add_argument("--listar", action="store_true", help="Listar todos os produtos")
    parser.add_argument("--catalog", metavar="ARQUIVO", help="Arquivo JSON do catálogo")
    parser.add_argument("--debug", action="store_true", help="Log detalhado")
    return parser


# ============================================================================
# APPLICATION
# ============================================================================

class Application:
    """
    Command-line application.

    Handles startup (settings, logging, catalog load) and dispatches to
    the requested mode.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        printer: Optional[ReportPrinter] = None
    ) -> None:
        self._settings = settings or get_settings()
        self._printer = printer or ReportPrinter(
            preview_length=self._settings.description_preview_length
        )

    def _apply_overrides(self, args: argparse.Namespace) -> None:
        """Apply command-line overrides on top of the loaded settings."""
        updates = {}
        if args.catalog:
            updates["products_file"] = args.catalog
        if args.debug:
            updates["debug"] = True
        if updates:
            self._settings = self._settings.model_copy(update=updates)

    def _load_service(self) -> Optional[InspectorService]:
        """Load the catalog; None when it cannot be loaded."""
        try:
            service = InspectorService.from_file(self._settings.products_path, self._settings)
        except AppException as e:
            logger.error(f"❌ Failed to load catalog: {e}")
            self._printer.print_error(f"Erro ao carregar {self._settings.products_file}: {e.message}")
            return None

        self._printer.print_catalog_loaded(service.index)
        return service

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the application.

        Args:
            argv: Command-line arguments (sys.argv[1:] if None)

        Returns:
            Process exit status
        """
        parser = build_parser()
        args = parser.parse_args(argv)
        if args.buscar is not None and not args.buscar.strip():
            parser.error("--buscar requer um termo de busca")

        self._apply_overrides(args)
        configure_logging(self._settings)

        self._printer.print_banner(self._settings.app_name)

        service = self._load_service()
        if service is None:
            return 1

        runner = CommandRunner(service, self._printer)

        if args.listar:
            runner.list_products()
        elif args.buscar is not None:
            runner.search(args.buscar)
        elif args.testes:
            runner.run_samples()
        elif args.code:
            runner.inspect("".join(args.code))
        else:
            InteractiveShell(runner, self._printer).run()

        return 0


def main() -> None:
    """Console script entry point."""
    sys.exit(Application().run())


if __name__ == "__main__":
    main()
