"""
CLI package for Image Duplicate Remover.

Provides the command-line interface that scans a primary and a secondary
directory and removes secondary images already present in the primary one.

Public API:
- main: Entry point for CLI execution
- CLIOrchestrator: CLI workflow orchestration class
- remove_duplicates: Delete or dry-run secondary duplicates
- print_duplicate_report: Display a duplicate mapping
"""

from __future__ import annotations

from .orchestrator import CLIOrchestrator, setup_logging
from .arg_parser import create_parser, parse_arguments
from .actions import remove_duplicates
from .reporting import print_duplicate_report


def main(argv=None) -> int:
    """
    Main entry point for the CLI.

    Delegates to CLIOrchestrator to execute the complete workflow.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    orchestrator = CLIOrchestrator(argv)
    return orchestrator.run()


__all__ = [
    'main',
    'CLIOrchestrator',
    'setup_logging',
    'create_parser',
    'parse_arguments',
    'remove_duplicates',
    'print_duplicate_report',
]
