"""
CLI workflow orchestration for Image Duplicate Remover.

Provides the CLIOrchestrator class that coordinates the CLI workflow from
argument parsing through removal of secondary duplicates.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..database import FingerprintIndex
from ..models import FingerprintKey, MatchResult, format_size
from ..scanner import find_image_files, index_files_parallel, find_matching
from ..user_config import get_user_config
from ..utils.exporters import export_results
from ..utils.validators import validate_directory, validate_workers, directories_overlap
from .arg_parser import parse_arguments
from .reporting import print_duplicate_report
from .actions import remove_duplicates


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure logging for the CLI.

    Args:
        verbose: Enable verbose (DEBUG level) logging

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    return logging.getLogger(__name__)


class CLIOrchestrator:
    """
    Orchestrates the CLI workflow.

    Manages the complete lifecycle from argument parsing through scanning,
    indexing, matching, reporting and removal.
    """

    def __init__(self, argv: Optional[list[str]] = None):
        """
        Initialize the orchestrator.

        Args:
            argv: Argument list to parse instead of sys.argv
        """
        self.argv = argv
        self.logger = None
        self.args = None
        self.key = FingerprintKey.CONTENT_HASH
        self.primary_files: list[str] = []
        self.secondary_files: list[str] = []
        self.result: Optional[MatchResult] = None
        self.stats: Optional[dict] = None

    def run(self) -> int:
        """
        Execute the complete CLI workflow.

        Returns:
            Exit code (0 for success, 1 for error)

        Workflow phases:
        1. Setup & argument parsing
        2. Validation
        3. File scanning
        4. Indexing, matching
        5. Reporting & export
        6. Removal
        """
        exit_code = self._setup_phase()
        if exit_code != 0:
            return exit_code

        exit_code = self._validate_phase()
        if exit_code != 0:
            return exit_code

        self._scan_phase()

        index = FingerprintIndex(get_user_config().index_db_file)
        try:
            exit_code = self._match_phase(index)
        finally:
            index.close()
        if exit_code != 0:
            return exit_code

        exit_code = self._report_phase()
        if exit_code != 0:
            return exit_code

        self._action_phase()
        return 0

    def _setup_phase(self) -> int:
        """
        Phase 1: Parse arguments and setup logging.

        Returns:
            0 for success, non-zero for error
        """
        self.args = parse_arguments(self.argv)
        self.logger = setup_logging(self.args.verbose)
        self.key = FingerprintKey(self.args.key)
        self.args.primary = self.args.primary.resolve()
        self.args.secondary = self.args.secondary.resolve()
        return 0

    def _validate_phase(self) -> int:
        """
        Phase 2: Validate directories and options.

        Returns:
            0 for success, 1 for validation error
        """
        for label, directory in (('Primary', self.args.primary), ('Secondary', self.args.secondary)):
            is_valid, error = validate_directory(directory)
            if not is_valid:
                self.logger.error(f"{label} directory ({directory}): {error}")
                return 1

        is_valid, error = validate_workers(self.args.workers)
        if not is_valid:
            self.logger.error(error)
            return 1

        if directories_overlap(self.args.primary, self.args.secondary):
            self.logger.warning(
                "Primary and secondary directories overlap; "
                "of files found in both, the first copy of each image is kept"
            )

        return 0

    def _scan_phase(self) -> None:
        """Phase 3: Enumerate image files in both directories."""
        recursive = not self.args.no_recursive

        self.logger.info(f"Scanning {self.args.primary} for images...")
        self.primary_files = find_image_files(self.args.primary, recursive=recursive)
        self.logger.info(f"Found {len(self.primary_files):,} primary image files")

        self.logger.info(f"Scanning {self.args.secondary} for images...")
        self.secondary_files = find_image_files(self.args.secondary, recursive=recursive)
        self.logger.info(f"Found {len(self.secondary_files):,} secondary image files")

    def _match_phase(self, index: FingerprintIndex) -> int:
        """
        Phase 4: Fingerprint both lists into the index and match them.

        Returns:
            0 for success, 1 if indexing or matching failed
        """
        if not index.is_temporary:
            # Index lifetime is one run
            index.clear()

        all_files = list(dict.fromkeys(self.primary_files + self.secondary_files))
        if all_files:
            self.logger.info(f"Fingerprinting {len(all_files):,} files...")
            index_stats = index_files_parallel(
                all_files,
                index,
                max_workers=self.args.workers,
                show_progress=not self.args.no_progress,
                logger=self.logger,
            )
            self.logger.debug(f"Index stats: {index.get_stats()}")
            if index_stats.store_errors:
                self.logger.error(
                    f"Could not index {index_stats.store_errors:,} fingerprinted files; "
                    "matching would miss their duplicates"
                )
                self.logger.error("Aborting without modifying any files")
                return 1

        self.logger.info(f"Finding duplicates by {self.key.value}...")
        self.result = find_matching(
            self.primary_files,
            self.secondary_files,
            index,
            key=self.key,
            max_workers=self.args.workers,
            logger=self.logger,
        )

        if not self.result:
            self.logger.error(f"Matching failed ({self.result.status.value}): {self.result.reason}")
            self.logger.error("Aborting without modifying any files")
            return 1

        self.logger.info(
            f"Found {self.result.duplicate_count:,} duplicates of "
            f"{len(self.result.mapping):,} primary files"
        )
        return 0

    def _report_phase(self) -> int:
        """
        Phase 5: Display report, handle exports.

        Returns:
            0 for success, 1 if the export could not be written
        """
        print_duplicate_report(self.result.mapping, self.key)

        if self.args.export:
            try:
                export_results(
                    self.result.mapping,
                    self.args.export,
                    self.args.export_format,
                    key=self.key,
                )
            except OSError as e:
                self.logger.error(f"Cannot write export file {self.args.export}: {e}")
                return 1
            self.logger.info(f"Results exported to: {self.args.export}")

        return 0

    def _action_phase(self) -> None:
        """Phase 6: Remove secondary duplicates and show statistics."""
        if not self.result.mapping:
            self.logger.info("Nothing to remove")
            return

        dry_run = self.args.dry_run
        if dry_run:
            self.logger.info("[DRY RUN MODE - No files will be modified]")

        self.stats = remove_duplicates(
            self.result.mapping,
            dry_run=dry_run,
            logger=self.logger,
        )

        self.logger.info(f"Processed: {self.stats['processed']:,} files")
        if self.stats['skipped'] > 0:
            self.logger.info(f"Skipped: {self.stats['skipped']:,} files")
        self.logger.info(f"Errors: {self.stats['errors']}")
        self.logger.info(
            f"Space {'would be ' if dry_run else ''}saved: {format_size(self.stats['space_saved'])}"
        )


__all__ = ['CLIOrchestrator', 'setup_logging']
