"""
Argument parsing for the CLI interface.

Provides functions to create and configure the argument parser for the
duplicate remover command-line interface.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .. import __version__
from ..user_config import get_user_config
from ..utils.exporters import EXPORT_FORMATS


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance

    Notes:
        - Defaults for --key and --workers come from the user configuration
        - Nothing is removed unless --dry-run is absent
    """
    user_config = get_user_config()

    parser = argparse.ArgumentParser(
        prog='dupremover',
        usage='%(prog)s [options] <primary directory> <secondary directory>',
        description='Remove images from the secondary directory that already exist in the primary directory',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  %(prog)s ~/Pictures /media/backup/Pictures --dry-run
      Show which files in the backup would be removed

  %(prog)s ~/Pictures /media/backup/Pictures --key filesize -n
      Coarser matching by file size only

  %(prog)s ~/Pictures /media/backup/Pictures -e dupes.csv --export-format csv -n
      Export the duplicate mapping for external review

Version {__version__}
        """
    )

    parser.add_argument(
        'primary',
        type=Path,
        help='Directory whose images are kept'
    )
    parser.add_argument(
        'secondary',
        type=Path,
        help='Directory whose duplicate images are removed'
    )

    parser.add_argument(
        '-V', '--version',
        action='version',
        version=__version__,
        help='Version number'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output, will print which file is currently being processed'
    )

    parser.add_argument(
        '-n', '--dry-run',
        action='store_true',
        help='Try it out without actually removing anything'
    )

    parser.add_argument(
        '-k', '--key',
        choices=['sha256', 'filesize'],
        default=user_config.default_key,
        help=f'Fingerprint used to detect duplicates. Default: {user_config.default_key}'
    )

    parser.add_argument(
        '-r', '--no-recursive',
        action='store_true',
        help='Do not scan subdirectories'
    )

    parser.add_argument(
        '-w', '--workers',
        type=int,
        default=user_config.default_workers,
        help=f'Number of parallel workers. Default: {user_config.default_workers}'
    )

    parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Disable progress bars (useful for piping output)'
    )

    parser.add_argument(
        '-e', '--export',
        type=Path,
        help='Export the duplicate mapping to a file'
    )

    parser.add_argument(
        '--export-format',
        choices=list(EXPORT_FORMATS),
        default='txt',
        help='Export format. Default: txt'
    )

    return parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: List of argument strings (default: sys.argv)

    Returns:
        Parsed arguments as Namespace object

    Examples:
        >>> args = parse_arguments(['/photos', '/backup', '--dry-run'])
        >>> args.dry_run
        True
    """
    parser = create_parser()
    return parser.parse_args(argv)


__all__ = [
    'create_parser',
    'parse_arguments',
]
