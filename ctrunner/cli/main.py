"""Main CLI entry point for the ct task."""

import argparse
import sys
from typing import Optional

from .commands import run_ct


LOG_LEVELS = ['debug', 'info', 'warn', 'error']


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ct CLI."""
    parser = argparse.ArgumentParser(
        prog='ct',
        description='Run Common Test suites for a project'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Run command
    run_parser = subparsers.add_parser('run', help='Run the test suites')
    run_parser.add_argument(
        '--surefire',
        action='store_true',
        help='Enable Surefire-compatible XML output'
    )
    run_parser.add_argument(
        '--cover',
        action='store_true',
        help='Export coverage data (compile with coverage enabled first)'
    )
    run_parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output, including the runner command line'
    )
    run_parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    run_parser.add_argument(
        '--project',
        type=str,
        metavar='FILE',
        help='Project file (default: ct.yaml in the current directory)'
    )
    run_parser.add_argument(
        '--env',
        type=str,
        help='Build environment (default: $CT_ENV, then the project file, then "test")'
    )
    run_parser.add_argument(
        '--log-level',
        choices=LOG_LEVELS,
        default='info',
        help='Set log level'
    )

    # Envsubst command
    subst_parser = subparsers.add_parser(
        'envsubst',
        help='Render a ${NAME} template against the environment'
    )
    subst_parser.add_argument(
        '--in',
        dest='src',
        required=True,
        help='Path to template file'
    )
    subst_parser.add_argument(
        '--out',
        dest='dst',
        required=True,
        help='Path to output file'
    )
    subst_parser.add_argument(
        '--log-level',
        choices=LOG_LEVELS,
        default='info',
        help='Set log level'
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'run':
        return run_ct(parsed_args)
    elif parsed_args.command == 'envsubst':
        from ctrunner.cli.commands import render_template
        return render_template(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
