"""
Envsubst command: render a ${NAME} template against the process environment.

Usage:
  ct envsubst --in <template> --out <output>

Unset variables are reported as warnings and removed from the output.
"""

import logging
from argparse import Namespace
from pathlib import Path

from ctrunner.variables import envsubst

from .run import configure_logging


logger = logging.getLogger(__name__)


def render_template(args: Namespace) -> int:
    """Render args.src to args.dst. Returns 0 on success, 1 on I/O failure."""
    configure_logging(args)

    src_path = Path(args.src)
    dst_path = Path(args.dst)

    if not src_path.exists():
        logger.error(f"Template not found: {src_path}")
        return 1

    try:
        dst_path.parent.mkdir(parents=True, exist_ok=True)
        result = envsubst(src_path, dst_path)
    except OSError as e:
        logger.error(f"Failed to render template: {e}")
        return 1

    if result.missing:
        logger.info(f"Rendered {dst_path} with {len(result.missing)} unset variable(s)")
    else:
        logger.info(f"Rendered {dst_path}")
    return 0
