"""Coverage spec file for the test runner."""

import logging
from pathlib import Path
from typing import Union


logger = logging.getLogger(__name__)

COVER_SPEC_TEMPLATE = (
    "{{incl_app, '{app}', details}}.\n"
    "{{export, \"{coverdata}\"}}.\n"
)


def render_cover_spec(app: str, coverdata: Union[str, Path]) -> str:
    """Render the two-line coverage spec for an application."""
    return COVER_SPEC_TEMPLATE.format(app=app, coverdata=coverdata)


def write_cover_spec(path: Union[str, Path], app: str, coverdata: Union[str, Path]) -> Path:
    """Write the coverage spec to path, overwriting any previous file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_cover_spec(app, coverdata), encoding="utf-8")
    logger.debug(f"Wrote coverage spec: {path}")
    return path
