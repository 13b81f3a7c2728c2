"""
Environment variable substitution for configuration templates.
Replaces ${NAME} placeholders with values from an environment mapping.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, Tuple, Union


logger = logging.getLogger(__name__)


@dataclass
class SubstitutionResult:
    """Rendered text plus the variables that could not be resolved."""
    text: str
    missing: List[str] = field(default_factory=list)


class EnvSubstitutor:
    """
    Substitutes ${NAME} placeholders using a read-only environment mapping.

    Unset variables are reported once per distinct name and the placeholder
    is removed from the output. Replacement is a literal substring replace of
    the full placeholder text, applied in scan order, so every identical
    placeholder is replaced the first time it is seen.
    """

    # Non-greedy by construction: a name never spans a closing brace
    VAR_PATTERN = re.compile(r'\$\{([^}]+)\}')

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        """
        Initialize the substitutor.

        Args:
            env: Variable lookup (default: the process environment)
        """
        self.env = os.environ if env is None else env

    def scan(self, text: str) -> List[Tuple[str, str]]:
        """Return (placeholder, name) pairs in scan order, duplicates included."""
        return [(m.group(0), m.group(1)) for m in self.VAR_PATTERN.finditer(text)]

    def substitute(self, text: str, source: Union[str, Path] = "<string>") -> SubstitutionResult:
        """
        Substitute placeholders in text.

        Args:
            text: Template text containing ${NAME} references
            source: Name of the template, used in warnings

        Returns:
            SubstitutionResult with the rendered text and missing names
        """
        result = SubstitutionResult(text=text)

        for placeholder, name in self.scan(text):
            value = self.env.get(name)
            if value is None:
                if name not in result.missing:
                    logger.warning(f"{source}: env var {name} not found")
                    result.missing.append(name)
                value = ""
            result.text = result.text.replace(placeholder, value)

        return result

    def render_file(self, source: Union[str, Path], destination: Union[str, Path]) -> SubstitutionResult:
        """
        Render a template file to a destination file.

        Raises:
            OSError: If the source cannot be read or the destination written
        """
        source = Path(source)
        destination = Path(destination)

        # Bytes that are not UTF-8 (latin-1 configs) pass through unchanged
        content = source.read_text(encoding="utf-8", errors="surrogateescape")
        result = self.substitute(content, source=source)
        destination.write_text(result.text, encoding="utf-8", errors="surrogateescape")

        logger.debug(f"Rendered {source} -> {destination}")
        return result


def envsubst(
    source: Union[str, Path],
    destination: Union[str, Path],
    env: Optional[Mapping[str, str]] = None
) -> SubstitutionResult:
    """Render source to destination, substituting ${NAME} from env."""
    return EnvSubstitutor(env).render_file(source, destination)
