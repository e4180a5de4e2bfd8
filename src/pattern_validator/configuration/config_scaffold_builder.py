"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "patterns.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = r"""# Checker configuration for pattern-validator.
# The example below accepts GitHub repository references; replace it with your own.

# Regular expressions (Python syntax) tried in order. The first one that matches wins,
# even if its captures then fail validation. Use (?P<name>...) for named groups;
# anchors (^ and $) are not added for you.
patterns:
  - '^https?://github\.com/(?P<owner>[^/]+)/(?P<repo>[^/]+)$'
  - '^(?P<owner>[^/]+)/(?P<repo>[^/]+)$'

# Optional re flags applied to every pattern, e.g. IGNORECASE, MULTILINE, DOTALL, VERBOSE.
flags: []

# One entry per named group. Types: str, int, float, bool, decimal.
# Use the long form to make a group optional:
#   minutes: {type: int, required: false, default: 0}
fields:
  owner: str
  repo: str

# ignore: named groups without a field entry are dropped.
# forbid: such groups make validation fail.
extra: ignore
"""


def build_placeholder_configuration() -> str:
    """Build an example checker configuration with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the example checker configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Checker configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
