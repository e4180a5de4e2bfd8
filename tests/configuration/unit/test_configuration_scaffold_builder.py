"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from pattern_validator.configuration import build_configured_checker, load_configuration
from pattern_validator.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Checker configuration for pattern-validator" in scaffold
    assert "patterns:" in scaffold
    assert "flags:" in scaffold
    assert "fields:" in scaffold
    assert "extra: ignore" in scaffold
    assert "# Optional re flags" in scaffold


def test_write_placeholder_configuration_writes_loadable_file(tmp_path: Path) -> None:
    output_path = tmp_path / "patterns.yaml"

    written_path = write_placeholder_configuration(output_path)
    checker = build_configured_checker(load_configuration(written_path))

    assert written_path == output_path.resolve()
    assert output_path.exists()
    result = checker("colinhacks/zod")
    assert result is not None
    assert result.model_dump() == {"owner": "colinhacks", "repo": "zod"}


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "patterns.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
