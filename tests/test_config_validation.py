from pathlib import Path

import pytest
from pydantic import ValidationError

from contractgen.config import GenerationOptions, load_options


def test_yaml_override(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("max_count: 4\nerror_policy: strict\n", encoding="utf-8")
    opts = load_options(cfg_file, env={})
    assert opts.max_count == 4
    assert opts.strict is True
    assert opts.min_count == 1


def test_empty_yaml_keeps_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "empty.yml"
    cfg_file.write_text("", encoding="utf-8")
    assert load_options(cfg_file, env={}) == GenerationOptions()


def test_unknown_key_rejected(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown: true\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_options(cfg_file, env={})


@pytest.mark.parametrize(
    "overrides",
    [
        {"min_count": 5, "max_count": 2},
        {"min_text_length": 30},
        {"max_recursion_depth": -1},
        {"error_policy": "sometimes"},
    ],
)
def test_invalid_values_rejected(overrides: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        GenerationOptions(**overrides)


def test_options_are_frozen() -> None:
    opts = GenerationOptions()
    with pytest.raises(ValidationError):
        opts.max_count = 3  # type: ignore[misc]


def test_keyword_overrides_win(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("max_count: 4\n", encoding="utf-8")
    opts = load_options(cfg_file, env={}, max_count=6, always_present=None)
    assert opts.max_count == 6
    assert opts.always_present is False
