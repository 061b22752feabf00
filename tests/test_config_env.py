from pathlib import Path
from typing import Any

from contractgen.config import load_options
from contractgen.config.schema import SEED_ENV


def test_env_seed_integer(monkeypatch: Any) -> None:
    monkeypatch.setenv(SEED_ENV, "42")
    assert load_options().seed == 42


def test_env_seed_text() -> None:
    assert load_options(env={SEED_ENV: "checkout-tests"}).seed == "checkout-tests"


def test_env_seed_beats_yaml(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("seed: 1\n", encoding="utf-8")
    assert load_options(cfg_file, env={SEED_ENV: "-7"}).seed == -7


def test_explicit_seed_beats_env() -> None:
    assert load_options(env={SEED_ENV: "42"}, seed=5).seed == 5


def test_empty_env_seed_ignored(monkeypatch: Any) -> None:
    monkeypatch.setenv(SEED_ENV, "")
    assert load_options().seed is None
