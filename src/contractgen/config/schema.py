"""Typed generation options and their loader."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, model_validator

ErrorPolicy = Literal["lenient", "strict"]

SEED_ENV = "CONTRACTGEN_SEED"

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class GenerationOptions(BaseModel):
    """Immutable snapshot of the knobs that shape generated data.

    The same instance is handed unmodified to every recursive call.
    """

    max_recursion_depth: conint(ge=0) = 20
    min_count: conint(ge=0) = 1
    max_count: conint(ge=0) = 10
    min_text_length: conint(ge=0) = 3
    max_text_length: conint(ge=0) = 20
    always_present: bool = False
    use_property_names: bool = False
    error_policy: ErrorPolicy = "lenient"
    seed: int | str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="after")
    def _check_bounds(self) -> "GenerationOptions":
        if self.min_count > self.max_count:
            raise ValueError("min_count must not exceed max_count")
        if self.min_text_length > self.max_text_length:
            raise ValueError("min_text_length must not exceed max_text_length")
        return self

    @property
    def strict(self) -> bool:
        """Return ``True`` when property failures abort generation."""

        return self.error_policy == "strict"


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_options(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
    **overrides: Any,
) -> GenerationOptions:
    """Load generation options from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    ``CONTRACTGEN_SEED`` environment variable < keyword ``overrides``.
    """

    with (
        importlib_resources.files("contractgen.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            user = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, user)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    if environ.get(SEED_ENV):
        raw = environ[SEED_ENV]
        merged["seed"] = int(raw) if raw.lstrip("-").isdigit() else raw

    merged = deep_merge_dicts(merged, {k: v for k, v in overrides.items() if v is not None})
    return GenerationOptions.model_validate(merged)


__all__ = [
    "ErrorPolicy",
    "GenerationOptions",
    "SEED_ENV",
    "deep_merge_dicts",
    "load_options",
]
