"""Typer-based command line interface for fixture generation.

``generate`` imports a type given as ``module:QualifiedName`` and prints one
or more generated instances as JSON.  ``describe`` prints how the same target
would be classified.

Exit codes
----------
0 success
2 usage error
3 target cannot be imported
4 configuration error
5 generation error (unsupported type, strict-mode property failure)
"""

from __future__ import annotations

import importlib
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import GenerationOptions, load_options
from .generator import ContractGenerator
from .synth.descriptor import TypeDescriptor, describe as describe_type
from .utils.serialize import to_primitive

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="contractgen",
    help="Generate randomized test fixtures. Use 'contractgen generate module:Type'.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _import_target(target: str) -> Any:
    """Return the object named by ``module:QualifiedName``."""

    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise ImportError(f"Expected 'module:Name', got {target!r}")
    obj: Any = importlib.import_module(module_name)
    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise ImportError(f"{module_name!r} has no attribute {qualname!r}") from None
    return obj


def _parse_seed(raw: str | None) -> int | str | None:
    if raw is None:
        return None
    return int(raw) if raw.lstrip("-").isdigit() else raw


def _label(tp: Any) -> str:
    if isinstance(tp, type):
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)


def _describe_payload(desc: TypeDescriptor) -> dict[str, Any]:
    return {
        "kind": desc.kind.value,
        "target": _label(desc.target),
        "origin": _label(desc.origin) if desc.origin is not None else None,
        "args": [_label(a) for a in desc.args],
        "rank": desc.rank,
    }


def _load_target(target: str) -> Any:
    try:
        return _import_target(target)
    except ImportError as exc:
        _safe_exit(3, str(exc))


@app.callback()
def main() -> None:
    """Entry point for the contractgen command group."""
    pass


@app.command()
def generate(  # noqa: PLR0913
    target: str = typer.Argument(..., help="Type to generate, as module:QualifiedName"),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of instances"),  # noqa: B008
    seed: Optional[str] = typer.Option(  # noqa: B008
        None, "--seed", help="Seed for reproducible output (integer or text)"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    strict: bool | None = typer.Option(  # noqa: B008
        None,
        "--strict/--lenient",
        help="Abort on the first property that cannot be filled",
    ),
    always_present: bool = typer.Option(  # noqa: B008
        False, "--always-present", help="Never leave optional values empty"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Log skipped properties to stderr"
    ),
) -> None:
    """Print generated instances of ``target`` as JSON."""

    try:
        options: GenerationOptions = load_options(
            config_path,
            seed=_parse_seed(seed),
            error_policy=None if strict is None else ("strict" if strict else "lenient"),
            always_present=always_present or None,
        )
    except (ValidationError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])

    if verbose:
        logging.basicConfig(level=logging.INFO, stream=sys.stderr)

    tp = _load_target(target)
    generator = ContractGenerator(options)
    try:
        values = generator.generate_many(tp, count)
    except Exception as exc:  # noqa: BLE001 - reported as a generation failure
        msg = str(exc)
        if verbose:
            msg = f"{type(exc).__name__}: {msg}"
        _safe_exit(5, msg)

    payload = to_primitive(values[0] if count == 1 else values)
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command()
def describe(
    target: str = typer.Argument(..., help="Type to classify, as module:QualifiedName"),
) -> None:
    """Print the production rule that applies to ``target``."""

    tp = _load_target(target)
    typer.echo(json.dumps(_describe_payload(describe_type(tp)), indent=2))


__all__ = ["app"]
