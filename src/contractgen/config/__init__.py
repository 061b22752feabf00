"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_options`
    3. Environment variable ``CONTRACTGEN_SEED`` for the random seed
"""

from .schema import ErrorPolicy, GenerationOptions, load_options

__all__ = ["ErrorPolicy", "GenerationOptions", "load_options"]
