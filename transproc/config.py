"""
Pipeline configuration models and YAML I/O for transproc.

A pipeline config is an ordered list of steps, each naming a registered
function plus the extra arguments to bind to it::

    name: clean-prices
    description: Parse prices and keep the interesting columns
    steps:
      - fn: parse_numbers
        args: [["code"]]
      - fn: accept_columns
        args: [["code", "price"]]

A bare string step (``- to_string``) is shorthand for ``{fn: to_string}``.

An argument written as a mapping whose only key is ``pipeline`` is a nested
pipeline; it is built from the same registry and bound as a function, which
is how steps such as ``map_array`` or ``map_value`` get their mapping
function::

    steps:
      - fn: map_array
        args:
          - pipeline: [to_integer, to_float]

Key functions:
- load_pipeline_config(path) -> PipelineConfig: Load and validate from YAML.
- save_pipeline_config(config, path): Serialize to YAML.
- validate_steps_against_registry(config): Cross-check step names.
- build_pipeline(config) -> Transform: Compose the steps left-to-right.
- load_pipeline(path) -> Transform: Both of the above in one call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from functools import reduce
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from transproc.exceptions import PipelineConfigError
from transproc.function import Transform
from transproc.registry import FunctionRegistry, functions
from transproc.resolver import resolve

logger = logging.getLogger(__name__)


def _expand_shorthand(value: Any) -> Any:
    """Turn bare string steps into ``{"fn": <string>}``."""
    if not isinstance(value, list):
        return value
    return [{"fn": step} if isinstance(step, str) else step for step in value]


class StepConfig(BaseModel):
    """One pipeline step: a registered function and its bound arguments."""

    fn: str = Field(..., description="Name of a registered function")
    args: list[Any] = Field(
        default_factory=list,
        description="Extra arguments passed after the value on every call",
    )

    @field_validator("args", mode="before")
    @classmethod
    def _parse_nested_pipelines(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        parsed = []
        for arg in value:
            if isinstance(arg, dict) and set(arg) == {"pipeline"}:
                arg = NestedPipeline.model_validate(arg)
            elif callable(arg):
                raise ValueError(
                    f"Argument {arg!r} is a callable and cannot be stored in a config; "
                    "use {pipeline: [...]} to pass registered functions."
                )
            parsed.append(arg)
        return parsed


class NestedPipeline(BaseModel):
    """A pipeline passed as a step argument: ``{pipeline: [steps...]}``."""

    model_config = ConfigDict(extra="forbid")

    pipeline: list[StepConfig]

    @field_validator("pipeline", mode="before")
    @classmethod
    def _expand_shorthand_steps(cls, value: Any) -> Any:
        return _expand_shorthand(value)

    @model_validator(mode="after")
    def _check_pipeline_not_empty(self) -> NestedPipeline:
        if not self.pipeline:
            raise ValueError("A nested pipeline must contain at least one step.")
        return self


class PipelineConfig(BaseModel):
    """An ordered sequence of steps, run first to last."""

    name: str | None = None
    description: str = ""
    steps: list[StepConfig] = Field(default_factory=list)

    @field_validator("steps", mode="before")
    @classmethod
    def _expand_shorthand_steps(cls, value: Any) -> Any:
        return _expand_shorthand(value)

    @model_validator(mode="after")
    def _check_steps_not_empty(self) -> PipelineConfig:
        if not self.steps:
            raise ValueError("A pipeline must contain at least one step.")
        return self


def load_pipeline_config(path: str | Path) -> PipelineConfig:
    """Load and validate a pipeline YAML file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        PipelineConfigError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Pipeline config not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise PipelineConfigError(f"Pipeline config is empty: {path}")
    logger.info("Loaded pipeline config from %s", path)
    return PipelineConfig.model_validate(raw)


def save_pipeline_config(config: PipelineConfig, path: str | Path) -> None:
    """Serialize a PipelineConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# transproc pipeline\n")
        f.write("# Steps run top to bottom; args are bound after the value.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved pipeline config to %s", path)


def _iter_missing(
    steps: list[StepConfig], registry: FunctionRegistry, prefix: str = ""
) -> Iterator[tuple[str, str]]:
    """Yield ``(location, name)`` for every unregistered step, nested ones included."""
    for index, step in enumerate(steps):
        location = f"{prefix}{index}"
        if step.fn not in registry:
            yield location, step.fn
        for arg_index, arg in enumerate(step.args):
            if isinstance(arg, NestedPipeline):
                yield from _iter_missing(
                    arg.pipeline, registry, f"{location} arg {arg_index} > "
                )


def validate_steps_against_registry(
    config: PipelineConfig, registry: FunctionRegistry | None = None
) -> None:
    """Check that every step, including nested pipelines, names a registered function.

    All unknown names are reported together rather than failing on the
    first one.

    Raises:
        PipelineConfigError: If any step references an unregistered name.
    """
    if registry is None:
        registry = functions()
    missing = list(_iter_missing(config.steps, registry))
    if missing:
        details = "\n".join(f"  Step {loc}: {name!r}" for loc, name in missing)
        raise PipelineConfigError(
            f"The following steps reference unregistered functions:\n{details}"
        )


def _compose_steps(steps: list[StepConfig], registry: FunctionRegistry | None) -> Transform:
    units = []
    for step in steps:
        args = [
            _compose_steps(arg.pipeline, registry) if isinstance(arg, NestedPipeline) else arg
            for arg in step.args
        ]
        units.append(resolve(step.fn, *args, registry=registry))
    return reduce(lambda left, right: left >> right, units)


def build_pipeline(
    config: PipelineConfig, registry: FunctionRegistry | None = None
) -> Transform:
    """Resolve each step and chain them left-to-right.

    Nested ``{pipeline: [...]}`` arguments are built the same way and bound
    as functions. A single-step pipeline is returned as the plain
    ``Function``.

    Raises:
        PipelineConfigError: If any step references an unregistered name.
    """
    validate_steps_against_registry(config, registry)
    pipeline = _compose_steps(config.steps, registry)
    logger.info(
        "Built pipeline %s with %d step(s)",
        config.name or "<unnamed>",
        len(config.steps),
    )
    return pipeline


def load_pipeline(
    path: str | Path, registry: FunctionRegistry | None = None
) -> Transform:
    """Load a pipeline YAML file and build it."""
    return build_pipeline(load_pipeline_config(path), registry)
