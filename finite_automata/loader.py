"""
Spec loader for finite_automata.
Reads an automaton spec from a JSON or YAML file. The file is parsed only;
validation happens when the automaton is constructed.

YAML resolves bare scalars such as 0, 1, yes and no to int or bool, so
symbols and states that look like those must be quoted in YAML specs.
"""

import json
from pathlib import Path
from typing import Union

import structlog
import yaml

from .errors import SpecLoadError
from .models import AutomatonSpec

log = structlog.get_logger()

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


def load_spec(path: Union[str, Path]) -> AutomatonSpec:
    spec_path = Path(path)
    suffix = spec_path.suffix.lower()

    if suffix not in JSON_SUFFIXES | YAML_SUFFIXES:
        raise SpecLoadError(str(spec_path), f"unsupported file extension '{suffix}'")

    try:
        text = spec_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SpecLoadError(str(spec_path), str(e)) from e

    try:
        if suffix in JSON_SUFFIXES:
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SpecLoadError(str(spec_path), f"parse error: {e}") from e

    if not isinstance(data, dict):
        raise SpecLoadError(str(spec_path), f"top level must be a mapping, got {type(data).__name__}")

    log.info("spec_loaded", path=str(spec_path), format=suffix.lstrip("."))
    return AutomatonSpec.model_validate(data)
