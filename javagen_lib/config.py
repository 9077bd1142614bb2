"""
Generator configuration: where files go, how many arities, which charset.

Values come from a GeneratorConfig built in code, optionally seeded from a
YAML file such as::

    output_dir: src-gen/main/java
    max_arity: 13
    charset: utf-8
"""
import codecs
import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = os.path.join("src-gen", "main", "java")
DEFAULT_MAX_ARITY = 13
DEFAULT_CHARSET = "utf-8"


class ConfigError(Exception):
    """Raised when the generator configuration is invalid or missing."""


@dataclass(frozen=True)
class GeneratorConfig:
    output_dir: str = DEFAULT_OUTPUT_DIR
    max_arity: int = DEFAULT_MAX_ARITY
    charset: str = DEFAULT_CHARSET

    def __post_init__(self) -> None:
        # bool is an int subclass, but "max_arity: yes" is certainly a typo
        if isinstance(self.max_arity, bool) or not isinstance(self.max_arity, int):
            raise ConfigError(f"max_arity must be an integer, got {self.max_arity!r}")
        if self.max_arity < 0:
            raise ConfigError(f"max_arity must not be negative, got {self.max_arity}")
        if not isinstance(self.output_dir, str) or not self.output_dir:
            raise ConfigError(f"output_dir must be a non-empty path, got {self.output_dir!r}")
        try:
            codecs.lookup(self.charset)
        except (LookupError, TypeError) as e:
            raise ConfigError(f"Unknown charset: {self.charset!r}") from e

    def with_overrides(self, **overrides: Any) -> "GeneratorConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


def load_config(path: str, base: Optional[GeneratorConfig] = None) -> GeneratorConfig:
    """
    Load a GeneratorConfig from a YAML file.

    Keys missing from the file keep the value of base (or the defaults).

    Raises:
        ConfigError: If the file is missing, is not a mapping or holds invalid values.
    """
    if not os.path.isfile(path):
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(GeneratorConfig)}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    config = (base or GeneratorConfig()).with_overrides(**data)
    logger.debug("Loaded config from %s: %s", path, config)
    return config
