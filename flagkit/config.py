# Flagkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declaration loader that builds a `FlagSet` from a YAML or TOML file.

Only flag *declarations* come from the file. Flag values are still taken
exclusively from command-line tokens.

Example (YAML):
    program: server
    flags:
      - name: port
        type: number
        alias: p
        description: Port to bind
        default: 8080
      - name: include
        type: list
        alias: i
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from flagkit.exceptions import ConfigError
from flagkit.logger import logger
from flagkit.parser.flag_set import FlagSet
from flagkit.parser.flag_type import FlagType
from flagkit.protocols import ArgumentSource, OutputSink


class RawFlag(BaseModel):
    """Raw flag declaration as read from a config file."""

    name: str
    type: FlagType = FlagType.STRING
    description: str = ""
    alias: str | None = None
    default: bool | float | str | list[str] | None = None

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> FlagType:
        if isinstance(value, FlagType):
            return value
        return FlagType(value)


class FlagSetConfig(BaseModel):
    """Declarations for one `FlagSet`."""

    program: str | None = None
    flags: list[RawFlag] = Field(default_factory=list)

    def to_flag_set(
        self,
        argument_source: ArgumentSource | None = None,
        output: OutputSink | None = None,
    ) -> FlagSet:
        flag_set = FlagSet(self.program, argument_source=argument_source, output=output)
        for raw_flag in self.flags:
            flag_set.declare(
                raw_flag.type,
                raw_flag.name,
                raw_flag.description,
                raw_flag.alias,
                raw_flag.default,
            )
        return flag_set


def loader(
    file_path: Path | str,
    argument_source: ArgumentSource | None = None,
    output: OutputSink | None = None,
) -> FlagSet:
    """
    Load flag declarations from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the declaration file (.yaml, .yml or .toml).
        argument_source (ArgumentSource | None): Passed through to the `FlagSet`.
        output (OutputSink | None): Passed through to the `FlagSet`.

    Returns:
        FlagSet: A registry with every declared flag, in file order.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file format is unsupported or its contents are invalid.
        FlagDefinitionError: If two declarations collide or one is malformed.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a dictionary with a list of flags.\n"
            "Example:\n"
            "program: 'my-tool'\n"
            "flags:\n"
            "  - name: 'verbose'\n"
            "    type: 'boolean'\n"
            "    alias: 'v'"
        )

    try:
        config = FlagSetConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid flag configuration in {path}:\n{error}") from error

    logger.debug("Loaded %d flag declaration(s) from %s", len(config.flags), path)
    return config.to_flag_set(argument_source=argument_source, output=output)
