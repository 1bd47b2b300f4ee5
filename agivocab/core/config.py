"""Configuration loading and validation."""

import argparse
import codecs
import json

from pydantic import BaseModel, ValidationError, field_validator, model_validator

from agivocab.utils.constants import Constants
from agivocab.utils.helpers import expand_file_path


class Config(BaseModel):
    """Run configuration (JSON config file merged with CLI arguments)."""

    vocabulary: str = Constants.DEFAULT_VOCABULARY_FILE
    output: str | None = None
    reports: str | None = None
    encoding: str = Constants.DEFAULT_ENCODING
    header: str = Constants.TOKEN_TABLE_HEADER
    debug_words: list[str] = []
    verbose: bool = False
    debug: bool = False

    @field_validator("debug_words", mode="before")
    @classmethod
    def parse_string_list(cls, value):
        """Accept a comma-separated string as well as a list."""
        if value is None:
            return []
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        """Require a known single-byte codec."""
        try:
            info = codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e

        if info.name.startswith("utf"):
            raise ValueError(f"encoding {value} is not a single-byte code page")
        # A single-byte code page decodes every byte to exactly one character
        try:
            decoded = bytes(range(256)).decode(info.name, errors="replace")
        except LookupError as e:
            raise ValueError(f"{value} is not a text encoding") from e
        if len(decoded) != 256:
            raise ValueError(f"encoding {value} is not a single-byte code page")
        return info.name

    @field_validator("header")
    @classmethod
    def validate_header(cls, value: str) -> str:
        """The header occupies exactly one line."""
        if "\n" in value or "\r" in value:
            raise ValueError("header must be a single line")
        return value

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Config":
        """Check options that depend on each other."""
        if self.debug_words and not (self.debug and self.verbose):
            raise ValueError("--debug-words requires BOTH --debug and --verbose flags")
        return self


def _load_json_config(config_path: str | None) -> dict:
    """Read a JSON config file, or return an empty dict."""
    if not config_path:
        return {}

    with open(expand_file_path(config_path), "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a JSON object")
    return data


def load_config(
    config_path: str | None,
    args: argparse.Namespace | None = None,
    parser: argparse.ArgumentParser | None = None,
) -> Config:
    """Build the run configuration.

    Values from the JSON config file are overridden by CLI arguments that
    were actually given (not None).

    Args:
        config_path: Optional JSON config file
        args: Parsed CLI arguments
        parser: Argument parser, used to report invalid configuration

    Returns:
        Validated Config
    """
    try:
        data = _load_json_config(config_path)
    except (OSError, ValueError) as e:
        if parser:
            parser.error(f"Cannot read config file: {e}")
        raise

    if args is not None:
        for field_name in Config.model_fields:
            value = getattr(args, field_name, None)
            if value is None:
                continue
            # store_true flags only override when set
            if value is False and field_name in ("verbose", "debug"):
                continue
            data[field_name] = value

    try:
        return Config(**data)
    except ValidationError as e:
        if parser:
            parser.error(str(e))
        raise
