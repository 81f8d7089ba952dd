"""Pydantic configuration for a query run, and its YAML/CLI assembly."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

import yaml
from pydantic import AnyUrl, BaseModel, ConfigDict, Field, ValidationError, field_validator

from .document import DEFAULT_PARSER
from .io_utils import STDIO

DEFAULT_SELECTOR = "html"


class QueryConfig(BaseModel):
    """Everything needed to select and render nodes from one document."""

    input_path: str = Field(
        STDIO, alias="inputPath", description="Input file; '-' reads standard input."
    )
    output_path: str = Field(
        STDIO, alias="outputPath", description="Output file; '-' writes standard output."
    )
    selector: str = Field(
        DEFAULT_SELECTOR, description="CSS selector; a list of tokens is joined with spaces."
    )
    remove_nodes: List[str] = Field(
        default_factory=list,
        alias="removeNodes",
        description="Selectors whose matches are detached before rendering.",
    )
    attributes: List[str] = Field(
        default_factory=list,
        description="Attribute names to print instead of markup, in request order.",
    )
    base: Optional[AnyUrl] = Field(
        None, description="Absolute URL used to resolve relative hrefs."
    )
    detect_base: bool = Field(
        False,
        alias="detectBase",
        description="Prefer the document's <base href> over the explicit base.",
    )
    text_only: bool = Field(
        False, alias="textOnly", description="Print text content only."
    )
    ignore_whitespace: bool = Field(
        False,
        alias="ignoreWhitespace",
        description="In text mode, skip whitespace-only text nodes.",
    )
    pretty_print: bool = Field(
        False, alias="prettyPrint", description="Pretty-print the matched markup."
    )
    parser: Literal["html.parser", "lxml", "html5lib"] = Field(
        DEFAULT_PARSER, description="Tree builder handed to BeautifulSoup."
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @field_validator("selector", mode="before")
    @classmethod
    def _join_selector(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            value = " ".join(str(part) for part in value)
        if isinstance(value, str) and not value.strip():
            return DEFAULT_SELECTOR
        return value

    @property
    def link_rewriting(self) -> bool:
        return self.base is not None or self.detect_base


def load_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping of options.")
    return data


def build_config(args: argparse.Namespace) -> QueryConfig:
    """Overlay explicitly given CLI values on the optional YAML config file."""
    data: Dict[str, Any] = {}
    config_path = getattr(args, "config", None)
    if config_path is not None:
        try:
            data.update(load_config_file(config_path))
        except (OSError, yaml.YAMLError) as exc:
            raise SystemExit(f"Could not load config {config_path}: {exc}") from exc

    for key, value in vars(args).items():
        if key == "config" or value is None:
            continue
        if isinstance(value, list) and not value:
            continue
        # CLI names win over any alias spelling used in the file.
        alias = QueryConfig.model_fields[key].alias
        if alias:
            data.pop(alias, None)
        data[key] = value

    try:
        return QueryConfig.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc


__all__ = ["DEFAULT_SELECTOR", "QueryConfig", "build_config", "load_config_file"]
