# === FILE: domain_crawler/config.py ===
"""
Loading and validation of the DomainCrawler configuration.
The schema is described with Pydantic; YAML and JSON files are accepted.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Optional, Union
from urllib.parse import urlparse

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_START_URL = "http://wiprodigital.com/"


class CrawlerConfig(BaseModel):
    """Configuration of a single crawl run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    start_url: str = Field(DEFAULT_START_URL, description="URL the crawl starts from.")
    concurrency: int = Field(8, ge=1, description="Number of pages fetched in parallel.")
    max_redirects: int = Field(10, ge=0, description="Longest chain of 301 redirects followed.")
    timeout: float = Field(10.0, gt=0, description="Timeout of one request (seconds).")
    crawl_timeout: Optional[float] = Field(None, gt=0, description="Deadline for the whole crawl (seconds).")
    user_agent: str = Field("DomainCrawler/1.0", min_length=1, description="User-Agent header.")
    extractor: Literal["heuristic", "soup"] = Field(
        "heuristic", description="Link extraction strategy."
    )
    resolve_relative: bool = Field(
        False, description="Resolve relative links against the page URL before filtering."
    )

    @field_validator("start_url", mode="before")
    def _check_start_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            parsed = urlparse(v)
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                raise ValueError(f"start_url must be an absolute http(s) URL, got {v!r}")
        return v


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> CrawlerConfig:
    """
    Read YAML or JSON and return a validated CrawlerConfig.

    With ``path=None`` the default ``configs/default.yaml`` is used when it
    exists, otherwise the built-in defaults. An explicit path that does not
    exist raises FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return CrawlerConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return CrawlerConfig(**data)


__all__ = ["CrawlerConfig", "DEFAULT_START_URL", "ValidationError", "load_config"]
