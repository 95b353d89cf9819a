from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping


def _as_path(v: Any, default: Path) -> Path:
    if v is None:
        return default
    if isinstance(v, Path):
        return v
    if isinstance(v, str):
        return Path(v)
    raise TypeError(f"expected path-like value, got {type(v).__name__}")


def _as_int(v: Any, default: int) -> int:
    if v is None:
        return default
    if isinstance(v, bool):
        raise TypeError("expected int, got bool")
    if isinstance(v, int):
        return v
    if isinstance(v, str) and v.strip().isdigit():
        return int(v.strip())
    raise TypeError(f"expected int-like value, got {type(v).__name__}")


def _as_str(key: str, v: Any, default: str) -> str:
    if v is None:
        return default
    # YAML turns `version: 1.0` into a float; accept plain scalars as text.
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    if not isinstance(v, str):
        raise TypeError(f"{key} must be str, got {type(v).__name__}")
    return v


def _as_bool(key: str, v: Any, default: bool) -> bool:
    if v is None:
        return default
    if not isinstance(v, bool):
        raise TypeError(f"{key} must be bool, got {type(v).__name__}")
    return v


def _section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    value = raw.get(key)
    if value is not None and not isinstance(value, Mapping):
        raise TypeError(f"{key} must be mapping, got {type(value).__name__}")
    return value


TRANSPORTS = ("stdio", "http")


@dataclass
class ServerSettings:
    name: str = "Stateless MCP Server"
    version: str = "1.0.0"
    protocol_version: str = "2024-11-05"
    transport: str = "stdio"
    http_host: str = "127.0.0.1"
    http_port: int = 8080

    @classmethod
    def from_dict(cls, d: Mapping[str, Any] | None) -> "ServerSettings":
        d = d or {}
        transport = _as_str("transport", d.get("transport"), cls.transport)
        if transport not in TRANSPORTS:
            raise ValueError(f"transport must be one of {TRANSPORTS}, got {transport!r}")
        return cls(
            name=_as_str("name", d.get("name"), cls.name),
            version=_as_str("version", d.get("version"), cls.version),
            protocol_version=_as_str("protocol_version", d.get("protocol_version"), cls.protocol_version),
            transport=transport,
            http_host=_as_str("http_host", d.get("http_host"), cls.http_host),
            http_port=_as_int(d.get("http_port"), cls.http_port),
        )


@dataclass
class ValidationSettings:
    coerce_numeric_strings: bool = False

    @classmethod
    def from_dict(cls, d: Mapping[str, Any] | None) -> "ValidationSettings":
        d = d or {}
        return cls(
            coerce_numeric_strings=_as_bool(
                "coerce_numeric_strings", d.get("coerce_numeric_strings"), cls.coerce_numeric_strings
            )
        )


@dataclass
class ToolsSettings:
    random_seed: int | None = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any] | None) -> "ToolsSettings":
        d = d or {}
        seed = d.get("random_seed")
        return cls(random_seed=None if seed is None else _as_int(seed, 0))


@dataclass
class PathsSettings:
    logs_dir: Path = Path("logs")

    @classmethod
    def from_dict(cls, d: Mapping[str, Any] | None) -> "PathsSettings":
        d = d or {}
        return cls(logs_dir=_as_path(d.get("logs_dir"), cls.logs_dir))


@dataclass
class Settings:
    server: ServerSettings = field(default_factory=ServerSettings)
    validation: ValidationSettings = field(default_factory=ValidationSettings)
    tools: ToolsSettings = field(default_factory=ToolsSettings)
    paths: PathsSettings = field(default_factory=PathsSettings)

    # Keep the raw mapping for debugging; must be JSON-serializable.
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any] | None) -> "Settings":
        raw = dict(raw or {})
        return cls(
            server=ServerSettings.from_dict(_section(raw, "server")),
            validation=ValidationSettings.from_dict(_section(raw, "validation")),
            tools=ToolsSettings.from_dict(_section(raw, "tools")),
            paths=PathsSettings.from_dict(_section(raw, "paths")),
            raw=raw,
        )
