from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

from ...outcome import Failure, FailureKind, Ok
from . import content


DOCS_PREFIX = "resource://docs/"

Producer = Callable[[], str]


@dataclass(frozen=True)
class ResourceSpec:
    uri: str
    name: str
    description: str
    mime_type: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "uri": self.uri,
            "name": self.name,
            "description": self.description,
            "mimeType": self.mime_type,
        }


def _contents(uri: str, mime_type: str, text: str) -> dict[str, Any]:
    return {"contents": [{"uri": uri, "mimeType": mime_type, "text": text}]}


class ResourceCatalog:
    """Fixed set of static resources plus the `resource://docs/{topic}` template."""

    def __init__(self, static: list[tuple[ResourceSpec, Producer]], docs: ResourceSpec) -> None:
        self._specs = tuple([spec for spec, _ in static] + [docs])
        self._static = {spec.uri: (spec, producer) for spec, producer in static}
        self._docs = docs

    def list_specs(self) -> list[dict[str, Any]]:
        return [spec.to_dict() for spec in self._specs]

    def read(self, uri: str) -> Ok[dict[str, Any]] | Failure:
        hit = self._static.get(uri)
        if hit is not None:
            spec, producer = hit
            return Ok(_contents(uri, spec.mime_type, producer()))

        if uri.startswith(DOCS_PREFIX) and len(uri) > len(DOCS_PREFIX):
            topic = uri[len(DOCS_PREFIX) :]
            return Ok(_contents(uri, self._docs.mime_type, content.docs_page(topic)))

        return Failure(FailureKind.UNKNOWN_RESOURCE, f"Unknown resource: {uri}")


def _json_text(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, indent=2)


def build_resource_catalog(
    *,
    server_name: str,
    server_version: str,
    now: Callable[[], datetime] = datetime.now,
) -> ResourceCatalog:
    return ResourceCatalog(
        static=[
            (
                ResourceSpec("resource://welcome", "Welcome Message", "A welcome message for new users", "text/plain"),
                content.welcome_text,
            ),
            (
                ResourceSpec(
                    "resource://system/info",
                    "System Information",
                    "Current system information including time and runtime details",
                    "application/json",
                ),
                lambda: _json_text(content.system_info(now(), server_name=server_name, server_version=server_version)),
            ),
            (
                ResourceSpec(
                    "resource://config/server",
                    "Server Configuration",
                    "Current server configuration and capabilities",
                    "application/json",
                ),
                lambda: _json_text(content.server_config()),
            ),
            (
                ResourceSpec(
                    "resource://api/reference",
                    "API Reference",
                    "Quick reference guide for all available MCP tools",
                    "text/plain",
                ),
                lambda: content.api_reference(server_version),
            ),
        ],
        docs=ResourceSpec(
            f"{DOCS_PREFIX}{{topic}}",
            "Documentation",
            f"Documentation for various topics. Available topics: {', '.join(content.DOC_TOPICS)}",
            "text/markdown",
        ),
    )
