"""
Static resources exposed over MCP.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

HELLO_WORLD_HISTORY = (
    '"Hello, World" first appeared in a 1972 Bell Labs memo by Brian Kernighan and later became '
    "the iconic first program for beginners in countless languages."
)


@dataclass(frozen=True)
class Resource:
    """A resource with fixed text content."""

    name: str
    uri: str
    text: str
    title: Optional[str] = None
    description: Optional[str] = None
    mime_type: str = "text/plain"

    def to_definition(self) -> Dict[str, Any]:
        definition = {"uri": self.uri, "name": self.name, "mimeType": self.mime_type}
        if self.title:
            definition["title"] = self.title
        if self.description:
            definition["description"] = self.description
        return definition

    def read(self) -> Dict[str, Any]:
        """Return the ``resources/read`` payload for this resource."""
        return {"contents": [{"uri": self.uri, "mimeType": self.mime_type, "text": self.text}]}


class ResourceRegistry:
    """Registry of resources keyed by URI."""

    def __init__(self):
        self._resources: Dict[str, Resource] = {}

    def register(self, resource: Resource) -> None:
        if resource.uri in self._resources:
            raise ValueError(f"Resource with URI '{resource.uri}' is already registered")
        self._resources[resource.uri] = resource

    def get(self, uri: str) -> Resource:
        if uri not in self._resources:
            raise KeyError(f"Unknown resource: {uri}")
        return self._resources[uri]

    def get_definitions(self) -> List[Dict[str, Any]]:
        return [resource.to_definition() for resource in self._resources.values()]


def hello_world_history() -> Resource:
    return Resource(
        name="hello-world-history",
        uri="history://hello-world",
        title="Hello World History",
        description="The origin story of the famous 'Hello, World' program",
        text=HELLO_WORLD_HISTORY,
    )
