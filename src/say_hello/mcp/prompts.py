"""
Prompt templates exposed over MCP.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional


@dataclass
class PromptArgument:
    name: str
    description: str
    required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description, "required": self.required}


@dataclass
class Prompt:
    """A prompt template rendered from string arguments."""

    name: str
    description: str
    render: Callable[[Dict[str, str]], List[Dict[str, Any]]]
    arguments: List[PromptArgument] = field(default_factory=list)
    title: Optional[str] = None

    def to_definition(self) -> Dict[str, Any]:
        definition = {
            "name": self.name,
            "description": self.description,
            "arguments": [argument.to_dict() for argument in self.arguments],
        }
        if self.title:
            definition["title"] = self.title
        return definition

    def get(self, arguments: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """
        Render the prompt for ``prompts/get``.

        Args:
            arguments: Prompt arguments supplied by the client

        Returns:
            The description and rendered messages

        Raises:
            ValueError: If a required argument is missing
        """
        arguments = arguments or {}
        missing = [a.name for a in self.arguments if a.required and a.name not in arguments]
        if missing:
            raise ValueError(f"Missing required arguments for prompt '{self.name}': {', '.join(missing)}")

        return {"description": self.description, "messages": self.render(arguments)}


class PromptRegistry:
    """Registry of prompts keyed by name."""

    def __init__(self):
        self._prompts: Dict[str, Prompt] = {}

    def register(self, prompt: Prompt) -> None:
        if prompt.name in self._prompts:
            raise ValueError(f"Prompt with name '{prompt.name}' is already registered")
        self._prompts[prompt.name] = prompt

    def get(self, name: str) -> Prompt:
        if name not in self._prompts:
            raise KeyError(f"Unknown prompt: {name}")
        return self._prompts[name]

    def get_definitions(self) -> List[Dict[str, Any]]:
        return [prompt.to_definition() for prompt in self._prompts.values()]


def _render_greet(arguments: Dict[str, str]) -> List[Dict[str, Any]]:
    return [{"role": "user", "content": {"type": "text", "text": f"Say hello to {arguments['name']}"}}]


def greet_prompt() -> Prompt:
    return Prompt(
        name="greet",
        title="Hello Prompt",
        description="Say hello to someone",
        arguments=[PromptArgument(name="name", description="Name of the person to greet", required=True)],
        render=_render_greet,
    )
