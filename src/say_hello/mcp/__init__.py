"""
Model Context Protocol server components.
"""

from .prompts import Prompt, PromptArgument, PromptRegistry
from .resources import Resource, ResourceRegistry
from .server import MCPServer
