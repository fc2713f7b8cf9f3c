"""Named lookup and parameter checking for workflow nodes."""

from functools import lru_cache
from inspect import iscoroutinefunction
from typing import Any

from jsonschema import Draft202012Validator, SchemaError
from jsonschema.exceptions import best_match

from yt_transcript.models.errors import InvalidInputError, NodeNotFoundError
from yt_transcript.models.node import NodeExecutionContext
from yt_transcript.nodes.base import BaseNode
from yt_transcript.nodes.youtube_transcript_node import YouTubeTranscriptNode


class NodeRegistrationError(Exception):
    """A node declaration was rejected."""


class NodeRegistry:
    """
    Holds nodes by name together with a validator compiled from each node's
    ``properties`` schema.

    Items passed through ``execute`` are checked against that schema before
    the node sees them, so a malformed item fails with its index instead of
    deep inside the batch run.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, BaseNode] = {}
        self._validators: dict[str, Draft202012Validator] = {}

    def register_node(self, node: BaseNode) -> None:
        """
        Raises:
            NodeRegistrationError: The declaration is malformed or the name is taken.
        """
        if not isinstance(node, BaseNode):
            raise NodeRegistrationError(f"Provided object is not an instance of BaseNode: {type(node)}")
        if not node.name or not isinstance(node.name, str):
            raise NodeRegistrationError("Node must have a non-empty string 'name'.")
        if node.name in self._nodes:
            raise NodeRegistrationError(f"Node with name '{node.name}' already registered.")
        if not node.description or not isinstance(node.description, str):
            raise NodeRegistrationError(f"Node '{node.name}' must have a non-empty string 'description'.")
        if not iscoroutinefunction(node.execute):
            raise NodeRegistrationError(f"Node '{node.name}' must have an async 'execute' method.")
        if not isinstance(node.properties, dict) or node.properties.get("type") != "object":
            raise NodeRegistrationError(f"Node '{node.name}' must describe its items with an object schema.")

        try:
            Draft202012Validator.check_schema(node.properties)
        except SchemaError as e:
            raise NodeRegistrationError(f"Node '{node.name}' has an invalid 'properties' schema: {e.message}") from e

        self._nodes[node.name] = node
        self._validators[node.name] = Draft202012Validator(node.properties)

    def get_node(self, name: str) -> BaseNode:
        try:
            return self._nodes[name]
        except KeyError:
            raise NodeNotFoundError(name) from None

    @property
    def node_names(self) -> list[str]:
        return sorted(self._nodes)

    def validate_items(self, name: str, items: list[dict[str, Any]]) -> None:
        """
        Check every item against the node's parameter schema.

        Raises:
            NodeNotFoundError: ``name`` is not registered.
            InvalidInputError: An item does not match; ``item_index`` points at it.
        """
        self.get_node(name)
        validator = self._validators[name]
        for index, item in enumerate(items):
            error = best_match(validator.iter_errors(item))
            if error is None:
                continue
            path = "/".join(str(part) for part in error.absolute_path)
            invalid = InvalidInputError(
                f"Invalid parameters for item {index}: {error.message}",
                {"path": path, "validator": error.validator},
            )
            invalid.item_index = index
            raise invalid

    async def execute(
        self, name: str, items: list[dict[str, Any]], context: NodeExecutionContext
    ) -> list[dict[str, Any]]:
        """Run a registered node on items that passed its parameter schema."""
        node = self.get_node(name)
        self.validate_items(name, items)
        context.logger.debug("node_registry.dispatch", node=name, item_count=len(items))
        return await node.execute(items, context)


@lru_cache
def get_registry() -> NodeRegistry:
    """The registry of every node shipped with the package."""
    registry = NodeRegistry()
    registry.register_node(YouTubeTranscriptNode())
    return registry
