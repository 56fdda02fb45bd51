# Tool registry
# In-memory store of tool definitions with a secondary tag index

import logging
import threading
from collections.abc import Iterable
from typing import Any

from ..config import settings
from ..errors import DuplicateNameError, RegistryCorruptionError, RegistryNotInitializedError
from ..models.tool import Tool, validate_tool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Registry for managing and retrieving tool definitions.

    ``_tools`` maps name to tool in registration order and ``_tag_index`` maps
    each tag to the names carrying it. ``_tool_tags`` keeps the tags each tool
    was indexed under, so unregistering never depends on the (shared) tool
    object. All three are updated under one lock.
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}
        self._tag_index: dict[str, set[str]] = {}
        self._tool_tags: dict[str, frozenset[str]] = {}
        self._lock = threading.RLock()

    def register(self, tool: Any) -> Tool:
        """Validate and register a tool.

        Raises ValidationError for malformed input and DuplicateNameError when
        the name is already taken; the registry is unchanged in both cases.
        """
        validated = validate_tool(tool)

        with self._lock:
            if validated.name in self._tools:
                logger.warning(f"Rejected duplicate registration of tool '{validated.name}'")
                raise DuplicateNameError(validated.name)

            tags = frozenset(validated.tags)
            self._tools[validated.name] = validated
            self._tool_tags[validated.name] = tags
            for tag in tags:
                self._tag_index.setdefault(tag, set()).add(validated.name)

        logger.debug(f"Registered tool '{validated.name}' with tags {validated.tags}")
        return validated

    def register_many(self, tools: Iterable[Any]) -> list[Tool]:
        """Register tools in order.

        The first failure propagates immediately. Tools registered earlier in
        the same call stay registered; there is no rollback.
        """
        return [self.register(tool) for tool in tools]

    def get(self, name: str) -> Tool | None:
        """Get a tool by name, or None if it is not registered."""
        with self._lock:
            return self._tools.get(name)

    def has(self, name: str) -> bool:
        with self._lock:
            return name in self._tools

    def get_all(self) -> list[Tool]:
        """Snapshot of all tools in registration order."""
        with self._lock:
            return list(self._tools.values())

    def get_by_tag(self, tag: str) -> list[Tool]:
        """Get every tool carrying ``tag``, in registration order.

        Unknown tags yield an empty list. A tag entry pointing at a missing
        tool raises RegistryCorruptionError.
        """
        with self._lock:
            names = self._tag_index.get(tag)
            if not names:
                return []

            tools = []
            for name in names:
                tool = self._tools.get(name)
                if tool is None:
                    logger.error(f"Tag '{tag}' references unknown tool '{name}'")
                    raise RegistryCorruptionError(name, tag)
                tools.append(tool)

            position = {name: index for index, name in enumerate(self._tools)}
            tools.sort(key=lambda t: position[t.name])
            return tools

    def get_all_tags(self) -> list[str]:
        """All tags that currently have at least one tool."""
        with self._lock:
            return list(self._tag_index)

    def unregister(self, name: str) -> bool:
        """Remove a tool and scrub it from the tag index.

        Returns False if the tool was not registered.
        """
        with self._lock:
            if self._tools.pop(name, None) is None:
                return False

            for tag in self._tool_tags.pop(name, frozenset()):
                names = self._tag_index.get(tag)
                if names is None:
                    continue
                names.discard(name)
                if not names:
                    del self._tag_index[tag]

        logger.debug(f"Unregistered tool '{name}'")
        return True

    def clear(self) -> None:
        """Remove all tools and tags."""
        with self._lock:
            self._tools.clear()
            self._tag_index.clear()
            self._tool_tags.clear()
        logger.debug("Cleared tool registry")

    @property
    def size(self) -> int:
        """Number of registered tools."""
        with self._lock:
            return len(self._tools)

    @property
    def tag_count(self) -> int:
        """Number of distinct tags in use."""
        with self._lock:
            return len(self._tag_index)

    def __len__(self) -> int:
        return self.size

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)


# Process-wide default registry; only exists between init and teardown
_default_registry: ToolRegistry | None = None
_default_lock = threading.Lock()


def init_default_registry(
    registry: ToolRegistry | None = None,
    *,
    register_builtins: bool | None = None,
) -> ToolRegistry:
    """Create (or install) the default registry.

    Built-in tools are added when ``register_builtins`` is true, falling back
    to ``settings.register_builtin_tools`` when it is None.
    """
    global _default_registry

    if register_builtins is None:
        register_builtins = settings.register_builtin_tools

    instance = registry if registry is not None else ToolRegistry()
    if register_builtins:
        from .builtin_tools import register_builtin_tools

        register_builtin_tools(instance)

    with _default_lock:
        if _default_registry is not None and _default_registry is not instance:
            logger.warning("Replacing existing default tool registry")
        _default_registry = instance

    logger.info(f"Default tool registry initialized with {instance.size} tools")
    return instance


def get_default_registry() -> ToolRegistry:
    """Return the default registry, raising if it was never initialized."""
    with _default_lock:
        if _default_registry is None:
            raise RegistryNotInitializedError()
        return _default_registry


def teardown_default_registry() -> None:
    """Drop the default registry."""
    global _default_registry
    with _default_lock:
        _default_registry = None
    logger.debug("Default tool registry torn down")


def register_tool(tool: Any) -> Tool:
    """Register a tool in the default registry."""
    return get_default_registry().register(tool)


def register_tools(tools: Iterable[Any]) -> list[Tool]:
    """Register several tools in the default registry."""
    return get_default_registry().register_many(tools)


def get_tool(name: str) -> Tool | None:
    """Get a tool from the default registry."""
    return get_default_registry().get(name)


def has_tool(name: str) -> bool:
    """Check the default registry for a tool."""
    return get_default_registry().has(name)


def get_all_tools() -> list[Tool]:
    """Get all tools from the default registry."""
    return get_default_registry().get_all()


def get_tools_by_tag(tag: str) -> list[Tool]:
    """Get tools by tag from the default registry."""
    return get_default_registry().get_by_tag(tag)


def unregister_tool(name: str) -> bool:
    """Remove a tool from the default registry."""
    return get_default_registry().unregister(name)
