"""Exception hierarchy for Agent Node Toolkit."""

from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError


class ToolkitError(Exception):
    """Base exception class for toolkit errors."""
    def __init__(self, message: str, error_code: str = "TOOLKIT_ERROR", details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(ToolkitError):
    """Structural validation failure carrying every failing path.

    ``errors`` holds human readable ``"path: message"`` strings so callers can
    fix all problems in one pass.
    """
    def __init__(self, errors: List[str], message: Optional[str] = None):
        self.errors = list(errors)
        if message is None:
            message = f"Validation failed with {len(self.errors)} error(s): " + "; ".join(self.errors)
        super().__init__(message, "VALIDATION_ERROR", {"errors": self.errors})

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError, prefix: str = "") -> "ValidationError":
        """Flatten a pydantic error report into path-prefixed messages."""
        errors = []
        for error in exc.errors(include_url=False):
            path = ".".join(str(part) for part in (prefix, *error["loc"]) if part != "")
            errors.append(f"{path}: {error['msg']}" if path else error["msg"])
        return cls(errors)


class DuplicateNameError(ToolkitError):
    """Exception raised when registering a tool whose name is taken."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Tool '{name}' is already registered", "DUPLICATE_NAME", {"name": name})


class RegistryCorruptionError(ToolkitError):
    """Tag index references a tool that is not in the registry."""
    def __init__(self, name: str, tag: str):
        self.name = name
        self.tag = tag
        super().__init__(
            f"Inconsistency in tool registry: tool '{name}' is referenced by tag '{tag}' but not found",
            "REGISTRY_CORRUPTION",
            {"name": name, "tag": tag},
        )


class RegistryNotInitializedError(ToolkitError):
    """Exception raised when the default registry is used before init_default_registry()."""
    def __init__(self) -> None:
        super().__init__(
            "Default tool registry is not initialized; call init_default_registry() first",
            "REGISTRY_NOT_INITIALIZED",
        )
