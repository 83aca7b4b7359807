# Workspace package model
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from semantic_version import Version

# Manifest file every Cargo package carries at its root
MANIFEST_NAME = "Cargo.toml"


@dataclass(frozen=True)
class Package:
    """A resolved workspace member."""

    id: str = field(compare=False, repr=False)
    name: str
    version: Version
    location: Path
    path: str
    private: bool = False
    independent: bool = False

    @property
    def sort_key(self):
        """Ordering key: name first, then semver precedence.

        Versions equal in precedence but differing in build metadata are
        ordered by their text.
        """
        return (self.name, self.version.precedence_key, str(self.version))

    @property
    def display_path(self) -> str:
        """Relative path as shown in listings, "." for the workspace root."""
        return self.path or "."

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict for JSON output."""
        return {
            "name": self.name,
            "version": str(self.version),
            "location": str(self.location),
            "private": self.private,
            "independent": self.independent,
        }


def is_private(publish: Optional[Sequence[str]]) -> bool:
    """
    Check whether a publish setting forbids publishing.

    Args:
        publish: Registries the package may be published to, None if unrestricted

    Returns:
        True only for an explicit empty allow-list
    """
    return publish is not None and len(publish) == 0


def lookup_bool(value: Any, *keys: str) -> Optional[bool]:
    """
    Walk nested mappings and return the boolean found at the end.

    Args:
        value: Arbitrary decoded JSON value
        *keys: Keys to follow, outermost first

    Returns:
        The boolean at the end of the path, or None if any step is missing
        or has the wrong type
    """
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    if isinstance(value, bool):
        return value
    return None


def is_independent(metadata: Any) -> bool:
    """Check for `[package.metadata.workspaces] independent = true`."""
    return lookup_bool(metadata, "workspaces", "independent") is True


def relative_package_path(manifest_path: Path, workspace_root: Path) -> str:
    """
    Get a package directory relative to the workspace root.

    Args:
        manifest_path: Absolute path to the package manifest
        workspace_root: Absolute path to the workspace root

    Returns:
        Relative directory without manifest name or trailing separator,
        empty for the workspace root itself

    Raises:
        ValueError: If the manifest is not inside the workspace root
    """
    path = str(Path(manifest_path).relative_to(workspace_root))
    # Trim as text so backslash-separated manifests lose their name too
    if path.endswith(MANIFEST_NAME):
        path = path[: -len(MANIFEST_NAME)]
    path = path.rstrip("/\\")
    if path == ".":
        return ""
    return path
