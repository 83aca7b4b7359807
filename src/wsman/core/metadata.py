# Workspace metadata from `cargo metadata`
import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .exceptions import CargoNotFoundError, MetadataError


@dataclass
class PackageRecord:
    """A package entry as reported by cargo."""

    id: str
    name: str
    version: str
    manifest_path: Path
    publish: Optional[List[str]] = None
    metadata: Any = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PackageRecord":
        """Build a record from one element of the `packages` array."""
        try:
            return cls(
                id=data["id"],
                name=data["name"],
                version=data["version"],
                manifest_path=Path(data["manifest_path"]),
                publish=data.get("publish"),
                metadata=data.get("metadata"),
            )
        except (KeyError, TypeError) as e:
            raise MetadataError(f"Malformed package entry: {e}") from e


@dataclass
class WorkspaceMetadata:
    """The parts of cargo metadata needed to list workspace members."""

    workspace_root: Path
    workspace_members: List[str] = field(default_factory=list)
    packages: Dict[str, PackageRecord] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkspaceMetadata":
        """
        Build workspace metadata from a decoded cargo metadata document.

        Args:
            data: Output of `cargo metadata --format-version 1`

        Returns:
            WorkspaceMetadata instance

        Raises:
            MetadataError: If required keys are missing
        """
        try:
            root = Path(data["workspace_root"])
            members = list(data["workspace_members"])
            entries = data["packages"]
        except (KeyError, TypeError) as e:
            raise MetadataError(f"Malformed cargo metadata: {e}") from e

        packages = {}
        for entry in entries:
            record = PackageRecord.from_dict(entry)
            packages[record.id] = record

        return cls(
            workspace_root=root,
            workspace_members=members,
            packages=packages,
        )

    def get_package(self, package_id: str) -> Optional[PackageRecord]:
        """Look up a package record by identity."""
        return self.packages.get(package_id)


def get_cargo_command(cargo: Optional[str] = None) -> str:
    """Get cargo executable, honouring the CARGO environment variable."""
    return cargo or os.environ.get("CARGO") or "cargo"


def load_metadata(
    manifest_path: Optional[Union[str, Path]] = None,
    cargo: Optional[str] = None,
    cwd: Optional[Union[str, Path]] = None,
) -> WorkspaceMetadata:
    """
    Run `cargo metadata` and decode its output.

    Args:
        manifest_path: Optional path to the workspace Cargo.toml
        cargo: Optional cargo executable
        cwd: Optional working directory for cargo

    Returns:
        WorkspaceMetadata for the workspace

    Raises:
        CargoNotFoundError: If cargo cannot be executed
        MetadataError: If cargo fails or prints invalid JSON
    """
    cargo = get_cargo_command(cargo)
    cmd = [cargo, "metadata", "--format-version", "1", "--no-deps"]
    if manifest_path:
        cmd.extend(["--manifest-path", str(manifest_path)])

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=True,
            cwd=cwd,
        )
    except FileNotFoundError as e:
        raise CargoNotFoundError(cargo) from e
    except subprocess.CalledProcessError as e:
        details = (e.stderr or "").strip() or f"exit status {e.returncode}"
        raise MetadataError(f"cargo metadata failed: {details}") from e

    try:
        data = json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise MetadataError(f"Invalid cargo metadata output: {e}") from e

    return WorkspaceMetadata.from_dict(data)
