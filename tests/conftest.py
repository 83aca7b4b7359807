"""Test configuration for wsman"""

import io
import sys
from pathlib import Path
import pytest
from rich.console import Console

# Add the src directory to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from wsman.core.metadata import WorkspaceMetadata  # noqa: E402


def make_package(
    name,
    version,
    manifest_path,
    publish=None,
    metadata=None,
):
    """Build a `packages` entry in cargo metadata format"""
    return {
        "id": f"{name} {version} (path+file://{Path(manifest_path).parent})",
        "name": name,
        "version": version,
        "manifest_path": str(manifest_path),
        "publish": publish,
        "metadata": metadata,
    }


def make_metadata(workspace_root, packages, members=None):
    """Build a cargo metadata document; every package is a member by default"""
    if members is None:
        members = [pkg["id"] for pkg in packages]
    return {
        "workspace_root": str(workspace_root),
        "workspace_members": members,
        "packages": packages,
    }


@pytest.fixture
def workspace_root(tmp_path):
    """Workspace root directory"""
    return tmp_path / "ws"


@pytest.fixture
def sample_metadata(workspace_root):
    """Workspace with a public root crate and a private nested crate"""
    return WorkspaceMetadata.from_dict(
        make_metadata(
            workspace_root,
            [
                make_package("a", "1.0.0", workspace_root / "Cargo.toml"),
                make_package(
                    "b",
                    "0.9.0",
                    workspace_root / "crates" / "b" / "Cargo.toml",
                    publish=[],
                ),
            ],
        )
    )


@pytest.fixture
def buffer_console():
    """Console writing plain text into a buffer"""
    return Console(file=io.StringIO(), width=200, color_system=None)
