# Core functionality for workspace package resolution
from .package import Package
from .metadata import PackageRecord, WorkspaceMetadata, load_metadata
from .exceptions import (
    WsmanError,
    MetadataError,
    CargoNotFoundError,
    WorkspaceError,
    PackageNotInWorkspaceError,
    PackageNotFoundError,
    EmptyWorkspaceError,
    OutputError,
)

__all__ = [
    "Package",
    "PackageRecord",
    "WorkspaceMetadata",
    "load_metadata",
    "WsmanError",
    "MetadataError",
    "CargoNotFoundError",
    "WorkspaceError",
    "PackageNotInWorkspaceError",
    "PackageNotFoundError",
    "EmptyWorkspaceError",
    "OutputError",
]
