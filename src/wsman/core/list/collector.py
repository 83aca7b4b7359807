# Package collection functionality
from typing import Callable, List, Optional

from semantic_version import Version

from ..exceptions import (
    EmptyWorkspaceError,
    MetadataError,
    PackageNotFoundError,
    PackageNotInWorkspaceError,
)
from ..metadata import PackageRecord, WorkspaceMetadata
from ..package import (
    Package,
    is_independent,
    is_private,
    relative_package_path,
)
from ...ui.console import print_warning


class PackageCollector:
    """Collects workspace member packages from cargo metadata."""

    def __init__(
        self,
        metadata: WorkspaceMetadata,
        reporter: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize package collector.

        Args:
            metadata: Workspace metadata to read members from
            reporter: Callback for non-fatal problems, defaults to print_warning
        """
        self.metadata = metadata
        self.reporter = reporter or print_warning
        self.warnings: List[PackageNotFoundError] = []

    def _build_package(self, record: PackageRecord, private: bool) -> Package:
        root = self.metadata.workspace_root
        try:
            path = relative_package_path(record.manifest_path, root)
        except ValueError as e:
            raise PackageNotInWorkspaceError(record.id, root) from e

        try:
            version = Version(record.version)
        except ValueError as e:
            raise MetadataError(
                f"Invalid version {record.version!r} for {record.name}"
            ) from e

        return Package(
            id=record.id,
            name=record.name,
            version=version,
            location=root / path,
            path=path,
            private=private,
            independent=is_independent(record.metadata),
        )

    def get_packages(self, include_private: bool = False) -> List[Package]:
        """
        Get workspace packages sorted by name and version.

        Members without a package record are reported and skipped.

        Args:
            include_private: Whether to keep packages with `publish = false`

        Returns:
            Non-empty list of packages

        Raises:
            PackageNotInWorkspaceError: If a manifest lies outside the workspace
            EmptyWorkspaceError: If no package is left
        """
        self.warnings = []
        packages = []

        for package_id in self.metadata.workspace_members:
            record = self.metadata.get_package(package_id)
            if record is None:
                warning = PackageNotFoundError(package_id)
                self.warnings.append(warning)
                self.reporter(str(warning))
                continue

            private = is_private(record.publish)
            if private and not include_private:
                continue

            packages.append(self._build_package(record, private))

        if not packages:
            raise EmptyWorkspaceError()

        packages.sort(key=lambda pkg: pkg.sort_key)
        return packages


def resolve_packages(
    metadata: WorkspaceMetadata,
    include_private: bool = False,
    reporter: Optional[Callable[[str], None]] = None,
) -> List[Package]:
    """Resolve the ordered package list of a workspace."""
    return PackageCollector(metadata, reporter).get_packages(include_private)
