"""Custom exceptions for workspace package resolution"""

from pathlib import Path
from typing import Union


class WsmanError(Exception):
    """Base exception for wsman"""

    pass


class MetadataError(WsmanError):
    """Workspace metadata could not be loaded or decoded"""

    pass


class CargoNotFoundError(MetadataError):
    """The cargo executable could not be started"""

    def __init__(self, cargo: str):
        self.cargo = cargo
        super().__init__(f"cargo executable not found: {cargo}")


class WorkspaceError(WsmanError):
    """Workspace membership related errors"""

    pass


class PackageNotInWorkspaceError(WorkspaceError):
    """A member manifest lies outside the workspace root"""

    def __init__(self, package_id: str, workspace_root: Union[str, Path]):
        self.package_id = package_id
        self.workspace_root = str(workspace_root)
        super().__init__(
            f"package {package_id} is not inside workspace {self.workspace_root}"
        )


class PackageNotFoundError(WorkspaceError):
    """A workspace member has no package record"""

    def __init__(self, package_id: str):
        self.package_id = package_id
        super().__init__(f"package {package_id} not found in metadata")


class EmptyWorkspaceError(WorkspaceError):
    """No packages are left to list"""

    def __init__(self):
        super().__init__("found no packages in the workspace")


class OutputError(WsmanError):
    """Writing to the terminal failed"""

    pass
