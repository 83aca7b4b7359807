# Test file for the wsman command line

import json
import pytest
from unittest import mock
from click.testing import CliRunner
from wsman import __version__
from wsman.cli import cli
from wsman.core.exceptions import MetadataError
from wsman.core.metadata import WorkspaceMetadata

from conftest import make_metadata, make_package


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def patched_metadata(sample_metadata):
    """Replace cargo with the sample workspace"""
    with mock.patch(
        "wsman.commands.list_command.load_metadata", return_value=sample_metadata
    ) as load:
        yield load


def test_version(runner):
    """Test the version flag"""
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_list(runner, patched_metadata):
    """Test listing public packages"""
    result = runner.invoke(cli, ["list"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["a"]


def test_list_alias(runner, patched_metadata):
    """Test the ls alias"""
    result = runner.invoke(cli, ["ls"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["a"]


def test_list_all(runner, patched_metadata):
    """Test that --all includes and marks private packages"""
    result = runner.invoke(cli, ["list", "--all"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["a", "b (PRIVATE)"]


def test_list_long(runner, patched_metadata):
    """Test long output"""
    result = runner.invoke(cli, ["list", "-l", "-a"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0].startswith("a v1.0.0 .")
    assert lines[1].startswith("b v0.9.0 crates")
    assert lines[1].endswith("(PRIVATE)")


def test_list_json(runner, patched_metadata):
    """Test JSON output"""
    result = runner.invoke(cli, ["list", "--json", "--all"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [pkg["name"] for pkg in data] == ["a", "b"]
    assert data[1]["private"] is True
    assert set(data[0]) == {"name", "version", "location", "private", "independent"}


def test_global_options_reach_cargo(runner, patched_metadata, tmp_path):
    """Test that --manifest-path and --cargo are passed to cargo"""
    manifest = tmp_path / "ws" / "Cargo.toml"
    result = runner.invoke(
        cli, ["--manifest-path", str(manifest), "--cargo", "my-cargo", "list"]
    )
    assert result.exit_code == 0
    patched_metadata.assert_called_once_with(
        manifest_path=str(manifest), cargo="my-cargo"
    )


def test_cargo_from_environment(runner, patched_metadata):
    """Test that the CARGO environment variable selects cargo"""
    result = runner.invoke(cli, ["list"], env={"CARGO": "/opt/cargo"})
    assert result.exit_code == 0
    assert patched_metadata.call_args.kwargs["cargo"] == "/opt/cargo"


def test_empty_workspace_fails(runner, workspace_root):
    """Test that a workspace of private packages exits with an error"""
    metadata = WorkspaceMetadata.from_dict(
        make_metadata(
            workspace_root,
            [make_package("p", "1.0.0", workspace_root / "Cargo.toml", publish=[])],
        )
    )
    with mock.patch(
        "wsman.commands.list_command.load_metadata", return_value=metadata
    ):
        result = runner.invoke(cli, ["list"])
    assert result.exit_code == 1
    assert "no packages" in result.output


def test_not_in_workspace_fails(runner, workspace_root, tmp_path):
    """Test that a manifest outside the workspace exits with an error"""
    metadata = WorkspaceMetadata.from_dict(
        make_metadata(
            workspace_root,
            [make_package("far", "1.0.0", tmp_path / "far" / "Cargo.toml")],
        )
    )
    with mock.patch(
        "wsman.commands.list_command.load_metadata", return_value=metadata
    ):
        result = runner.invoke(cli, ["list"])
    assert result.exit_code == 1
    assert "not inside workspace" in result.output


def test_metadata_error_fails(runner):
    """Test that cargo failures exit with an error"""
    with mock.patch(
        "wsman.commands.list_command.load_metadata",
        side_effect=MetadataError("cargo metadata failed: boom"),
    ):
        result = runner.invoke(cli, ["list"])
    assert result.exit_code == 1
    assert "boom" in result.output


def test_missing_member_warns(runner, workspace_root):
    """Test that unknown members are warned about and listing continues"""
    pkg = make_package("a", "1.0.0", workspace_root / "Cargo.toml")
    metadata = WorkspaceMetadata.from_dict(
        make_metadata(workspace_root, [pkg], members=["ghost 0.1.0", pkg["id"]])
    )
    with mock.patch(
        "wsman.commands.list_command.load_metadata", return_value=metadata
    ):
        result = runner.invoke(cli, ["list"])
    assert result.exit_code == 0
    assert "ghost 0.1.0" in result.output
    assert result.stdout.splitlines()[-1] == "a"
