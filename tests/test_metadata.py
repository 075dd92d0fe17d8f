"""Package metadata, PEP 561 marker and pyproject sync tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

from greeter import __init__conf__

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def _load_pyproject() -> dict[str, Any]:
    """Load and parse pyproject.toml from the project root."""
    return rtoml.load(PYPROJECT_PATH)


def _wheel_packages() -> list[str]:
    tool_table = cast(dict[str, Any], _load_pyproject().get("tool", {}))
    hatch_table = cast(dict[str, Any], tool_table.get("hatch", {}))
    targets_table = cast(dict[str, Any], cast(dict[str, Any], hatch_table.get("build", {})).get("targets", {}))
    wheel_table = cast(dict[str, Any], targets_table.get("wheel", {}))
    return cast(list[str], wheel_table.get("packages", []))


@pytest.mark.os_agnostic
def test_print_info_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    """print_info lists every field as an aligned label = value line."""
    from greeter import print_info

    print_info()

    captured = capsys.readouterr().out
    assert captured.startswith("Info for greeter:\n\n")
    assert f"= {__init__conf__.version}" in captured
    assert f"= {__init__conf__.shell_command}" in captured
    assert len({line.index("=") for line in captured.splitlines()[2:]}) == 1


@pytest.mark.os_agnostic
def test_metadata_constants_are_set() -> None:
    """Static metadata constants identify the greeter."""
    assert __init__conf__.name == "greeter"
    assert __init__conf__.version
    assert __init__conf__.shell_command == "greeter"


@pytest.mark.os_agnostic
def test_name_and_version_match_pyproject() -> None:
    """__init__conf__ mirrors the [project] table."""
    project = _load_pyproject()["project"]

    assert __init__conf__.name == project["name"]
    assert __init__conf__.version == project["version"]


@pytest.mark.os_agnostic
def test_layeredconf_slug_matches_project_name() -> None:
    """The Linux config directory is named after the project."""
    project_name = _load_pyproject()["project"]["name"]

    assert project_name.replace("_", "-") == __init__conf__.LAYEREDCONF_SLUG


@pytest.mark.os_agnostic
def test_layeredconf_vendor_and_app_are_not_blank() -> None:
    """Vendor and app name the macOS/Windows config directories."""
    assert __init__conf__.LAYEREDCONF_VENDOR.strip()
    assert __init__conf__.LAYEREDCONF_APP.strip()


@pytest.mark.os_agnostic
def test_console_script_points_at_entry_main() -> None:
    """The installed ``greeter`` command runs the production-wired entry point."""
    scripts = _load_pyproject()["project"]["scripts"]

    assert scripts[__init__conf__.shell_command] == "greeter.entry:main"


@pytest.mark.os_agnostic
def test_py_typed_marker_ships_inside_wheel_package() -> None:
    """The PEP 561 marker sits in the package directory the wheel builds from."""
    packages = _wheel_packages()

    assert "src/greeter" in packages
    assert (PROJECT_ROOT / "src" / "greeter" / "py.typed").is_file()
