"""Tests for file kind to base directory mapping."""

from pathlib import Path

import pytest
from registry_installer import FileKind
from registry_installer import ProjectConfig
from registry_installer import resolve_file_target_directory
from registry_installer.targets import KIND_DIRECTORIES


def make_config() -> ProjectConfig:
    base = Path("/proj/src")
    return ProjectConfig.model_validate(
        {
            "resolvedPaths": {
                "cwd": "/proj",
                "components": base / "components",
                "tiptapUi": base / "components/tiptap-ui",
                "tiptapUiPrimitives": base / "components/tiptap-ui-primitive",
                "tiptapExtensions": base / "components/tiptap-extension",
                "tiptapNodes": base / "components/tiptap-node",
                "tiptapIcons": base / "components/tiptap-icons",
                "hooks": base / "hooks",
                "lib": base / "lib",
                "contexts": base / "contexts",
                "styles": base / "styles",
            }
        }
    )


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (FileKind.UI, "/proj/src/components/tiptap-ui"),
        (FileKind.UI_PRIMITIVE, "/proj/src/components/tiptap-ui-primitive"),
        (FileKind.EXTENSION, "/proj/src/components/tiptap-extension"),
        (FileKind.NODE, "/proj/src/components/tiptap-node"),
        (FileKind.ICON, "/proj/src/components/tiptap-icons"),
        (FileKind.HOOK, "/proj/src/hooks"),
        (FileKind.LIB, "/proj/src/lib"),
        (FileKind.CONTEXT, "/proj/src/contexts"),
        (FileKind.STYLE, "/proj/src/styles"),
        (FileKind.TEMPLATE, "/proj/src/components"),
        (FileKind.COMPONENT, "/proj/src/components"),
    ],
)
def test_kind_lookup(kind, expected):
    """Each kind maps to its configured directory."""
    assert resolve_file_target_directory(kind, make_config()) == Path(expected)


def test_page_and_unknown_default_to_components():
    """Pages and unknown kinds fall back to components."""
    config = make_config()

    assert resolve_file_target_directory(FileKind.PAGE, config) == Path("/proj/src/components")
    assert resolve_file_target_directory(None, config) == Path("/proj/src/components")


def test_override_wins():
    """An explicit override bypasses the table."""
    override = Path("/elsewhere")
    assert resolve_file_target_directory(FileKind.HOOK, make_config(), override=override) == override


def test_table_covers_all_kinds_but_page():
    """The table names every kind except page."""
    assert set(KIND_DIRECTORIES) == set(FileKind) - {FileKind.PAGE}
