"""Tests for framework route target rewriting."""

import pytest
from registry_installer import Framework
from registry_installer import resolve_page_target
from registry_installer.routes import ROUTE_RULES


def test_next_app_unchanged():
    """App router keeps the agnostic target."""
    assert resolve_page_target("app/settings/page.tsx", "next-app") == "app/settings/page.tsx"


def test_next_pages():
    """Pages router moves to pages/ and folds page into its parent."""
    assert resolve_page_target("app/settings/page.tsx", "next-pages") == "pages/settings.tsx"


def test_react_router():
    """React Router routes live under app/routes/."""
    assert resolve_page_target("app/settings/page.tsx", Framework.REACT_ROUTER) == "app/routes/settings.tsx"


def test_laravel():
    """Laravel pages live under resources/js/pages/."""
    assert resolve_page_target("app/editor/page.jsx", Framework.LARAVEL) == "resources/js/pages/editor.jsx"


@pytest.mark.parametrize("framework", ["unknown-fw", None, Framework.UNKNOWN])
def test_unknown_framework_returns_empty(framework):
    """Unsupported frameworks produce no target."""
    assert resolve_page_target("app/settings/page.tsx", framework) == ""


def test_only_leading_app_segment_rewritten():
    """Only a leading app/ segment is rewritten."""
    assert resolve_page_target("src/app/page.tsx", "next-pages") == "src/app.tsx"
    assert resolve_page_target("app/app/page.tsx", "next-pages") == "pages/app.tsx"


def test_non_page_filename_kept():
    """Files not named page keep their name."""
    assert resolve_page_target("app/settings/layout.tsx", "next-pages") == "pages/settings/layout.tsx"


def test_every_known_framework_has_rule():
    """Every framework except UNKNOWN has a rewrite rule."""
    assert set(ROUTE_RULES) == set(Framework) - {Framework.UNKNOWN}
