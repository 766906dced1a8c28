"""Route target rewriting - Framework-agnostic page targets to framework idiom.

Registry pages are authored as Next.js app-router targets
(``app/<segments>/page.tsx``). Each framework gets one rule: a directory
prefix replacement and whether the trailing ``/page`` is folded into the
parent segment.
"""

import re
from dataclasses import dataclass

from .schema import Framework

_APP_PREFIX = re.compile(r"^app/")
_PAGE_SUFFIX = re.compile(r"/page(\.[jt]sx?)$")


@dataclass(frozen=True)
class RouteRule:
    """Rewrite rule for one framework."""

    directory: str | None = None
    strip_page: bool = False

    def apply(self, target: str) -> str:
        result = target
        if self.directory is not None:
            result = _APP_PREFIX.sub(self.directory, result, count=1)
        if self.strip_page:
            result = _PAGE_SUFFIX.sub(r"\1", result)
        return result


ROUTE_RULES: dict[Framework, RouteRule] = {
    Framework.NEXT_APP: RouteRule(),
    Framework.NEXT_PAGES: RouteRule(directory="pages/", strip_page=True),
    Framework.REACT_ROUTER: RouteRule(directory="app/routes/", strip_page=True),
    Framework.LARAVEL: RouteRule(directory="resources/js/pages/", strip_page=True),
}


def resolve_page_target(target: str, framework: Framework | str | None) -> str:
    """
    Rewrite a page target for the detected framework.

    Args:
        target: Framework-agnostic target (e.g. "app/settings/page.tsx")
        framework: Detected framework variant or raw name

    Returns:
        Framework-specific target, or "" when the framework is unsupported
        (the caller must not write the file)

    Examples:
        >>> resolve_page_target("app/settings/page.tsx", "next-pages")
        'pages/settings.tsx'
        >>> resolve_page_target("app/settings/page.tsx", "unknown-fw")
        ''
    """
    rule = ROUTE_RULES.get(Framework.parse(framework))
    if rule is None:
        return ""
    return rule.apply(target)
