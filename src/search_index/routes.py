"""Allow-list of published page routes."""

import logging
import re
from pathlib import Path
from typing import FrozenSet, Iterable, Union

logger = logging.getLogger(__name__)

LINK_DECLARATION_RE = re.compile(r"""\blink\s*:\s*(['"])(.*?)\1""")
_EXTERNAL_LINK_RE = re.compile(r"^[a-z][a-z0-9+.-]*:|^//", re.IGNORECASE)


def normalize_route(route: str) -> str:
    """
    Normalize a page route for comparison.

    Drops query and fragment, adds a leading slash and removes trailing
    slashes and a trailing ``index.html``.
    """
    route = re.split(r"[?#]", route.strip(), maxsplit=1)[0]
    route = re.sub(r"(^|/)index\.html$", "", route)
    route = "/" + route.strip("/")
    return route


class RouteAllowList:
    """Set of page routes that are actually published."""

    def __init__(self, routes: Iterable[str]):
        self.routes: FrozenSet[str] = frozenset(normalize_route(r) for r in routes)

    def __contains__(self, route: str) -> bool:
        return normalize_route(route) in self.routes

    def __len__(self) -> int:
        return len(self.routes)

    @classmethod
    def from_static_output(cls, output_dir: Union[str, Path], artifact_name: str = "index.html") -> "RouteAllowList":
        """
        Build the allow-list from a rendered static site.

        Every directory holding an index artifact is a published route.

        Args:
            output_dir: Root of the static build output
            artifact_name: File name that marks a directory as a page

        Returns:
            RouteAllowList of the published routes
        """
        root = Path(output_dir)
        if not root.is_dir():
            raise FileNotFoundError(f"Static output directory not found: {output_dir}")

        routes = []
        for artifact in sorted(root.rglob(artifact_name)):
            if not artifact.is_file():
                continue
            relative = artifact.parent.relative_to(root).as_posix()
            routes.append("/" if relative == "." else "/" + relative)

        logger.info(f"Loaded {len(routes)} published routes from {output_dir}")
        return cls(routes)

    @classmethod
    def from_config_file(cls, config_path: Union[str, Path]) -> "RouteAllowList":
        """
        Build the allow-list from ``link: '...'`` declarations in a site config.

        External links are ignored.

        Args:
            config_path: Site configuration file (sidebar/navigation source)

        Returns:
            RouteAllowList of the declared routes
        """
        config_path = Path(config_path)
        if not config_path.is_file():
            raise FileNotFoundError(f"Site config file not found: {config_path}")

        source = config_path.read_text(encoding="utf-8")
        routes = [
            match.group(2)
            for match in LINK_DECLARATION_RE.finditer(source)
            if not _EXTERNAL_LINK_RE.match(match.group(2))
        ]

        logger.info(f"Loaded {len(routes)} declared routes from {config_path}")
        return cls(routes)
