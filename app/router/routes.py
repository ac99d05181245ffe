# app/router/routes.py
"""
Path-prefix route table for the front router.

Each request path is matched against the table by longest prefix. Paths
that match nothing are served from the static frontend.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

STATIC = "static"
API = "api"


@dataclass(frozen=True)
class Route:
    prefix: str
    upstream: str


DEFAULT_ROUTES = (
    Route("/api/", API),
    Route("/health", API),
)


def match_upstream(path: str, routes: Sequence[Route] = DEFAULT_ROUTES) -> str:
    best: Optional[Route] = None
    for route in routes:
        if path.startswith(route.prefix):
            if best is None or len(route.prefix) > len(best.prefix):
                best = route
    return best.upstream if best else STATIC
