"""
Static project registry for the portfolio site.

The registry is defined once at import time and never mutated. Pages look
projects up by their ``href``.
"""

import logging
from dataclasses import dataclass
from typing import Optional


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectDescriptor:
    """One project card on the landing page."""

    id: int
    title: str
    description: str
    href: str
    thumb: Optional[str] = None
    thumb_bg: Optional[str] = None

    @property
    def has_thumb_image(self) -> bool:
        return bool(self.thumb)

    @classmethod
    def from_dict(cls, raw: dict) -> "ProjectDescriptor":
        """
        Build a descriptor from a plain mapping.

        Accepts ``thumbBg`` as an alias for ``thumb_bg``.

        :param raw: Mapping with at least ``id``, ``title``, ``description``, ``href``.
        :returns: Frozen ``ProjectDescriptor``.
        """

        return cls(
            id=int(raw["id"]),
            title=raw["title"],
            description=raw["description"],
            href=raw["href"],
            thumb=raw.get("thumb") or None,
            thumb_bg=raw.get("thumb_bg", raw.get("thumbBg")) or None,
        )


MORTGAGE_RATES_HREF = "/projects/mortgage-rates"
MORTGAGE_RATES_TITLE = "Mortgage Rate Dispersion"
MORTGAGE_RATES_WIDGET = "/widgets/mortgage-rates-beeswarm.html"
MORTGAGE_RATES_TAGS = (
    "R",
    "ggplot2",
    "ggiraph",
    "Beeswarm",
    "Housing",
    "Economics",
    "Data Visualization",
)

PROJECTS = (
    ProjectDescriptor(
        id=4,
        title=MORTGAGE_RATES_TITLE,
        description=(
            "Interactive beeswarm chart showing the distribution of 30-year "
            "fixed mortgage rates by year."
        ),
        href=MORTGAGE_RATES_HREF,
        thumb="/mortgage-rates-thumb.png",
    ),
)


def validate_registry(projects) -> tuple:
    """
    Check registry invariants and freeze it as a tuple.

    :param projects: Iterable of ``ProjectDescriptor``.
    :raises ValueError: On a duplicate ``id`` or an empty ``href``.
    :returns: Tuple of descriptors in the original order.
    """

    registry = tuple(projects)
    seen_ids = set()
    for project in registry:
        if project.id in seen_ids:
            raise ValueError(f"Duplicate project id in registry: {project.id}")
        seen_ids.add(project.id)
        if not project.href:
            raise ValueError(f"Project {project.id} has an empty href.")
        if not project.thumb and not project.thumb_bg:
            LOGGER.warning("Project %s has no thumbnail or fallback color", project.id)
    return registry


def find_project(href: str, projects=PROJECTS) -> Optional[ProjectDescriptor]:
    """Return the project whose ``href`` matches, or None."""

    for project in projects:
        if project.href == href:
            return project
    return None
