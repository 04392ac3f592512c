"""Associate one trail with each publishing project."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from doctrail.config import DOCTRAIL_INDEX_NAME, DOCTRAIL_STRICT_LINKS
from doctrail.outline import count_items, validate_trail
from doctrail.schemas import Trail, TrailItem
from doctrail.search import contains_item
from doctrail.utils.logging_config import get_logger

logger = get_logger(__name__)


class TrailProject:
    """A publishing project and the single trail bound to it.

    Args:
        name: Project name, used as the registry key.
        index_name: Stem of the document that lists the whole trail.
        trail: Optional trail to bind immediately.
        strict: Validate trails on bind (duplicate and dangling links).
        documents: Known document identifiers for dangling-link checks.
    """

    def __init__(
        self,
        name: str,
        *,
        index_name: str = DOCTRAIL_INDEX_NAME,
        trail: Sequence[TrailItem] | None = None,
        strict: bool = DOCTRAIL_STRICT_LINKS,
        documents: Iterable[str] | None = None,
    ) -> None:
        self.name = name
        self.index_name = index_name
        self.strict = strict
        self.documents = list(documents) if documents is not None else None
        self._trail: Trail | None = None
        if trail is not None:
            self.bind_trail(trail)

    @property
    def bound_trail(self) -> Trail | None:
        return self._trail

    @property
    def has_trail(self) -> bool:
        return self._trail is not None

    def bind_trail(self, trail: Sequence[TrailItem]) -> None:
        """Install ``trail`` as this project's trail, replacing any old one.

        Raises:
            TrailConfigError: In strict mode, if the trail fails validation.
                The previous binding is left untouched in that case.
        """
        new_trail = tuple(trail)
        if self.strict:
            validate_trail(new_trail, self.documents)

        if self._trail is not None:
            self.unbind_trail()
        self._trail = new_trail
        logger.debug(
            "Bound trail",
            extra={"project": self.name, "items": count_items(new_trail)},
        )

    def unbind_trail(self) -> Trail | None:
        """Remove and return the current binding."""
        old, self._trail = self._trail, None
        if old is not None:
            logger.debug("Unbound trail", extra={"project": self.name})
        return old

    def __repr__(self) -> str:
        size = count_items(self._trail) if self._trail else 0
        return f"TrailProject({self.name!r}, items={size})"


class TrailRegistry:
    """Name-keyed collection of projects owned by a host integration."""

    def __init__(self, projects: Iterable[TrailProject] = ()) -> None:
        self._projects: dict[str, TrailProject] = {}
        for project in projects:
            self.register(project)

    def register(self, project: TrailProject) -> None:
        """Add a project, replacing any project registered under its name."""
        self._projects[project.name] = project

    def get(self, name: str) -> TrailProject | None:
        return self._projects.get(name)

    def project_for_document(self, identifier: str) -> TrailProject | None:
        """Return the first project whose trail contains the document."""
        for project in self._projects.values():
            if project.bound_trail and contains_item(project.bound_trail, identifier):
                return project
        return None

    def __iter__(self) -> Iterator[TrailProject]:
        return iter(self._projects.values())

    def __len__(self) -> int:
        return len(self._projects)
