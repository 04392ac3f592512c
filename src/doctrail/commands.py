"""Interactive previous/next/up/down commands for host editors."""

from __future__ import annotations

from typing import Callable, Literal, Protocol

from doctrail.config import DOCTRAIL_SOURCE_SUFFIX
from doctrail.navigation import find_down, find_next, find_previous, find_up
from doctrail.project import TrailProject
from doctrail.schemas import TrailItem
from doctrail.search import find_item
from doctrail.utils.logging_config import get_logger

logger = get_logger(__name__)

Direction = Literal["next", "previous", "up", "down"]

NO_TRAIL_MESSAGE = "No trail is bound to this project"
NOT_IN_TRAIL_MESSAGE = "Document is not part of the trail"


class TrailHost(Protocol):
    """What the commands need from the hosting editor."""

    def current_document_identifier(self) -> str: ...

    def visit_document(self, identifier: str) -> None: ...

    def notify(self, message: str) -> None: ...


class TrailCommands:
    """Visit the neighbors of the host's current document.

    Each command returns the visited item, or None after telling the host
    why nothing was visited.
    """

    def __init__(
        self,
        project: TrailProject,
        host: TrailHost,
        *,
        source_suffix: str = DOCTRAIL_SOURCE_SUFFIX,
    ) -> None:
        self.project = project
        self.host = host
        self.source_suffix = source_suffix

    def visit_next(self) -> TrailItem | None:
        return self._visit("next")

    def visit_previous(self) -> TrailItem | None:
        return self._visit("previous")

    def visit_up(self) -> TrailItem | None:
        return self._visit("up")

    def visit_down(self) -> TrailItem | None:
        return self._visit("down")

    def command_table(self) -> dict[str, Callable[[], TrailItem | None]]:
        """Named actions for the host to bind to keys or menus."""
        return {
            "visit-next": self.visit_next,
            "visit-previous": self.visit_previous,
            "visit-up": self.visit_up,
            "visit-down": self.visit_down,
        }

    def _visit(self, direction: Direction) -> TrailItem | None:
        trail = self.project.bound_trail
        if trail is None:
            self.host.notify(NO_TRAIL_MESSAGE)
            return None

        identifier = self.host.current_document_identifier()
        current = find_item(trail, identifier)
        if current is None:
            self.host.notify(NOT_IN_TRAIL_MESSAGE)
            return None

        if direction == "next":
            target = find_next(trail, current)
        elif direction == "previous":
            target = find_previous(trail, current)
        elif direction == "up":
            target = find_up(trail, current)
        else:
            target = find_down(current)

        if target is None:
            logger.debug(
                "No trail neighbor",
                extra={"document": identifier, "direction": direction},
            )
            self.host.notify(f"No {direction} trail item")
            return None

        # Down opens the source file; the others go by bare link.
        destination = target.link + self.source_suffix if direction == "down" else target.link
        logger.info(
            "Visiting trail neighbor",
            extra={"document": identifier, "direction": direction, "target": destination},
        )
        self.host.visit_document(destination)
        return target
