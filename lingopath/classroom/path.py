"""
LearningPath - Home-screen map of lesson nodes, cross-checked against the catalog.
"""

import logging
from typing import Iterable

from lingopath.schemas import LessonKind, NodeType, PathNode, SECTION_LEVELS

from .catalog import LessonCatalog
from .errors import ContentIntegrityError, PathNodeNotFoundError

logger = logging.getLogger(__name__)

_KIND_FOR_NODE = {
    NodeType.LESSON: LessonKind.LESSON,
    NodeType.TREASURE: LessonKind.TREASURE,
    NodeType.CHALLENGE: LessonKind.CHALLENGE,
}


class LearningPath:
    """Ordered path nodes; every node must open an existing catalog lesson."""

    def __init__(self, nodes: Iterable[PathNode], catalog: LessonCatalog):
        self._nodes: tuple[PathNode, ...] = tuple(nodes)
        self._by_id: dict[int, PathNode] = {}

        for node in self._nodes:
            if node.id in self._by_id:
                raise ContentIntegrityError(f"Duplicate learning path node: {node.id}")
            self._check_against_catalog(node, catalog)
            self._by_id[node.id] = node

        self._sections: dict[int, tuple[PathNode, ...]] = {
            section: tuple(n for n in self._nodes if n.section == section)
            for section in SECTION_LEVELS
        }

    @staticmethod
    def _check_against_catalog(node: PathNode, catalog: LessonCatalog) -> None:
        if node.id not in catalog:
            raise ContentIntegrityError(f"Path node {node.id} references a missing lesson")
        lesson = catalog.lesson_by_id(node.id)
        if lesson.level_tag != node.level_tag:
            raise ContentIntegrityError(
                f"Path node {node.id} is tagged {node.level_tag.value} "
                f"but lesson {lesson.id} is {lesson.level_tag.value}"
            )
        if _KIND_FOR_NODE[node.node_type] != lesson.kind:
            raise ContentIntegrityError(
                f"Path node {node.id} is a {node.node_type.value} "
                f"but lesson {lesson.id} is a {lesson.kind.value}"
            )
        if node.title != lesson.topic:
            logger.warning(f"Path node {node.id} title {node.title!r} differs from topic {lesson.topic!r}")

    def nodes(self) -> tuple[PathNode, ...]:
        return self._nodes

    def node(self, node_id: int) -> PathNode:
        try:
            return self._by_id[node_id]
        except (KeyError, TypeError):
            raise PathNodeNotFoundError(node_id) from None

    def section(self, section: int) -> tuple[PathNode, ...]:
        """Nodes in one section (1-3); empty tuple for any other number."""
        return self._sections.get(section, ())

    def sections(self) -> tuple[int, ...]:
        return tuple(SECTION_LEVELS)
