"""
Learning path schemas for LingoPath.

The learning path is the home-screen map: one node per catalog lesson,
grouped into three sections of two CEFR levels each.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .lesson import CEFRLevel, normalize_text


class NodeType(str, Enum):
    LESSON = "lesson"
    TREASURE = "treasure"
    CHALLENGE = "challenge"


# section number -> the levels it spans
SECTION_LEVELS: dict[int, tuple[CEFRLevel, ...]] = {
    1: (CEFRLevel.A1, CEFRLevel.A2),
    2: (CEFRLevel.B1, CEFRLevel.B2),
    3: (CEFRLevel.C1, CEFRLevel.C2),
}

SECTION_TITLES: dict[int, str] = {
    1: "Cơ bản (A1 - A2)",
    2: "Trung cấp (B1 - B2)",
    3: "Nâng cao (C1 - C2)",
}


class PathNode(BaseModel):
    """A stop on the learning path; `id` is the lesson id it opens."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    node_type: NodeType
    section: int = Field(..., ge=1, le=3)
    title: str
    subtitle: str = ""        # headline grammar / vocabulary point
    level_tag: CEFRLevel
    level: Optional[int] = Field(default=None, ge=1, le=5)

    @field_validator("title", "subtitle")
    @classmethod
    def nfc(cls, v):
        return normalize_text(v)

    @model_validator(mode="after")
    def level_in_section(self):
        if self.level_tag not in SECTION_LEVELS[self.section]:
            raise ValueError(
                f"Level {self.level_tag.value} does not belong to section {self.section}"
            )
        return self
