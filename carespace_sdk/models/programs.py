from typing import Optional

from pydantic import Field

from .common import EntityBase, ProgramCategory, ProgramDifficulty, RequestModel


class Exercise(EntityBase):
    name: str
    description: Optional[str] = None
    instructions: Optional[str] = None
    duration: Optional[int] = None
    repetitions: Optional[int] = None
    sets: Optional[int] = None
    rest_time: Optional[int] = None
    body_parts: list[str] = Field(default_factory=list)
    equipment: list[str] = Field(default_factory=list)
    media_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    order: int = 0


class Program(EntityBase):
    name: str
    description: Optional[str] = None
    category: Optional[ProgramCategory] = None
    difficulty: Optional[ProgramDifficulty] = None
    duration: Optional[int] = None
    exercises: list[Exercise] = Field(default_factory=list)
    is_template: bool = False
    is_public: bool = False
    creator_id: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    thumbnail_url: Optional[str] = None


class CreateProgramRequest(RequestModel):
    name: str
    description: Optional[str] = None
    category: ProgramCategory
    difficulty: ProgramDifficulty
    duration: Optional[int] = None
    is_template: bool = False
    is_public: bool = False
    tags: Optional[list[str]] = None
    thumbnail_url: Optional[str] = None


class UpdateProgramRequest(RequestModel):
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[ProgramCategory] = None
    difficulty: Optional[ProgramDifficulty] = None
    duration: Optional[int] = None
    is_template: Optional[bool] = None
    is_public: Optional[bool] = None
    tags: Optional[list[str]] = None
    thumbnail_url: Optional[str] = None


class CreateExerciseRequest(RequestModel):
    name: str
    description: Optional[str] = None
    instructions: Optional[str] = None
    duration: Optional[int] = None
    repetitions: Optional[int] = None
    sets: Optional[int] = None
    rest_time: Optional[int] = None
    body_parts: Optional[list[str]] = None
    equipment: Optional[list[str]] = None
    media_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    order: int = 0
