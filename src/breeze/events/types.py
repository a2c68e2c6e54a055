"""Event types emitted during a build invocation."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class BuildStarted:
    changed_files: int
    raw_content: int


@dataclass(frozen=True)
class CandidatesExtracted:
    candidates: int
    cache_entries: int
    elapsed: float


@dataclass(frozen=True)
class RulesGenerated:
    rules: int
    new_classes: int
    elapsed: float


@dataclass(frozen=True)
class StylesheetAssembled:
    rebuilt: bool
    rules: int
    elapsed: float


@dataclass(frozen=True)
class BuildCompleted:
    elapsed: float


BuildEvent = Union[
    BuildStarted,
    CandidatesExtracted,
    RulesGenerated,
    StylesheetAssembled,
    BuildCompleted,
]
