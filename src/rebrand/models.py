# src/rebrand/models.py
from dataclasses import dataclass, field
from typing import Iterator, List, NamedTuple, Optional, Tuple


@dataclass(frozen=True)
class VariantSet:
    """Every casing rendering of one name. All fields but `original` derive from `tokens`."""
    original: str
    tokens: Tuple[str, ...]
    title_case: str
    pascal_case: str
    camel_case: str
    kebab_case: str
    snake_case: str
    upper_snake_case: str
    upper_flat: str
    flat_lower: str

    def patterns(self) -> List[str]:
        return [
            self.original,
            self.title_case,
            self.pascal_case,
            self.camel_case,
            self.kebab_case,
            self.snake_case,
            self.upper_snake_case,
            self.upper_flat,
            self.flat_lower,
        ]


@dataclass(frozen=True)
class ReplacementPair:
    source: str
    target: str
    description: str = ""


@dataclass(frozen=True)
class ReplacementPlan:
    """
    Ordered, deduplicated replacement pairs for one rename.

    Pairs have unique sources and are sorted longest source first.
    """
    pairs: Tuple[ReplacementPair, ...]
    source_variants: VariantSet
    target_variants: VariantSet

    @property
    def patterns(self) -> List[str]:
        return [pair.source for pair in self.pairs]

    def __iter__(self) -> Iterator[ReplacementPair]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)


class ReplaceResult(NamedTuple):
    updated: str
    replacements_made: int


@dataclass(frozen=True)
class FileResult:
    rel_path: str
    changed: bool
    replacements: int


@dataclass(frozen=True)
class RemainingMatch:
    rel_path: str
    matches: Tuple[str, ...]


@dataclass(frozen=True)
class SupabaseStatus:
    project_id: Optional[str]
    running: Tuple[str, ...]


@dataclass
class RenameReport:
    files_scanned: int = 0
    files_changed: int = 0
    total_replacements: int = 0
    dry_run: bool = False
    changed: List[FileResult] = field(default_factory=list)
    remaining: List[RemainingMatch] = field(default_factory=list)
