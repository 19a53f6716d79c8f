from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple


class ExclusionMode(str, Enum):
    """How excluded_folders patterns are matched against a relative path."""
    SUBSTRING = "substring"  # pattern anywhere in the path, "build" hides "rebuild.py"
    SEGMENT = "segment"      # pattern must equal a whole path segment


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Configuration:
    """Everything one report run needs. Built once per invocation, never mutated."""
    root: Path
    allowed_extensions: Tuple[str, ...] = ()
    excluded_folders: Tuple[str, ...] = ()
    exclusion_mode: ExclusionMode = ExclusionMode.SUBSTRING
    filter_tree_by_extension: bool = True

    def __post_init__(self):
        # frozen, so normalise through object.__setattr__
        object.__setattr__(self, "root", Path(self.root))
        object.__setattr__(self, "allowed_extensions", tuple(self.allowed_extensions))
        object.__setattr__(self, "excluded_folders", tuple(self.excluded_folders))
        object.__setattr__(self, "exclusion_mode", ExclusionMode(self.exclusion_mode))


@dataclass(frozen=True)
class TraversalEntry:
    rel_path: str  # root-relative, forward slashes
    kind: EntryKind
    is_text: Optional[bool] = field(default=None)
