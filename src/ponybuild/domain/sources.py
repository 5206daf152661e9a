from __future__ import annotations

"""
Source Collection Domain Models.

Defines compilable source entries and the ordered collections that group
them. Each entry carries the object-file name derived from its input path,
computed once when the entry is appended.
"""

from dataclasses import dataclass, field
from typing import Iterator, List

# -----------------------------------------------------------------------------
# CONSTANTS
# -----------------------------------------------------------------------------

OBJECT_SUFFIX: str = ".o"
FLAT_SEPARATOR: str = "_"
_PATH_SEPARATORS = ("/", "\\")


# -----------------------------------------------------------------------------
# PATH DERIVATION
# -----------------------------------------------------------------------------

def derive_object_path(input_path: str) -> str:
    """
    Compute the flat object-file name for a source path.

    Every path separator is replaced by an underscore and the object suffix
    is appended, so 'src/main.c' becomes 'src_main.c.o'.

    Args:
        input_path: Source path as declared by the build description.

    Returns:
        str: Object-file name relative to the build directory.
    """
    flat = input_path
    for sep in _PATH_SEPARATORS:
        flat = flat.replace(sep, FLAT_SEPARATOR)
    return flat + OBJECT_SUFFIX


# -----------------------------------------------------------------------------
# DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CSource:
    """
    A single C translation unit and the object file it compiles to.

    Attributes:
        input_path: Path of the source file, kept exactly as declared.
        output_path: Derived object-file name (see derive_object_path).
    """
    input_path: str
    output_path: str


@dataclass
class Sources:
    """
    Ordered, append-only collection of compilable sources.

    A collection may be shared by several artifacts; it is never copied.
    """
    c_sources: List[CSource] = field(default_factory=list)

    def push_c_source(self, input_path: str) -> CSource:
        """
        Append one source entry. No deduplication or existence check is made.

        Args:
            input_path: Source path to compile.

        Returns:
            CSource: The appended entry.
        """
        entry = CSource(input_path=input_path, output_path=derive_object_path(input_path))
        self.c_sources.append(entry)
        return entry

    def __iter__(self) -> Iterator[CSource]:
        return iter(self.c_sources)

    def __len__(self) -> int:
        return len(self.c_sources)
