from __future__ import annotations

"""
Domain Exceptions.

Failures surfaced by the evaluator and the script emitter. Undefined names
are not errors at the object-model level; lookups simply return None.
"""

from typing import List, Tuple


class ScriptWriteError(Exception):
    """
    Terminal I/O failure while creating or writing the build script.

    Attributes:
        path: Target script path.
        cause: The underlying OSError.
    """

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")


class ObjectPathCollisionError(ValueError):
    """
    Two distinct source paths derive the same object-file name.

    Attributes:
        collisions: (object_path, first_input, second_input) triples.
    """

    def __init__(self, collisions: List[Tuple[str, str, str]]) -> None:
        self.collisions = list(collisions)
        details = "; ".join(f"{obj} <- {a}, {b}" for obj, a, b in self.collisions)
        super().__init__(f"Object path collision: {details}")


class ManifestError(ValueError):
    """Malformed build manifest or unresolved reference inside it."""
