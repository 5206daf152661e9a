from __future__ import annotations

"""
Object Model.

Everything a scope can bind to a name is an Object: a tagged value wrapping
a string, a source collection, an artifact or a nested scope. Wrapped values
are shared by reference, so several Objects may point at the same artifact.

Attribute resolution is an explicit capability (Lookup) implemented only by
the containers that expose named attributes: Artifact and Scope.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from ponybuild.domain.artifact import Artifact
    from ponybuild.domain.scope import Scope
    from ponybuild.domain.sources import Sources


# -----------------------------------------------------------------------------
# LOOKUP CAPABILITY
# -----------------------------------------------------------------------------

class Lookup(ABC):
    """
    Abstract capability for containers exposing named attributes.
    """

    @abstractmethod
    def lookup(self, name: str) -> Optional[Object]:
        """
        Resolve a name to an Object without mutating the container.

        Args:
            name: Attribute or variable name.

        Returns:
            Optional[Object]: The bound Object, or None if the name is undefined.
        """
        pass


# -----------------------------------------------------------------------------
# TAGGED VALUE
# -----------------------------------------------------------------------------

class ObjectKind(Enum):
    """Variant tag of an Object."""
    ARTIFACT = "artifact"
    SOURCES = "sources"
    STRING = "string"
    SCOPE = "scope"


@dataclass(frozen=True)
class Object:
    """
    Immutable tagged reference to a scope value.

    Use the factory classmethods rather than the constructor so the tag
    always matches the wrapped value.

    Attributes:
        kind: Variant tag.
        value: The wrapped str, Sources, Artifact or Scope instance.
    """
    kind: ObjectKind
    value: Any

    @classmethod
    def string(cls, value: str) -> Object:
        return cls(ObjectKind.STRING, value)

    @classmethod
    def sources(cls, value: Sources) -> Object:
        return cls(ObjectKind.SOURCES, value)

    @classmethod
    def artifact(cls, value: Artifact) -> Object:
        return cls(ObjectKind.ARTIFACT, value)

    @classmethod
    def scope(cls, value: Scope) -> Object:
        return cls(ObjectKind.SCOPE, value)

    @property
    def has_lookup(self) -> bool:
        """True for the variants that carry the Lookup capability."""
        return self.kind in (ObjectKind.ARTIFACT, ObjectKind.SCOPE)


# -----------------------------------------------------------------------------
# DISPATCH
# -----------------------------------------------------------------------------

def lookup(container: Object, name: str) -> Optional[Object]:
    """
    Resolve a name against an Object.

    Strings and source collections have no attributes, so any lookup on
    them yields None, the same result as an undefined name.

    Args:
        container: Object to resolve against.
        name: Attribute or variable name.

    Returns:
        Optional[Object]: The resolved Object, or None.
    """
    if not container.has_lookup:
        return None
    return container.value.lookup(name)
