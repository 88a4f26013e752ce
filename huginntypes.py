#!/usr/bin/env python3
#
# Small/shared types for huginn, including:
#     Exceptions
#     The each()/map() stop value
#     Enum enhancements
#     Protocols
#
from typing import Any, Protocol, Iterable
from enum import Enum

__metadata__ = {
    "title"        : "huginntypes",
    "description"  : "Shared exceptions, enums, and protocols for huginn.",
    "type"         : "http://purl.org/dc/dcmitype/Software",
    "language"     : "Python 3.9",
    "created"      : "2026-10-18",
    "modified"     : "2026-10-18",
    "license"      : "https://creativecommons.org/licenses/by-sa/3.0/"
}
__version__ = __metadata__['modified']


###############################################################################
# Exceptions
#
class HuginnError(Exception): pass
HE = HuginnError

# Raised by a behavior's resolve() to say "not mine, try the next tier".
class UnsupportedOperation(HE): pass

# Nobody (collection, behavior, or first node) knows the operation.
# Also an AttributeError, so hasattr() and getattr(x, n, default) still work.
class UnknownOperationError(HE, AttributeError): pass


###############################################################################
# Returning exactly this (not just anything falsy) from an each() callback
# ends the loop; map() also drops it.
#
Stop = False

def isStop(value:Any) -> bool:
    return value is Stop


###############################################################################
#
class FlexibleEnum(Enum):
    """Subclass from this to make enums that can construct from any of:
        E.XYZ       -- the usual enumclass.name form,
        E(E.XYZ)    -- an instance of the Enum as argument,
        E("XYZ")    -- a string that matches a member name,
        E(1)        -- a value of a member.
    """
    @classmethod
    def _missing_(cls, value: Any):
        if isinstance(value, str):
            try:
                return cls[value]
            except KeyError:
                for member in cls:
                    if member.value == value: return member
                for member in cls:
                    if member.name.casefold() == value.casefold(): return member
        return None

    def tostring(self) -> str:
        return self.name


class IterMode(FlexibleEnum):
    """Which nodes a RecursiveNodeIterator hands back, and when.
    """
    LEAVES_ONLY = 0   # Only nodes without children
    SELF_FIRST  = 1   # Parent, then its descendants (pre-order)
    CHILD_FIRST = 2   # Descendants, then their parent (post-order)


###############################################################################
# Protocols for the pluggable collaborators
#
class DOMNode_P(Protocol):
    """What we need from an (externally owned) DOM node. xml.dom.minidom
    nodes qualify.
    """
    nodeType: int
    nodeName: str
    parentNode: Any
    ownerDocument: Any
    childNodes: Iterable

    def hasChildNodes(self) -> bool: ...
    def cloneNode(self, deep:bool) -> 'DOMNode_P': ...

class Behavior_P(Protocol):
    """A second-tier operation provider for NodeList.__getattr__.
    resolve() returns a callable bound to the collection, or raises
    UnsupportedOperation.
    """
    def resolve(self, collection:Any, name:str) -> Any: ...
