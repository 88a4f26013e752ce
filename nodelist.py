#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# NodeList: a jQuery-ish collection over someone else's DOM nodes.
#
# "Huginn and Muninn fly each day over the spacious earth."
#     -- Grimnismal, stanza 20
#
#pylint: disable=W0212
#
from collections.abc import Iterable, Mapping
from itertools import islice
from typing import Any, Callable, Dict, List, Union
import functools
import logging

from huginntypes import UnknownOperationError, UnsupportedOperation
from huginntypes import IterMode, DOMNode_P, Behavior_P, isStop
from manipulation import ManipulationBehavior
from traversal import TraversalMixin

lg = logging.getLogger("nodelist")

__metadata__ = {
    "title"        : "nodelist",
    "description"  : "Ordered, sparse, delegating collection of DOM nodes.",
    "type"         : "http://purl.org/dc/dcmitype/Software",
    "language"     : "Python 3.9",
    "created"      : "2026-10-18",
    "modified"     : "2026-10-18",
    "license"      : "https://creativecommons.org/licenses/by-sa/3.0/"
}
__version__ = __metadata__['modified']

descr = """
=Description=

A NodeList holds references to nodes owned by some DOM document
(xml.dom.minidom is what the tests use). It never creates or destroys nodes;
it stores them, reorders them, and forwards calls to them.

Storage is an ordered dict from int key to node, so `del nl[3]` leaves a
gap rather than renumbering. shift(), unshift(),
reverse(), merge() and map() produce renumbered keys.

Calls the NodeList itself doesn't define go to `NodeList.behavior`
(see manipulation.py), and then to the first node. So
`nl.addClass("x")` hits every element, while `nl.getAttribute("id")`
just asks the first one.

The collection also has a cursor (rewind/valid/current/key/next plus
hasChildren/getChildren), which RecursiveNodeIterator uses to walk trees.
first() and last() do not move it.
"""

ArrayLike = Union[Iterable, Mapping, 'NodeList']


###############################################################################
#
class NodeList(TraversalMixin):
    """Ordered, index-addressable, possibly sparse, collection of nodes.
    Membership is by identity, never by ==.
    """
    behavior:Behavior_P = ManipulationBehavior()

    def __init__(self, ownerDocument:Any=None, nodes:ArrayLike=None):
        self.ownerDocument = ownerDocument
        self._nodes:Dict[int, DOMNode_P] = {}
        self._cursor = 0
        if not self.isArrayLike(nodes):
            if nodes is not None:
                lg.debug("NodeList: ignoring non-array-like %s", type(nodes).__name__)
            nodes = []
        elif isinstance(nodes, Mapping):
            nodes = nodes.values()
        for node in nodes:
            self._nodes[len(self._nodes)] = node

    def __getattr__(self, name:str) -> Any:
        """Only reached when ordinary lookup fails. Try the behavior, then
        the first node; after that, give up.
        """
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.behavior.resolve(self, name)
        except UnsupportedOperation:
            pass
        firstNode = self.first()
        if firstNode is not None and hasattr(firstNode, name):
            lg.debug("NodeList: forwarding '%s' to first node <%s>.",
                name, getattr(firstNode, "nodeName", "?"))
            return getattr(firstNode, name)
        raise UnknownOperationError(
            f"Call to undefined method {type(self).__name__}.{name}()")

    def __repr__(self) -> str:
        names = ", ".join(getattr(n, "nodeName", repr(n)) for n in self)
        return f"<{type(self).__name__} ({self.count()}): [{names}]>"

    @staticmethod
    def isArrayLike(x:Any) -> bool:
        """Strings are iterable, but a string is not a list of nodes.
        """
        if isinstance(x, (str, bytes, bytearray)): return False
        return isinstance(x, (Iterable, Mapping))

    def collection(self) -> 'NodeList':
        return self

    def document(self) -> Any:
        return self.ownerDocument

    def result(self, nodeList:'NodeList') -> 'NodeList':
        return nodeList

    def newNodeList(self, nodes:ArrayLike=None) -> 'NodeList':
        """Same class, same document.
        """
        return type(self)(self.ownerDocument, nodes)

    ### Random access

    def count(self) -> int:
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def length(self) -> int:
        return len(self._nodes)

    def offsetExists(self, key:int) -> bool:
        try:
            return key in self._nodes
        except TypeError:
            return False

    def offsetGet(self, key:int) -> DOMNode_P:
        try:
            return self._nodes.get(key)
        except TypeError:  # unhashable
            return None

    def offsetSet(self, key:int, value:DOMNode_P) -> None:
        """No key means append; an existing key is replaced where it is;
        a new key goes at the end of the ordering (maybe leaving a gap).
        """
        if key is None:
            key = self._nextKey()
        elif not isinstance(key, int) or isinstance(key, bool):
            raise TypeError(f"NodeList keys are ints, not {type(key).__name__}.")
        self._nodes[key] = value

    def offsetUnset(self, key:int) -> None:
        self._nodes.pop(key, None)

    get = offsetGet
    set = offsetSet

    def __getitem__(self, key:int) -> DOMNode_P:
        return self.offsetGet(key)

    def __setitem__(self, key:int, value:DOMNode_P) -> None:
        self.offsetSet(key, value)

    def __delitem__(self, key:int) -> None:
        self.offsetUnset(key)

    def keys(self) -> List[int]:
        return list(self._nodes.keys())

    def _nextKey(self) -> int:
        if not self._nodes: return 0
        return max(max(self._nodes) + 1, 0)

    def _renumber(self, nodes:Iterable) -> None:
        self._nodes = dict(enumerate(nodes))
        self._cursor = 0

    ### Python iteration (independent of the cursor)

    def __iter__(self):
        return iter(list(self._nodes.values()))

    def __contains__(self, item:DOMNode_P) -> bool:
        """Identity, not equality: two empty <p/> are still different nodes.
        """
        return self.exists(item)

    def __bool__(self) -> bool:
        return len(self._nodes) > 0

    ### Stack, queue, and set operations

    def add(self, node:DOMNode_P) -> 'NodeList':
        self._nodes[self._nextKey()] = node
        return self

    def push(self, node:DOMNode_P) -> 'NodeList':
        return self.add(node)

    def pop(self) -> DOMNode_P:
        """The cursor stays put, unless it now points past the end.
        """
        if not self._nodes: return None
        _key, node = self._nodes.popitem()
        self._cursor = min(self._cursor, len(self._nodes))
        return node

    def unshift(self, node:DOMNode_P) -> 'NodeList':
        self._renumber([node] + self.toArray())
        return self

    def shift(self) -> DOMNode_P:
        if not self._nodes: return None
        nodes = self.toArray()
        self._renumber(nodes[1:])
        return nodes[0]

    def exists(self, node:DOMNode_P) -> bool:
        for x in self._nodes.values():
            if x is node: return True
        return False

    def delete(self, node:DOMNode_P) -> 'NodeList':
        """Drop the first entry that *is* node. Leaves a gap in the keys.
        """
        for k, x in self._nodes.items():
            if x is node:
                del self._nodes[k]
                break
        return self

    def first(self) -> DOMNode_P:
        for node in self._nodes.values():
            return node
        return None

    def last(self) -> DOMNode_P:
        if not self._nodes: return None
        return next(reversed(self._nodes.values()))

    def reverse(self) -> 'NodeList':
        self._renumber(reversed(self.toArray()))
        return self

    ### Functional operators

    def each(self, fn:Callable) -> 'NodeList':
        """Call fn on each node in order; fn returning Stop (False) ends it.
        """
        for node in self.toArray():
            if isStop(fn(node)): break
        return self

    def map(self, fn:Callable) -> 'NodeList':
        """None and Stop results are dropped, so this filters, too.
        """
        results = []
        for node in self.toArray():
            res = fn(node)
            if res is None or isStop(res): continue
            results.append(res)
        return self.newNodeList(results)

    def reduce(self, fn:Callable, initial:Any=None) -> Any:
        return functools.reduce(fn, self.toArray(), initial)

    def merge(self, elements:ArrayLike=None) -> 'NodeList':
        if isinstance(elements, NodeList):
            elements = elements.toArray()
        elif isinstance(elements, Mapping):
            elements = list(elements.values())
        elif self.isArrayLike(elements):
            elements = list(elements)
        else:
            elements = []
        return self.newNodeList(self.toArray() + elements)

    def toArray(self) -> List[DOMNode_P]:
        return list(self._nodes.values())

    def fromArray(self, nodes:ArrayLike=None) -> None:
        """Replace everything. A mapping keeps its keys if they are all ints;
        otherwise it is renumbered from 0, like any other array-like.
        """
        if isinstance(nodes, NodeList):
            self._nodes = dict(nodes._nodes)
        elif isinstance(nodes, Mapping):
            if all(isinstance(k, int) and not isinstance(k, bool) for k in nodes):
                self._nodes = dict(nodes)
            else:
                lg.debug("fromArray: non-int keys, renumbering.")
                self._nodes = dict(enumerate(nodes.values()))
        elif self.isArrayLike(nodes):
            self._nodes = dict(enumerate(nodes))
        else:
            lg.debug("fromArray: non-array-like %s, emptying.", type(nodes).__name__)
            self._nodes = {}
        self._cursor = 0

    ### Cursor protocol (used by RecursiveNodeIterator)

    def _keyAt(self, pos:int) -> int:
        if pos < 0 or pos >= len(self._nodes): return None
        return next(islice(self._nodes.keys(), pos, None))

    def rewind(self) -> DOMNode_P:
        self._cursor = 0
        return self.current()

    def valid(self) -> bool:
        return 0 <= self._cursor < len(self._nodes)

    def current(self) -> DOMNode_P:
        k = self._keyAt(self._cursor)
        return None if k is None else self._nodes[k]

    def key(self) -> int:
        return self._keyAt(self._cursor)

    def next(self) -> DOMNode_P:
        if self._cursor < len(self._nodes): self._cursor += 1
        return self.current()

    def hasChildren(self) -> bool:
        if not self.valid(): return False
        cur = self.current()
        return bool(cur.hasChildNodes()) if hasattr(cur, "hasChildNodes") else False

    def getChildren(self) -> 'NodeList':
        """A fresh NodeList (own cursor, same document) of the current
        node's childNodes.
        """
        nodes = []
        if self.valid():
            nodes = getattr(self.current(), "childNodes", None) or []
        return self.newNodeList(nodes)

    def getRecursiveIterator(self, mode:IterMode=IterMode.SELF_FIRST,
        maxDepth:int=-1) -> 'RecursiveNodeIterator':
        return RecursiveNodeIterator(self, mode=mode, maxDepth=maxDepth)


###############################################################################
#
class RecursiveNodeIterator:
    """Depth-first walk over a NodeList and everything under it, using only
    the cursor protocol (rewind/valid/current/next/hasChildren/getChildren).

    mode:     SELF_FIRST (pre-order), CHILD_FIRST (post-order), LEAVES_ONLY.
    maxDepth: -1 for no limit; 0 for just the top-level list.

    The walk runs over a copy of the top-level list, so it never moves
    nodeList's own cursor, and several iterators can run at once.
    """
    def __init__(self, nodeList:NodeList, mode:IterMode=IterMode.SELF_FIRST,
        maxDepth:int=-1):
        self.root = nodeList
        self.mode = IterMode(mode)
        self.maxDepth = maxDepth
        self._gen = None
        self._depth = 0

    def __iter__(self) -> 'RecursiveNodeIterator':
        self._gen = self._walk(self.root.newNodeList(self.root), 0)
        return self

    def __next__(self) -> DOMNode_P:
        if self._gen is None: self.__iter__()
        return next(self._gen)

    def getDepth(self) -> int:
        """Depth of the node most recently handed back (0 = top level).
        """
        return self._depth

    def _canDescend(self, depth:int) -> bool:
        return self.maxDepth < 0 or depth < self.maxDepth

    def _walk(self, nl:NodeList, depth:int):
        nl.rewind()
        while nl.valid():
            node = nl.current()
            descend = nl.hasChildren() and self._canDescend(depth)
            if self.mode is IterMode.SELF_FIRST:
                self._depth = depth
                yield node
            elif self.mode is IterMode.LEAVES_ONLY and not descend:
                self._depth = depth
                yield node
            if descend:
                yield from self._walk(nl.getChildren(), depth+1)
            if self.mode is IterMode.CHILD_FIRST:
                self._depth = depth
                yield node
            nl.next()
