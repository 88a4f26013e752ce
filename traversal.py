#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Navigation methods mixed into NodeList. Each one starts from every node
# in the list and hands back a new NodeList (same class, same document),
# with no node in it twice.
#
# Selection is by callables, not selector strings: pass any
# `Callable[[node], bool]`, e.g. `lambda n: n.nodeName == "p"`.
#
#pylint: disable=E1101
#
from typing import Any, Callable, Iterable, List
import logging

from xml.dom import Node

lg = logging.getLogger("traversal")

__metadata__ = {
    "title"        : "traversal",
    "description"  : "Tree-navigation methods for NodeList.",
    "type"         : "http://purl.org/dc/dcmitype/Software",
    "language"     : "Python 3.9",
    "created"      : "2026-10-18",
    "modified"     : "2026-10-18",
    "license"      : "https://creativecommons.org/licenses/by-sa/3.0/"
}
__version__ = __metadata__['modified']

Predicate = Callable[[Any], bool]


def uniqueNodes(nodes:Iterable) -> List:
    """Drop repeats, by identity, keeping the first occurrence.
    """
    seen = set()
    result = []
    for n in nodes:
        if n is None or id(n) in seen: continue
        seen.add(id(n))
        result.append(n)
    return result


###############################################################################
#
class TraversalMixin:
    """Expects the host class to provide newNodeList(), result(),
    collection(), and getRecursiveIterator().
    """
    def children(self) -> 'NodeList':
        """Element children only.
        """
        found = []
        for node in self.collection():
            for ch in getattr(node, "childNodes", None) or []:
                if ch.nodeType == Node.ELEMENT_NODE: found.append(ch)
        return self.result(self.newNodeList(uniqueNodes(found)))

    def contents(self) -> 'NodeList':
        """All children, including text, comments, and PIs.
        """
        found = []
        for node in self.collection():
            found.extend(getattr(node, "childNodes", None) or [])
        return self.result(self.newNodeList(uniqueNodes(found)))

    def parent(self) -> 'NodeList':
        return self.result(self.newNodeList(uniqueNodes(
            getattr(n, "parentNode", None) for n in self.collection())))

    def parents(self) -> 'NodeList':
        """All ancestors of every node, nearest first. The Document node
        is left out.
        """
        found = []
        for node in self.collection():
            cur = getattr(node, "parentNode", None)
            while cur is not None and cur.nodeType != Node.DOCUMENT_NODE:
                found.append(cur)
                cur = cur.parentNode
        return self.result(self.newNodeList(uniqueNodes(found)))

    def siblings(self) -> 'NodeList':
        """Other children of each node's parent (not the node itself).
        """
        found = []
        for node in self.collection():
            par = getattr(node, "parentNode", None)
            if par is None: continue
            found.extend(ch for ch in par.childNodes if ch is not node)
        return self.result(self.newNodeList(uniqueNodes(found)))

    def descendants(self) -> 'NodeList':
        """Everything below each node, in document (pre-)order.
        """
        found = []
        for node in self.collection():
            sub = self.newNodeList(getattr(node, "childNodes", None) or [])
            found.extend(sub.getRecursiveIterator())
        return self.result(self.newNodeList(uniqueNodes(found)))

    def filter(self, pred:Predicate) -> 'NodeList':
        return self.result(self.newNodeList(
            [ n for n in self.collection() if pred(n) ]))

    def exclude(self, pred:Predicate) -> 'NodeList':
        return self.result(self.newNodeList(
            [ n for n in self.collection() if not pred(n) ]))

    def closest(self, pred:Predicate) -> 'NodeList':
        """For each node, the node itself or its nearest ancestor that
        satisfies pred (if any).
        """
        found = []
        for node in self.collection():
            cur = node
            while cur is not None:
                if cur.nodeType != Node.DOCUMENT_NODE and pred(cur):
                    found.append(cur)
                    break
                cur = cur.parentNode
        return self.result(self.newNodeList(uniqueNodes(found)))

    def has(self, pred:Predicate) -> 'NodeList':
        """Just the nodes with some descendant that satisfies pred.
        """
        keep = []
        for node in self.collection():
            sub = self.newNodeList(getattr(node, "childNodes", None) or [])
            for desc in sub.getRecursiveIterator():
                if pred(desc):
                    keep.append(node)
                    break
        return self.result(self.newNodeList(keep))
