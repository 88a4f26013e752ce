#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Collection-wide DOM edits for NodeList: attributes, classes, text, and
# moving nodes around. These are the second place NodeList.__getattr__
# looks, after the NodeList's own methods and before the first node.
#
#pylint: disable=W0613
#
from collections.abc import Iterable
from typing import Any, Callable, Dict, List
import types
import logging

from xml.dom import Node

from huginntypes import UnsupportedOperation

lg = logging.getLogger("manipulation")

__metadata__ = {
    "title"        : "manipulation",
    "description"  : "Collection-wide DOM mutation helpers for NodeList.",
    "type"         : "http://purl.org/dc/dcmitype/Software",
    "language"     : "Python 3.9",
    "created"      : "2026-10-18",
    "modified"     : "2026-10-18",
    "license"      : "https://creativecommons.org/licenses/by-sa/3.0/"
}
__version__ = __metadata__['modified']

# Node types that can take childNodes.
PARENT_TYPES = ( Node.ELEMENT_NODE, Node.DOCUMENT_NODE,
    Node.DOCUMENT_FRAGMENT_NODE )

# Node types whose text is just their data.
DATA_TYPES = ( Node.TEXT_NODE, Node.CDATA_SECTION_NODE )

_registry:Dict[str, Callable] = {}

def operation(func:Callable) -> Callable:
    """Decorator: make func available (by name) to ManipulationBehavior.
    func gets the NodeList as its first argument.
    """
    _registry[func.__name__] = func
    return func


###############################################################################
#
class ManipulationBehavior:
    """A table of named operations, each applied across a whole NodeList.
    Pass `operations` to start from a different table, or register() more.
    """
    def __init__(self, operations:Dict[str, Callable]=None):
        if operations is None: operations = _registry
        self.operations = dict(operations)

    def register(self, name:str, func:Callable) -> None:
        self.operations[name] = func

    def supports(self, name:str) -> bool:
        return name in self.operations

    def resolve(self, collection:Any, name:str) -> Callable:
        try:
            func = self.operations[name]
        except KeyError as e:
            raise UnsupportedOperation(
                f"{type(self).__name__} has no operation '{name}'.") from e
        return types.MethodType(func, collection)


###############################################################################
# Helpers
#
def isElement(node:Any) -> bool:
    return getattr(node, "nodeType", None) == Node.ELEMENT_NODE

def canHaveChildren(node:Any) -> bool:
    return getattr(node, "nodeType", None) in PARENT_TYPES

def textOf(node:Any) -> str:
    """Like the DOM textContent getter (minidom doesn't have one).
    """
    nt = getattr(node, "nodeType", None)
    if nt in DATA_TYPES: return node.data
    if nt in PARENT_TYPES:
        return "".join(textOf(ch) for ch in node.childNodes
            if ch.nodeType in DATA_TYPES or ch.nodeType == Node.ELEMENT_NODE)
    return ""

def asNodes(content:Any) -> List:
    """Accept a node, a NodeList, or any array-like of nodes.
    """
    if content is None: return []
    if isinstance(content, (str, bytes)):
        raise TypeError("Expected node(s), not a string; create a Text node.")
    if isinstance(content, Iterable): return list(content)
    return [ content ]

def classTokens(el:Any) -> List[str]:
    return el.getAttribute("class").split()

def setClassTokens(el:Any, tokens:List[str]) -> None:
    if tokens: el.setAttribute("class", " ".join(tokens))
    elif el.hasAttribute("class"): el.removeAttribute("class")

def _forEachTarget(targets:List, content:Any, insert:Callable) -> None:
    """The last target gets the original nodes; the others get deep clones.
    """
    nodes = asNodes(content)
    for i, target in enumerate(targets):
        if i == len(targets) - 1: batch = nodes
        else: batch = [ n.cloneNode(True) for n in nodes ]
        insert(target, batch)


###############################################################################
# Attributes
#
@operation
def attr(nl, name:str, value:Any=None) -> Any:
    """With no value, get the attribute from the first element (or None).
    With a value, set it on every element.
    """
    elements = [ n for n in nl.collection() if isElement(n) ]
    if value is None:
        if not elements or not elements[0].hasAttribute(name): return None
        return elements[0].getAttribute(name)
    for el in elements:
        el.setAttribute(name, str(value))
    return nl.result(nl)

@operation
def removeAttr(nl, name:str) -> Any:
    for el in nl.collection():
        if isElement(el) and el.hasAttribute(name):
            el.removeAttribute(name)
    return nl.result(nl)


###############################################################################
# Classes
#
@operation
def addClass(nl, *names:str) -> Any:
    wanted = " ".join(names).split()
    for el in nl.collection():
        if not isElement(el): continue
        tokens = classTokens(el)
        for w in wanted:
            if w not in tokens: tokens.append(w)
        setClassTokens(el, tokens)
    return nl.result(nl)

@operation
def removeClass(nl, *names:str) -> Any:
    """With no names, remove all classes.
    """
    unwanted = " ".join(names).split()
    for el in nl.collection():
        if not isElement(el): continue
        if not names:
            setClassTokens(el, [])
            continue
        setClassTokens(el, [ t for t in classTokens(el) if t not in unwanted ])
    return nl.result(nl)

@operation
def toggleClass(nl, name:str) -> Any:
    for el in nl.collection():
        if not isElement(el): continue
        tokens = classTokens(el)
        if name in tokens: tokens.remove(name)
        else: tokens.append(name)
        setClassTokens(el, tokens)
    return nl.result(nl)

@operation
def hasClass(nl, name:str) -> bool:
    for el in nl.collection():
        if isElement(el) and name in classTokens(el): return True
    return False


###############################################################################
# Content
#
@operation
def text(nl, value:str=None) -> Any:
    """With no value, cat together all the nodes' text.
    With a value, make it the only content of each node.
    """
    if value is None:
        return "".join(textOf(n) for n in nl.collection())
    for node in nl.collection():
        nt = getattr(node, "nodeType", None)
        if nt in DATA_TYPES:
            node.data = value
        elif canHaveChildren(node):
            _removeChildren(node)
            if value != "":
                doc = node.ownerDocument or nl.document()
                node.appendChild(doc.createTextNode(value))
    return nl.result(nl)

def _removeChildren(node:Any) -> None:
    while node.firstChild is not None:
        node.removeChild(node.firstChild)

@operation
def empty(nl) -> Any:
    for node in nl.collection():
        if canHaveChildren(node): _removeChildren(node)
    return nl.result(nl)

@operation
def remove(nl) -> Any:
    """Take each node out of its tree. They stay in the NodeList.
    """
    for node in nl.collection():
        if node.parentNode is not None:
            node.parentNode.removeChild(node)
    return nl.result(nl)

@operation
def clone(nl, deep:bool=True) -> Any:
    return nl.result(nl.newNodeList([ n.cloneNode(deep) for n in nl.collection() ]))


###############################################################################
# Insertion
#
@operation
def append(nl, content:Any) -> Any:
    def ins(target, batch):
        for n in batch: target.appendChild(n)
    _forEachTarget([ t for t in nl.collection() if canHaveChildren(t) ], content, ins)
    return nl.result(nl)

@operation
def prepend(nl, content:Any) -> Any:
    def ins(target, batch):
        ref = target.firstChild
        for n in batch:
            if ref is None: target.appendChild(n)
            else: target.insertBefore(n, ref)
    _forEachTarget([ t for t in nl.collection() if canHaveChildren(t) ], content, ins)
    return nl.result(nl)

@operation
def before(nl, content:Any) -> Any:
    def ins(target, batch):
        for n in batch: target.parentNode.insertBefore(n, target)
    _forEachTarget([ t for t in nl.collection() if t.parentNode is not None ],
        content, ins)
    return nl.result(nl)

@operation
def after(nl, content:Any) -> Any:
    def ins(target, batch):
        ref = target.nextSibling
        for n in batch:
            if ref is None: target.parentNode.appendChild(n)
            else: target.parentNode.insertBefore(n, ref)
    _forEachTarget([ t for t in nl.collection() if t.parentNode is not None ],
        content, ins)
    return nl.result(nl)

@operation
def replaceWith(nl, content:Any) -> Any:
    """Put content where each node was, and take the node out.
    Returns the (now detached) original nodes.
    """
    def ins(target, batch):
        parent = target.parentNode
        for n in batch: parent.insertBefore(n, target)
        parent.removeChild(target)
    targets = [ t for t in nl.collection() if t.parentNode is not None ]
    lg.debug("replaceWith: %d of %d nodes are attached.", len(targets), len(nl))
    _forEachTarget(targets, content, ins)
    return nl.result(nl)
