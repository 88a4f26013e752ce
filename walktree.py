#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# walktree.py: List the nodes of XML file(s) by walking a NodeList.
#
import sys
import logging
from typing import List

from xml.dom import minidom, Node

from huginntypes import IterMode
from nodelist import NodeList

lg = logging.getLogger("walktree.py")

__metadata__ = {
    "title"        : "walktree.py",
    "description"  : "Print the node tree of XML documents via NodeList.",
    "type"         : "http://purl.org/dc/dcmitype/Software",
    "language"     : "Python 3.9",
    "created"      : "2026-10-18",
    "modified"     : "2026-10-18",
    "license"      : "https://creativecommons.org/licenses/by-sa/3.0/"
}
__version__ = __metadata__['modified']

descr = """
=Description=

Parse each XML file (with xml.dom.minidom), put the document element
into a NodeList, and walk it recursively, printing one line per node:
indentation for the depth, the nodeName, and for text nodes, the start
of the text.

==Usage==

    walktree.py [options] file.xml...

Use `--mode CHILD_FIRST` for post-order, or `--mode LEAVES_ONLY` to get
just the nodes with no children.
Use `--maxDepth N` to stop descending below depth N.
"""

TEXT_PREVIEW = 30


###############################################################################
#
def formatWalk(nl:NodeList, mode:IterMode=IterMode.SELF_FIRST, maxDepth:int=-1,
    elementsOnly:bool=False, indent:str="  ") -> List[str]:
    lines = []
    it = nl.getRecursiveIterator(mode=mode, maxDepth=maxDepth)
    for node in it:
        if elementsOnly and node.nodeType != Node.ELEMENT_NODE: continue
        buf = indent * it.getDepth() + node.nodeName
        if node.nodeType in (Node.TEXT_NODE, Node.CDATA_SECTION_NODE,
            Node.COMMENT_NODE):
            data = node.data
            if len(data) > TEXT_PREVIEW: data = data[0:TEXT_PREVIEW] + "..."
            buf += " " + repr(data)
        lines.append(buf)
    return lines

def walkFile(path:str, **kwargs) -> List[str]:
    """The XML declaration (or expat's default, UTF-8) decides the encoding.
    """
    doc = minidom.parse(path)
    nl = NodeList(doc, [ doc.documentElement ])
    lg.info("Walking %s (root <%s>).", path, doc.documentElement.nodeName)
    return formatWalk(nl, **kwargs)


###############################################################################
# Main
#
if __name__ == "__main__":
    import argparse

    def processOptions() -> argparse.Namespace:
        parser = argparse.ArgumentParser(description=descr)

        parser.add_argument(
            "--elementsOnly", "-e", action="store_true",
            help="Only list element nodes.")
        parser.add_argument(
            "--indent", type=str, metavar="S", default="  ",
            help="Indent by this string per level. Default: 2 spaces.")
        parser.add_argument(
            "--maxDepth", type=int, metavar="N", default=-1,
            help="Don't descend below this depth. Default: -1 (no limit).")
        parser.add_argument(
            "--mode", type=str, default="SELF_FIRST",
            choices=[ m.name for m in IterMode ],
            help="Order in which to visit nodes. Default: SELF_FIRST.")
        parser.add_argument(
            "--quiet", "-q", action="store_true",
            help="Suppress most messages.")
        parser.add_argument(
            "--verbose", "-v", action="count", default=0,
            help="Add more messages (repeatable).")
        parser.add_argument(
            "--version", action="version", version=__version__,
            help="Display version information, then exit.")

        parser.add_argument(
            "files", type=str, nargs=argparse.REMAINDER,
            help="Path(s) to input file(s)")

        args0 = parser.parse_args()
        if (args0.verbose):
            logging.basicConfig(level=logging.INFO - args0.verbose)
        elif args0.quiet:
            logging.basicConfig(level=logging.ERROR)

        return(args0)


    ###########################################################################
    #
    args = processOptions()
    if not args.files:
        lg.error("No input files specified.")
        sys.exit(1)

    for path0 in args.files:
        for line in walkFile(path0, mode=IterMode(args.mode),
            maxDepth=args.maxDepth,
            elementsOnly=args.elementsOnly, indent=args.indent):
            print(line)
