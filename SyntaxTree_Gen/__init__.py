import logging

# Attached before the parser module builds its tables so PLY's grammar
# diagnostics stay quiet unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .AST import leaf, internal, walk, iter_leaves
from .Context import ParseContext
from .Parser import parse_source
from .TreePrinter import tree_to_lines, write_tree
from .Tokenizer import tokenize

__all__ = [
    "ParseContext",
    "internal",
    "iter_leaves",
    "leaf",
    "parse_source",
    "tokenize",
    "tree_to_lines",
    "walk",
    "write_tree",
]
