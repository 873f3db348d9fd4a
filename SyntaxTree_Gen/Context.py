import logging

log = logging.getLogger(__name__)


class ParseContext:
    """State owned by a single parsing run.

    Holds the AST root once the class declaration has been reduced, the
    lexical and syntax error messages reported along the way, and the
    brace nesting depth seen by the lexer.
    """

    def __init__(self):
        self.root = None
        self.errors = []
        self.scope = 0
        self.max_scope = 0

    @property
    def error_count(self):
        return len(self.errors)

    @property
    def succeeded(self):
        return self.root is not None and not self.errors

    def set_root(self, node):
        self.root = node

    def enter_scope(self):
        self.scope += 1
        self.max_scope = max(self.max_scope, self.scope)

    def leave_scope(self):
        self.scope -= 1

    def lexical_error(self, msg):
        self._record(msg)

    def syntax_error(self, msg):
        self._record(msg)

    def _record(self, msg):
        log.warning(msg)
        self.errors.append(msg)
