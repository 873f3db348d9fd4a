from enum import Enum


class Operator(Enum):
    LOGOR = '||'
    LOGAND = '&&'
    EQ = '=='
    NEQ = '!='
    GT = '>'
    LT = '<'
    GTEQ = '>='
    LTEQ = '<='
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    MOD = '%'


class AssignOperator(Enum):
    ASSIGN = '='
    ADDASSGN = '+='
    SUBASSGN = '-='
    MULASSGN = '*='
    DIVASSGN = '/='
    MODASSGN = '%='
    ANDASSGN = '&='
    XORASSGN = '^='
    ORASSGN = '|='


class UnaryOperator(Enum):
    INC = '++'
    DEC = '--'


class ASTNode:
    """Every node shows up to four child slots; only leaves carry a value."""
    label = None
    value = None

    def slots(self):
        return (None, None, None, None)

    @property
    def children(self):
        return [child for child in self.slots() if child is not None]

    def is_leaf(self):
        return self.value is not None

    def __repr__(self):
        if self.is_leaf():
            return f"{type(self).__name__}({self.label!r}, {self.value!r})"
        return f"{type(self).__name__}({self.label!r}, {self.children!r})"


class LeafNode(ASTNode):
    def __init__(self, label, value):
        self.label = label
        self.value = str(value)


class InternalNode(ASTNode):
    def __init__(self, label, c1=None, c2=None, c3=None, c4=None):
        self.label = label
        self._slots = (c1, c2, c3, c4)

    def slots(self):
        return self._slots


def leaf(label, value):
    return LeafNode(label, value)


def internal(label, c1=None, c2=None, c3=None, c4=None):
    return InternalNode(label, c1, c2, c3, c4)


class ClassNode(ASTNode):
    """Represents '[modifier] class A { <method> }'"""
    label = 'CLASS DECLARATION'

    def __init__(self, modifier, name, method):
        self.modifier = modifier
        self.name = name
        self.method = method
        self._name_leaf = leaf('classname', name)

    def slots(self):
        return (self.modifier, self._name_leaf, self.method, None)


class MethodNode(ASTNode):
    """Represents '[modifier] void main(String[] args) { ... }'"""
    label = 'METHOD DECLARATION'

    def __init__(self, modifier, return_type, name, parameter, body):
        self.modifier = modifier
        self.return_type = return_type
        self.name = name
        self.parameter = parameter
        self.body = body

    def slots(self):
        return (self.modifier, self.return_type, self.parameter, self.body)


class StatementNode(ASTNode):
    """One link of a method body: a statement plus the rest of the body.

    The label tells which statement form opened the link
    (DECLARATION, INITIALIZATION or STATEMENT). If and for statements are
    links of their own, see IfElseNode and ForNode.
    """

    def __init__(self, label, statement, rest=None):
        self.label = label
        self.statement = statement
        self.rest = rest

    def slots(self):
        return (self.statement, self.rest, None, None)

    def statements(self):
        link = self
        while link is not None:
            yield link.statement
            link = link.rest


class IfNode(ASTNode):
    label = 'IF STATEMENT'

    def __init__(self, condition, body):
        self.condition = condition
        self.body = body

    def slots(self):
        return (self.condition, self.body, None, None)


class ElseNode(ASTNode):
    label = 'ELSE STATEMENT'

    def __init__(self, body):
        self.body = body

    def slots(self):
        return (self.body, None, None, None)


class IfElseNode(StatementNode):
    """Body link for 'if (...) { } [else { }]'; the else slot stays empty without an else."""
    label = 'IF ELSE STATEMNET'

    def __init__(self, if_part, else_part, rest=None):
        self.if_part = if_part
        self.else_part = else_part
        self.rest = rest

    @property
    def statement(self):
        return self

    def slots(self):
        return (self.if_part, self.else_part, self.rest, None)


class ForConditionNode(ASTNode):
    """The '(init; condition; update)' header; any clause may be missing."""
    label = 'FOR CONDITION'

    def __init__(self, init=None, condition=None, update=None):
        self.init = init
        self.condition = condition
        self.update = update

    def slots(self):
        return (self.init, self.condition, self.update, None)


class ForNode(StatementNode):
    label = 'FOR LOOP'

    def __init__(self, header, body, rest=None):
        self.header = header
        self.body = body
        self.rest = rest

    @property
    def statement(self):
        return self

    def slots(self):
        return (self.header, self.body, self.rest, None)


class AssignmentNode(ASTNode):
    def __init__(self, op, var, value):
        self.op = op
        self.var = var
        self.value_expr = value

    @property
    def label(self):
        return self.op.value

    def slots(self):
        return (self.var, self.value_expr, None, None)


class BinaryOperation(ASTNode):
    def __init__(self, left, op, right):
        self.left = left
        self.op = op
        self.right = right

    @property
    def label(self):
        return self.op.value

    def slots(self):
        return (self.left, self.right, None, None)


class UnaryOperation(ASTNode):
    """'++x' keeps the operator leaf first, 'x++' keeps it second.

    Both '++' and '--' sit in a leaf labelled 'increment'.
    """
    label = 'UNARY OPERATION'

    def __init__(self, op, operand, prefix):
        self.op = op
        self.operand = operand
        self.prefix = prefix
        self._op_leaf = leaf('increment', op.value)

    def slots(self):
        if self.prefix:
            return (self._op_leaf, self.operand, None, None)
        return (self.operand, self._op_leaf, None, None)


def walk(node):
    if node is None:
        return
    yield node
    for child in node.children:
        yield from walk(child)


def iter_leaves(node):
    for n in walk(node):
        if n.is_leaf():
            yield n
