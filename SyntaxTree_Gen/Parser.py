import logging

import ply.yacc as yacc

from .Tokenizer import tokens, build_lexer, find_column
from .AST import *
from .Context import ParseContext

log = logging.getLogger(__name__)


def p_class_declaration(p):
    '''class_declaration : modifier CLASS ID LBRACE method_declaration RBRACE
                         | CLASS ID LBRACE method_declaration RBRACE'''
    if len(p) == 7:
        p[0] = ClassNode(p[1], p[3], p[5])
    else:
        p[0] = ClassNode(None, p[2], p[4])
    p.lexer.context.set_root(p[0])

def p_method_declaration(p):
    '''method_declaration : modifier type ID LPAREN parameter RPAREN LBRACE statements RBRACE
                          | type ID LPAREN parameter RPAREN LBRACE statements RBRACE'''
    if len(p) == 10:
        p[0] = MethodNode(p[1], p[2], p[3], p[5], p[8])
    else:
        p[0] = MethodNode(None, p[1], p[2], p[4], p[7])

def p_modifier(p):
    '''modifier : access_modifier non_access_modifier
                | access_modifier
                | non_access_modifier'''
    if len(p) == 3:
        p[0] = internal('modifier', p[1], p[2])
    else:
        p[0] = internal('modifier', p[1])

def p_access_modifier(p):
    '''access_modifier : PUBLIC
                       | PRIVATE'''
    p[0] = leaf('access modifier', p[1])

def p_non_access_modifier(p):
    '''non_access_modifier : STATIC
                           | FINAL'''
    p[0] = leaf('access modifier', p[1])

def p_type(p):
    '''type : INT
            | CHAR
            | DOUBLE
            | VOID
            | ID'''
    p[0] = leaf('datatype', p[1])

def p_parameter(p):
    '''parameter : type dims ID
                 | type ID dims
                 | type ID'''
    if len(p) == 3:
        p[0] = internal('parameter', p[1], leaf('id', p[2]))
    elif isinstance(p[2], ASTNode):
        p[0] = internal('parameter', leaf('datatype', p[1].value + p[2].value), leaf('id', p[3]))
    else:
        p[0] = internal('parameter', leaf('datatype', p[1].value + p[3].value), leaf('id', p[2]))

def p_dims(p):
    '''dims : LBRACKET RBRACKET
            | LBRACKET RBRACKET dims'''
    if len(p) == 3:
        p[0] = leaf('dimensions', '[]')
    else:
        p[0] = leaf('dimensions', '[]' + p[3].value)

# =============== STATEMENTS ===============
# A method body is a right-leaning chain: each link holds one statement
# and the remainder of the body. If and for statements are links themselves.

def p_statements_declaration(p):
    '''statements : declaration SEMI statements'''
    p[0] = StatementNode('DECLARATION', p[1], p[3])

def p_statements_initialization(p):
    '''statements : assignment_statement SEMI statements'''
    p[0] = StatementNode('INITIALIZATION', p[1], p[3])

def p_statements_if(p):
    '''statements : if_statement else_statement statements'''
    p[0] = IfElseNode(p[1], p[2], p[3])

def p_statements_for(p):
    '''statements : for_condition LBRACE statements RBRACE statements'''
    p[0] = ForNode(p[1], p[3], p[5])

def p_statements_unary(p):
    '''statements : unary_expression SEMI statements'''
    p[0] = StatementNode('STATEMENT', p[1], p[3])

def p_statements_empty(p):
    '''statements : empty'''
    p[0] = None

def p_if_statement(p):
    '''if_statement : IF LPAREN expression RPAREN LBRACE statements RBRACE'''
    p[0] = IfNode(p[3], p[6])

def p_else_statement(p):
    '''else_statement : ELSE LBRACE statements RBRACE
                      | empty'''
    if len(p) == 5:
        p[0] = ElseNode(p[3])
    else:
        p[0] = None

# Each combination of present/missing for-clauses is its own production.

def p_for_condition_none(p):
    '''for_condition : FOR LPAREN SEMI SEMI RPAREN'''
    p[0] = ForConditionNode()

def p_for_condition_init(p):
    '''for_condition : FOR LPAREN for_init SEMI SEMI RPAREN'''
    p[0] = ForConditionNode(init=p[3])

def p_for_condition_init_cond(p):
    '''for_condition : FOR LPAREN for_init SEMI expression SEMI RPAREN'''
    p[0] = ForConditionNode(init=p[3], condition=p[5])

def p_for_condition_init_update(p):
    '''for_condition : FOR LPAREN for_init SEMI SEMI for_update RPAREN'''
    p[0] = ForConditionNode(init=p[3], update=p[6])

def p_for_condition_cond(p):
    '''for_condition : FOR LPAREN SEMI expression SEMI RPAREN'''
    p[0] = ForConditionNode(condition=p[4])

def p_for_condition_cond_update(p):
    '''for_condition : FOR LPAREN SEMI expression SEMI for_update RPAREN'''
    p[0] = ForConditionNode(condition=p[4], update=p[6])

def p_for_condition_all(p):
    '''for_condition : FOR LPAREN for_init SEMI expression SEMI for_update RPAREN'''
    p[0] = ForConditionNode(init=p[3], condition=p[5], update=p[7])

def p_for_condition_update(p):
    '''for_condition : FOR LPAREN SEMI SEMI for_update RPAREN'''
    p[0] = ForConditionNode(update=p[5])

def p_for_init(p):
    '''for_init : variable_declaration
                | assignment'''
    p[0] = p[1]

def p_for_update(p):
    '''for_update : unary_expression
                  | assignment'''
    p[0] = p[1]

# =============== DECLARATIONS ===============

def p_declaration_variable(p):
    '''declaration : variable_declaration'''
    p[0] = internal('VARIABLE DECLARATION', p[1])

def p_declaration_array(p):
    '''declaration : array_declaration'''
    p[0] = internal('ARRAY DECLARATION STATEMENT', p[1])

def p_variable_declaration(p):
    '''variable_declaration : type ID declaration_rest
                            | type ID ASSIGN expression declaration_rest'''
    if len(p) == 4:
        p[0] = internal('variable declaration', p[1], leaf('id', p[2]), p[3])
    else:
        p[0] = internal('variable initialisation', p[1], leaf('id', p[2]), p[4], p[5])

def p_declaration_rest(p):
    '''declaration_rest : COMMA ID declaration_rest
                        | COMMA ID ASSIGN expression declaration_rest
                        | empty'''
    if len(p) == 4:
        p[0] = internal('declaration continued', leaf('id', p[2]), p[3])
    elif len(p) == 6:
        declarator = AssignmentNode(AssignOperator.ASSIGN, leaf('id', p[2]), p[4])
        p[0] = internal('declaration continued', declarator, p[5])
    else:
        p[0] = None

def p_array_declaration_dims_first(p):
    '''array_declaration : type dims ID
                         | type dims ID ASSIGN initializer'''
    if len(p) == 4:
        p[0] = internal('array declaration', p[1], p[2], leaf('id', p[3]))
    else:
        p[0] = internal('array declaration', p[1], p[2], leaf('id', p[3]), p[5])

def p_array_declaration_dims_last(p):
    '''array_declaration : type ID dims
                         | type ID dims ASSIGN initializer'''
    if len(p) == 4:
        p[0] = internal('array declaration', p[1], leaf('id', p[2]), p[3])
    else:
        p[0] = internal('array declaration', p[1], leaf('id', p[2]), p[3], p[5])

def p_initializer(p):
    '''initializer : expression
                   | LBRACE initializer_list RBRACE'''
    if len(p) == 2:
        p[0] = p[1]
    else:
        p[0] = p[2]

def p_initializer_list(p):
    '''initializer_list : initializer
                        | initializer COMMA initializer_list'''
    if len(p) == 2:
        p[0] = p[1]
    else:
        p[0] = internal(',', p[1], p[3])

# =============== ASSIGNMENT ===============

def p_assignment_statement(p):
    '''assignment_statement : assignment'''
    p[0] = internal('ASSIGNMENT STATEMENT', p[1])

def p_array_initialisation_statement(p):
    '''assignment_statement : ID ASSIGN LBRACE initializer_list RBRACE'''
    target = AssignmentNode(AssignOperator.ASSIGN, leaf('id', p[1]), p[4])
    p[0] = internal('ARRAY INITIALISATION STATEMENT', target)

def p_assignment(p):
    '''assignment : ID assignment_operator expression'''
    p[0] = AssignmentNode(p[2], leaf('id', p[1]), p[3])

def p_assignment_operator(p):
    '''assignment_operator : ASSIGN
                           | ADDASSGN
                           | SUBASSGN
                           | MULASSGN
                           | DIVASSGN
                           | MODASSGN
                           | ANDASSGN
                           | XORASSGN
                           | ORASSGN'''
    p[0] = AssignOperator(p[1])

# =============== EXPRESSION GRAMMAR ===============
def p_expression(p):
    '''expression : logical_or_expression'''
    p[0] = p[1]

def p_logical_or_expression(p):
    '''logical_or_expression : logical_and_expression
                             | logical_or_expression LOGOR logical_and_expression'''
    if len(p) == 2: p[0] = p[1]
    else: p[0] = BinaryOperation(p[1], Operator(p[2]), p[3])

def p_logical_and_expression(p):
    '''logical_and_expression : equality_expression
                              | logical_and_expression LOGAND equality_expression'''
    if len(p) == 2: p[0] = p[1]
    else: p[0] = BinaryOperation(p[1], Operator(p[2]), p[3])

def p_equality_expression(p):
    '''equality_expression : relational_expression
                           | equality_expression EQ relational_expression
                           | equality_expression NEQ relational_expression'''
    if len(p) == 2: p[0] = p[1]
    else: p[0] = BinaryOperation(p[1], Operator(p[2]), p[3])

def p_relational_expression(p):
    '''relational_expression : additive_expression
                             | relational_expression GT additive_expression
                             | relational_expression LT additive_expression
                             | relational_expression GTEQ additive_expression
                             | relational_expression LTEQ additive_expression'''
    if len(p) == 2: p[0] = p[1]
    else: p[0] = BinaryOperation(p[1], Operator(p[2]), p[3])

def p_additive_expression(p):
    '''additive_expression : multiplicative_expression
                           | additive_expression PLUS multiplicative_expression
                           | additive_expression MINUS multiplicative_expression'''
    if len(p) == 2: p[0] = p[1]
    else: p[0] = BinaryOperation(p[1], Operator(p[2]), p[3])

def p_multiplicative_expression(p):
    '''multiplicative_expression : primary_expression
                                 | multiplicative_expression TIMES primary_expression
                                 | multiplicative_expression DIVIDE primary_expression
                                 | multiplicative_expression MOD primary_expression'''
    if len(p) == 2: p[0] = p[1]
    else: p[0] = BinaryOperation(p[1], Operator(p[2]), p[3])

def p_primary_number(p):
    '''primary_expression : NUMBER'''
    p[0] = leaf('num', p[1])

def p_primary_identifier(p):
    '''primary_expression : ID'''
    p[0] = leaf('id', p[1])

def p_primary_string(p):
    '''primary_expression : STRING'''
    p[0] = leaf('string', p[1])

def p_primary_expression(p):
    '''primary_expression : LPAREN expression RPAREN
                          | unary_expression
                          | array_access
                          | object_creation'''
    if len(p) == 4:
        p[0] = p[2]
    else:
        p[0] = p[1]

def p_array_access(p):
    '''array_access : ID LBRACKET expression RBRACKET
                    | array_access LBRACKET expression RBRACKET'''
    if isinstance(p[1], str):
        p[0] = internal('bracket', leaf('id', p[1]), p[3])
    else:
        p[0] = internal('bracket', p[1], p[3])

def p_unary_prefix(p):
    '''unary_expression : INC ID
                        | DEC ID'''
    p[0] = UnaryOperation(UnaryOperator(p[1]), leaf('id', p[2]), prefix=True)

def p_unary_postfix(p):
    '''unary_expression : ID INC
                        | ID DEC'''
    p[0] = UnaryOperation(UnaryOperator(p[2]), leaf('id', p[1]), prefix=False)

def p_object_creation(p):
    '''object_creation : NEW type LPAREN arguments RPAREN'''
    p[0] = internal('new', p[2], p[4])

def p_array_creation(p):
    '''object_creation : NEW type size_brackets'''
    p[0] = internal('new', p[2], p[3])

def p_size_brackets(p):
    '''size_brackets : LBRACKET expression RBRACKET
                     | LBRACKET expression RBRACKET size_brackets'''
    if len(p) == 4:
        p[0] = p[2]
    else:
        p[0] = internal('bracket', p[2], p[4])

def p_arguments(p):
    '''arguments : argument_list
                 | empty'''
    p[0] = p[1]

def p_argument_list(p):
    '''argument_list : expression
                     | expression COMMA argument_list'''
    if len(p) == 2:
        p[0] = p[1]
    else:
        p[0] = internal(',', p[1], p[3])
# =============== END EXPRESSION GRAMMAR ===============

def p_empty(p):
    'empty :'
    pass

def p_error(p):
    # PLY passes None at end of input; parse_source reports that case
    if p:
        p.lexer.context.syntax_error(
            f"Syntax error at token '{p.value}' on line {p.lineno}, "
            f"column {find_column(p.lexer.lexdata, p)}")


parser = yacc.yacc(start='class_declaration', debug=False, write_tables=False, errorlog=log)


def parse_source(data, context=None):
    """Parse one compilation unit and return the ParseContext that owns the tree.

    The tree is usable only when ``context.succeeded`` is true; any lexical or
    syntax error leaves a message in ``context.errors``.
    """
    context = context if context is not None else ParseContext()
    lexer = build_lexer(context)
    result = parser.parse(data, lexer=lexer)
    if result is None and not context.errors:
        context.syntax_error("Syntax error at EOF")
    log.debug("parsed %d characters with %d error(s)", len(data), context.error_count)
    return context
