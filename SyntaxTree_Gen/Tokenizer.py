import ply.lex as lex

from .Context import ParseContext

reserved = {
   'class' : 'CLASS',
   'public' : 'PUBLIC',
   'private' : 'PRIVATE',
   'static' : 'STATIC',
   'final' : 'FINAL',
   'void' : 'VOID',
   'int' : 'INT',
   'char' : 'CHAR',
   'double' : 'DOUBLE',
   'if' : 'IF',
   'else' : 'ELSE',
   'new' : 'NEW',
   'for' : 'FOR',
   'print' : 'PRINT',
}

tokens = [
   'INC',
   'DEC',
   'LOGOR',
   'LOGAND',
   'EQ',
   'NEQ',
   'GTEQ',
   'LTEQ',
   'LSHIFT',
   'RSHIFT',
   'ADDASSGN',
   'SUBASSGN',
   'MULASSGN',
   'DIVASSGN',
   'MODASSGN',
   'ANDASSGN',
   'XORASSGN',
   'ORASSGN',
   'LBRACE',
   'RBRACE',
   'LPAREN',
   'RPAREN',
   'LBRACKET',
   'RBRACKET',
   'SEMI',
   'COMMA',
   'PLUS',
   'MINUS',
   'TIMES',
   'DIVIDE',
   'GT',
   'LT',
   'XOR',
   'MOD',
   'ASSIGN',
   'AND',
   'NUMBER',
   'ID',
   'STRING',
] + list(reserved.values())


t_INC = r'\+\+'
t_DEC = r'--'
t_LOGOR = r'\|\|'
t_LOGAND = r'&&'
t_EQ = r'=='
t_NEQ = r'!='
t_GTEQ = r'>='
t_LTEQ = r'<='
t_LSHIFT = r'<<'
t_RSHIFT = r'>>'
t_ADDASSGN = r'\+='
t_SUBASSGN = r'-='
t_MULASSGN = r'\*='
t_DIVASSGN = r'/='
t_MODASSGN = r'%='
t_ANDASSGN = r'&='
t_XORASSGN = r'\^='
t_ORASSGN = r'\|='
t_LPAREN  = r'\('
t_RPAREN  = r'\)'
t_LBRACKET = r'\['
t_RBRACKET = r'\]'
t_SEMI = r';'
t_COMMA = r','
t_PLUS    = r'\+'
t_MINUS   = r'-'
t_TIMES   = r'\*'
t_DIVIDE  = r'/'
t_GT = r'>'
t_LT = r'<'
t_XOR = r'\^'
t_MOD = r'%'
t_ASSIGN = r'='
t_AND = r'&'

t_ignore  = ' \t\r'


def t_line_comment(t):
    r'//[^\n]*'
    pass

def t_block_comment(t):
    r'/\*(.|\n)*?\*/'
    t.lexer.lineno += t.value.count('\n')

def t_LBRACE(t):
    r'\{'
    t.lexer.context.enter_scope()
    return t

def t_RBRACE(t):
    r'\}'
    t.lexer.context.leave_scope()
    return t

def t_STRING(t):
    r'"(\\.|[^"\\\n])*"'
    return t

def t_NUMBER(t):
    r'\d+(\.\d+)?'
    return t

def t_ID(t):
    r'[a-zA-Z_][a-zA-Z_0-9]*'
    t.type = reserved.get(t.value,'ID')
    return t

def t_newline(t):
    r'\n+'
    t.lexer.lineno += len(t.value)

def t_error(t):
    t.lexer.context.lexical_error(
        f"Illegal character '{t.value[0]}' on line {t.lexer.lineno}, "
        f"column {find_column(t.lexer.lexdata, t)}")
    t.lexer.skip(1)


def find_column(input, token):
    line_start = input.rfind('\n', 0, token.lexpos) + 1
    return (token.lexpos - line_start) + 1


lexer = lex.lex()


def build_lexer(context=None):
    """A fresh copy of the module lexer bound to its own ParseContext."""
    run = lexer.clone()
    run.lineno = 1
    run.context = context if context is not None else ParseContext()
    return run


def tokenize(data, context=None):
    """Yield every token of `data`; errors land in the lexer's context."""
    run = build_lexer(context)
    run.input(data)
    for tok in run:
        yield tok
