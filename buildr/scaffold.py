"""
Merging generated routines into hand-written source templates.

A template is a Python source file that may already contain some of the
routines a generator produces, possibly edited by hand. Only the routines
whose signature is not found in the template are appended to it, so that
manual changes are never overwritten.

Sources are split into top-level blocks, each starting with a `def`,
`async def` or `class` header (together with its decorators) and running up
to the next one. A block's signature is its header line with whitespace
normalized and the trailing colon removed.
"""

__all__ = [
    "routines",
    "extend_blank",
    "extend_blank_file",
]


import io
import textwrap

from collections import OrderedDict

import ply.lex

from buildr.errors import FileSystemError
from buildr.errors import ScaffoldError
from buildr.util import append_file

import logging
logger = logging.getLogger(__name__)


# Each token spans a whole line, so every token starts at column zero.

tokens = (
    'DECORATOR',
    'HEADER',
    'LINE',
)

def t_DECORATOR(t):
    r'@[^\n]*\n?'
    t.lexer.lineno += t.value.count('\n')
    return t

def t_HEADER(t):
    r'(async[ \t]+)?(def|class)[ \t]+[A-Za-z_]\w*[^\n]*\n?'
    t.lexer.lineno += t.value.count('\n')
    return t

def t_LINE(t):
    r'[^\n]+\n?|\n'
    t.lexer.lineno += t.value.count('\n')
    return t

def t_error(t):
    raise ScaffoldError('Illegal character %r at line %d',
                        t.value[0], t.lexer.lineno)


lexer = ply.lex.lex(optimize=1, lextab=None)


def signature(header):
    return ' '.join(header.split()).rstrip(':').rstrip()


def routines(source):
    """Returns an ordered mapping {signature: code} of top-level routines.

    Anything preceding the first routine is ignored.
    """
    lx = lexer.clone()
    lx.lineno = 1
    lx.input(source)

    ret = OrderedDict()
    current = None    # lines of the routine being read
    decorators = []   # lines waiting for a header to attach to

    for tok in iter(lx.token, None):
        if tok.type == 'HEADER':
            current = decorators + [tok.value]
            decorators = []
            sig = signature(tok.value)
            if sig in ret:
                logger.debug("Duplicate routine `%s` at line %d",
                             sig, tok.lineno)
            ret[sig] = current

        elif tok.type == 'DECORATOR' or decorators:
            decorators.append(tok.value)

        elif current is not None:
            current.append(tok.value)

    if decorators and current is not None:
        current.extend(decorators)

    return OrderedDict((sig, ''.join(lines).rstrip())
                       for sig, lines in ret.items())


def extend_blank(blank, ext):
    """Returns the code of the routines from 'ext' missing in 'blank'.

    Routines are separated by blank lines, ready to be appended to 'blank'.
    An empty string means there is nothing to add.
    """
    ext = textwrap.dedent(ext)
    try:
        compile(ext, '<generated>', 'exec')
    except SyntaxError as e:
        raise ScaffoldError('Generated code is invalid: %s', e)

    existing = routines(blank)
    tail = ''
    for sig, code in routines(ext).items():
        if sig in existing:
            continue
        logger.debug("Adding `%s`", sig)
        tail += '\n\n' + code + '\n'
    return tail


def extend_blank_file(path, fill):
    """Appends routines written by 'fill' into the template at 'path'.

    'fill' is called with a text buffer and must return a true value on
    success, otherwise nothing is changed and False is returned.
    """
    try:
        with open(path) as f:
            blank = f.read()
    except OSError as e:
        raise FileSystemError('Cannot read %s: %s', path, e.strerror or e)

    ext = io.StringIO()
    if not fill(ext):
        return False

    tail = extend_blank(blank, ext.getvalue())
    if not tail.strip():
        return True

    def write_tail(f):
        f.write(tail)
        return True

    return append_file(path, write_tail)
