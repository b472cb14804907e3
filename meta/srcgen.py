"""
Source code generator.

The `srcgen` module contains generic helper routines and classes for generating
C++ source code.

"""
import sys
import os
from collections import OrderedDict
from typing import Any, List, Sequence  # noqa


class Formatter(object):
    """
    Source code formatter class.

    - Collect source code to be written to a file.
    - Keep track of indentation.

    Indentation example:

        >>> f = Formatter()
        >>> f.line('Hello line 1')
        >>> f.writelines()
        Hello line 1
        >>> f.indent_push()
        >>> f.comment('Nested comment')
        >>> f.indent_pop()
        >>> f.format('Back {} again', 'home')
        >>> f.writelines()
        Hello line 1
            // Nested comment
        Back home again

    """

    shiftwidth = 4

    def __init__(self):
        # type: () -> None
        self.indent = ''
        self.lines = []  # type: List[str]

    def indent_push(self):
        # type: () -> None
        """Increase current indentation level by one."""
        self.indent += ' ' * self.shiftwidth

    def indent_pop(self):
        # type: () -> None
        """Decrease indentation by one level."""
        assert self.indent != '', 'Already at top level indentation'
        self.indent = self.indent[0:-self.shiftwidth]

    def line(self, s=None):
        # type: (str) -> None
        """Add an indented line."""
        if s:
            self.lines.append('{}{}\n'.format(self.indent, s))
        else:
            self.lines.append('\n')

    def outdented_line(self, s):
        # type: (str) -> None
        """
        Emit a line outdented one level.

        This is used for 'case X:' labels inside a single indented `switch`
        block.
        """
        self.lines.append('{}{}\n'.format(self.indent[0:-self.shiftwidth], s))

    def writelines(self, f=None):
        # type: (Any) -> None
        """Write all lines to `f`."""
        if not f:
            f = sys.stdout
        f.writelines(self.lines)

    def text(self):
        # type: () -> str
        """Get all lines collected so far as a single string."""
        return ''.join(self.lines)

    def update_file(self, filename, directory):
        # type: (str, str) -> None
        if directory is not None:
            filename = os.path.join(directory, filename)
        with open(filename, 'w') as f:
            self.writelines(f)

    class _IndentedScope(object):
        def __init__(self, fmt, after):
            # type: (Formatter, str) -> None
            self.fmt = fmt
            self.after = after

        def __enter__(self):
            # type: () -> None
            self.fmt.indent_push()

        def __exit__(self, t, v, tb):
            # type: (object, object, object) -> None
            self.fmt.indent_pop()
            if self.after:
                self.fmt.line(self.after)

    class _FlatScope(object):
        def __init__(self, fmt, after):
            # type: (Formatter, Sequence[str]) -> None
            self.fmt = fmt
            self.after = after

        def __enter__(self):
            # type: () -> None
            pass

        def __exit__(self, t, v, tb):
            # type: (object, object, object) -> None
            for s in self.after:
                self.fmt.line(s)

    def indented(self, before=None, after=None):
        # type: (str, str) -> Formatter._IndentedScope
        """
        Return a scope object for use with a `with` statement:

            >>> f = Formatter()
            >>> with f.indented('prefix {', '} suffix'):
            ...     f.line('hello')
            >>> f.writelines()
            prefix {
                hello
            } suffix

        The optional `before` and `after` parameters are surrounding lines
        which are *not* indented.
        """
        if before:
            self.line(before)
        return Formatter._IndentedScope(self, after)

    def namespace(self, names):
        # type: (Sequence[str]) -> Formatter._FlatScope
        """
        Return a scope object that opens the nested C++ namespaces `names`.

        Namespace bodies are not indented:

            >>> f = Formatter()
            >>> with f.namespace(['llvm', 'X86']):
            ...     f.line('bool isNOP(unsigned Opcode);')
            >>> f.writelines()
            namespace llvm {
            namespace X86 {
            <BLANKLINE>
            bool isNOP(unsigned Opcode);
            <BLANKLINE>
            } // end namespace X86
            } // end namespace llvm
        """
        for name in names:
            self.line('namespace {} {{'.format(name))
        self.line()
        after = ['']
        after.extend(
                '}} // end namespace {}'.format(name)
                for name in reversed(names))
        return Formatter._FlatScope(self, after)

    def guarded(self, macro):
        # type: (str) -> Formatter._FlatScope
        """
        Return a scope object for a section that is only compiled when the
        includer defines `macro`. The macro is undefined again so the section
        is expanded at most once per definition:

            >>> f = Formatter()
            >>> with f.guarded('GET_TABLES'):
            ...     f.line('int x;')
            >>> f.writelines()
            #ifdef GET_TABLES
            #undef GET_TABLES
            <BLANKLINE>
            int x;
            #endif // GET_TABLES
            <BLANKLINE>
        """
        self.line('#ifdef ' + macro)
        self.line('#undef ' + macro)
        self.line()
        return Formatter._FlatScope(self, ['#endif // ' + macro, ''])

    def format(self, fmt, *args):
        # type: (str, *Any) -> None
        self.line(fmt.format(*args))

    def multi_line(self, s):
        # type: (str) -> None
        """Add one or more lines after stripping common indentation."""
        for l in parse_multiline(s):
            self.line(l)

    def comment(self, s):
        # type: (str) -> None
        """Add a comment line."""
        self.line('// ' + s)

    def banner(self, title):
        # type: (str) -> None
        """
        Add the header comment that marks a file as generated.

            >>> f = Formatter()
            >>> f.banner('Tables')
            >>> f.lines[1].split()
            ['|*', 'Tables', '*|']
            >>> len(f.lines[1].rstrip())
            80
        """
        width = 80
        self.line('/*===- Generated file ' + '-' * (width - 37) +
                  '*- C++ -*-===*\\')
        self.line('|* {} *|'.format(title.ljust(width - 6)))
        self.line('|*' + ' ' * (width - 4) + '*|')
        self.line('|* {} *|'.format(
            'Automatically generated file, do not edit!'.ljust(width - 6)))
        self.line('|*' + ' ' * (width - 4) + '*|')
        self.line('\\*===' + '-' * (width - 10) + '===*/')
        self.line()

    def switch(self, sw):
        # type: (Switch) -> None
        """
        Add a switch statement.

        Example:

            >>> f = Formatter()
            >>> sw = Switch('Opcode')
            >>> sw.case('ADD32rr', 'return true;')
            >>> sw.case('ADD32mr', 'return true;')
            >>> sw.case('NOOP', 'return false;')
            >>> f.switch(sw)
            >>> f.writelines()
            switch (Opcode) {
            case ADD32rr:
            case ADD32mr:
                return true;
            case NOOP:
                return false;
            }

        """
        with self.indented('switch ({}) {{'.format(sw.expr), '}'):
            for body, labels in sw.cases.items():
                for label in labels.keys():
                    self.outdented_line('case {}:'.format(label))
                self.multi_line(body)


def _indent(s):
    # type: (str) -> int
    """
    Compute the indentation of s, or None of an empty line.

    Example:
        >>> _indent("foo")
        0
        >>> _indent("    bar")
        4
        >>> _indent("   ")
        >>> _indent("")
    """
    t = s.lstrip()
    return len(s) - len(t) if t else None


def parse_multiline(s):
    # type: (str) -> List[str]
    """
    Given a multi-line string, split it into a sequence of lines after
    stripping a common indentation, as described in the "trim" function
    from PEP 257. This is useful for strings defined with doc strings:
        >>> parse_multiline('\\n    hello\\n    world\\n')
        ['hello', 'world']
    """
    if not s:
        return []
    # Convert tabs to spaces (following the normal Python rules)
    # and split into a list of lines:
    lines = s.expandtabs().splitlines()
    # Determine minimum indentation (first line doesn't count):
    indent = sys.maxsize
    for line in lines[1:]:
        stripped = line.lstrip()
        if stripped:
            indent = min(indent, len(line) - len(stripped))
    # Remove indentation (first line is special):
    trimmed = [lines[0].strip()]
    if indent < sys.maxsize:
        for line in lines[1:]:
            trimmed.append(line[indent:].rstrip())
    # Strip off trailing and leading blank lines:
    while trimmed and not trimmed[-1]:
        trimmed.pop()
    while trimmed and not trimmed[0]:
        trimmed.pop(0)
    return trimmed


class Switch(object):
    """
    Switch formatting class.

    Switch objects collect all the information needed to emit a C++ `switch`
    statement. Case labels sharing an identical body are merged into a single
    fall-through arm, placed where the first of them was added.

    Example:

        >>> sw = Switch('x')
        >>> sw.case('A', 'return 1;')
        >>> sw.case('B', 'return 1;')
        >>> sw.case('C', 'return 2;')
        >>> assert(len(sw.cases) == 2)
    """

    def __init__(self, expr):
        # type: (str) -> None
        self.expr = expr
        self.cases = OrderedDict()  # type: OrderedDict[str, OrderedDict[str, None]]  # noqa

    def case(self, label, body):
        # type: (str, str) -> None
        if body not in self.cases:
            self.cases[body] = OrderedDict()
        self.cases[body][label] = None
