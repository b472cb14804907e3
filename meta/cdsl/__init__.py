"""
Instruction description DSL classes.

This module defines the classes that are used to describe target instructions
and the targets they belong to.
"""
import re


ident_re = re.compile(r'[A-Za-z_][A-Za-z0-9_]*\Z')


def is_identifier(s):
    # type: (str) -> bool
    """Check if `s` can be used as a C identifier:
        >>> is_identifier('ADD32rr')
        True
        >>> is_identifier('_x')
        True
        >>> is_identifier('32rr')
        False
        >>> is_identifier('ADD 32')
        False
        >>> is_identifier('')
        False
    """
    return ident_re.match(s) is not None
