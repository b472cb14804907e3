"""
Target ISA definitions
----------------------

The :py:mod:`isa` package contains sub-packages for each target instruction set
architecture that mnemonic tables are generated for.
"""
from cdsl.isa import TargetISA  # noqa
from . import x86
from typing import List  # noqa


def all_isas():
    # type: () -> List[TargetISA]
    """
    Get a list of all the supported target ISAs. Each target ISA is represented
    as a :py:class:`cdsl.isa.TargetISA` instance.
    """
    return [x86.ISA]
