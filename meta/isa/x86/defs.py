"""
x86 definitions.

Commonly used definitions.
"""
from cdsl.isa import TargetISA, AsmWriter
import base.instructions
from . import instructions as x86

# Assembly syntaxes. AT&T is the primary syntax.
ATT = AsmWriter('att', 0)
INTEL = AsmWriter('intel', 1)

ISA = TargetISA(
        'x86', [base.instructions.GROUP, x86.GROUP], 'X86',
        asm_writers=[ATT, INTEL])  # type: TargetISA
