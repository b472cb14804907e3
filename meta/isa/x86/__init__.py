"""
x86 Target Architecture
-----------------------

The x86 target covers the 32-bit and 64-bit x86 instruction sets. Assembly is
printed in AT&T syntax by default; Intel syntax is the second assembly
variant.
"""
from . import defs
from cdsl.isa import TargetISA  # noqa

# Re-export the primary target ISA definition.
ISA = defs.ISA.finish()  # type: TargetISA
