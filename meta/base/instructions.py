"""
Target-independent instructions.

This module defines the generic instructions that every target supports.
They carry no encoding and are ordered before all target instructions, in
the order they are defined here.
"""
from cdsl.instructions import Instruction, InstructionGroup

GROUP = InstructionGroup(
        "base", "Target-independent instructions", target_independent=True)

PHI = Instruction('PHI', 'PHINODE', is_pseudo=True)
INLINEASM = Instruction('INLINEASM', '', is_pseudo=True)
INLINEASM_BR = Instruction('INLINEASM_BR', '', is_pseudo=True)
CFI_INSTRUCTION = Instruction('CFI_INSTRUCTION', '', is_pseudo=True)
EH_LABEL = Instruction('EH_LABEL', '', is_pseudo=True)
GC_LABEL = Instruction('GC_LABEL', '', is_pseudo=True)
ANNOTATION_LABEL = Instruction('ANNOTATION_LABEL', '', is_pseudo=True)
KILL = Instruction('KILL', '', is_pseudo=True)
EXTRACT_SUBREG = Instruction('EXTRACT_SUBREG', '', is_pseudo=True)
INSERT_SUBREG = Instruction('INSERT_SUBREG', '', is_pseudo=True)
IMPLICIT_DEF = Instruction('IMPLICIT_DEF', '', is_pseudo=True)
SUBREG_TO_REG = Instruction('SUBREG_TO_REG', '', is_pseudo=True)
COPY_TO_REGCLASS = Instruction('COPY_TO_REGCLASS', '', is_pseudo=True)
DBG_VALUE = Instruction('DBG_VALUE', 'DBG_VALUE', is_pseudo=True)
DBG_LABEL = Instruction('DBG_LABEL', 'DBG_LABEL', is_pseudo=True)
REG_SEQUENCE = Instruction('REG_SEQUENCE', '', is_pseudo=True)
COPY = Instruction('COPY', '', is_pseudo=True)
BUNDLE = Instruction('BUNDLE', 'BUNDLE', is_pseudo=True)

GROUP.close()
