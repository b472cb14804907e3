"""
x86 instruction definitions.

Each encoding variant of an instruction is a separate record. The definition
name encodes the operand size and kinds: `ADD32rm` adds a 32-bit memory
operand to a register, `ADD32ri8` adds a sign-extended 8-bit immediate.
"""
from cdsl.instructions import Instruction, InstructionGroup
from cdsl.forms import Pseudo, RawFrm, AddRegFrm, RawFrmDstSrc, AddCCFrm
from cdsl.forms import PrefixByte
from cdsl.forms import MRMDestMem, MRMSrcMem, MRMSrcMemCC, MRMXmCC
from cdsl.forms import MRMDestReg, MRMSrcReg, MRMSrcRegCC, MRMXrCC
from cdsl.forms import MRM0m, MRM0r, MRM5r


GROUP = InstructionGroup("x86", "x86 instruction set")

# Two-operand ALU forms. AT&T syntax lists the source operand first.
binop = '{$src2, $src1|$src1, $src2}'

ADD8rr = Instruction('ADD8rr', 'add{b}\t' + binop, MRMDestReg)
ADD16rr = Instruction('ADD16rr', 'add{w}\t' + binop, MRMDestReg)
ADD32rr = Instruction('ADD32rr', 'add{l}\t' + binop, MRMDestReg)
ADD64rr = Instruction('ADD64rr', 'add{q}\t' + binop, MRMDestReg)
ADD32rm = Instruction('ADD32rm', 'add{l}\t' + binop, MRMSrcMem)
ADD32mr = Instruction('ADD32mr', 'add{l}\t' + binop, MRMDestMem)
ADD32ri = Instruction('ADD32ri', 'add{l}\t' + binop, MRM0r)
ADD32ri8 = Instruction('ADD32ri8', 'add{l}\t' + binop, MRM0r)
ADD32mi = Instruction('ADD32mi', 'add{l}\t' + binop, MRM0m)

# The reversed register form is only selected by the disassembler.
ADD32rr_REV = Instruction(
        'ADD32rr_REV', 'add{l}\t' + binop, MRMSrcReg,
        is_codegen_only=True, force_disassemble=True)

# Disjoint-bits add, turned into an `or` or an `add` after register
# allocation.
ADD32rr_DB = Instruction('ADD32rr_DB', '', Pseudo, is_codegen_only=True)

SUB32rr = Instruction('SUB32rr', 'sub{l}\t' + binop, MRMDestReg)
SUB32rm = Instruction('SUB32rm', 'sub{l}\t' + binop, MRMSrcMem)
SUB32ri = Instruction('SUB32ri', 'sub{l}\t' + binop, MRM5r)

# Moves.
mov = '{$src, $dst|$dst, $src}'

MOV8rr = Instruction('MOV8rr', 'mov{b}\t' + mov, MRMDestReg)
MOV32rr = Instruction('MOV32rr', 'mov{l}\t' + mov, MRMDestReg)
MOV64rr = Instruction('MOV64rr', 'mov{q}\t' + mov, MRMDestReg)
MOV32rm = Instruction('MOV32rm', 'mov{l}\t' + mov, MRMSrcMem)
MOV32mr = Instruction('MOV32mr', 'mov{l}\t' + mov, MRMDestMem)
MOV32ri = Instruction('MOV32ri', 'mov{l}\t' + mov, AddRegFrm)
MOV32rr_REV = Instruction(
        'MOV32rr_REV', 'mov{l}\t' + mov, MRMSrcReg,
        is_codegen_only=True, force_disassemble=True)

# Materialize zero, expanded to `xor` after register allocation.
MOV32r0 = Instruction('MOV32r0', '', Pseudo, is_pseudo=True)

# Condition code families. The condition is an operand of the instruction.
CMOV32rr = Instruction(
        'CMOV32rr', 'cmov${cond}{l}\t{$src2, $dst|$dst, $src2}', MRMSrcRegCC)
CMOV32rm = Instruction(
        'CMOV32rm', 'cmov${cond}{l}\t{$src2, $dst|$dst, $src2}', MRMSrcMemCC)
CMOV64rr = Instruction(
        'CMOV64rr', 'cmov${cond}{q}\t{$src2, $dst|$dst, $src2}', MRMSrcRegCC)
JCC_1 = Instruction('JCC_1', 'j${cond}\t$dst', AddCCFrm)
JCC_4 = Instruction('JCC_4', 'j${cond}\t$dst', AddCCFrm)
SETCCr = Instruction('SETCCr', 'set${cond}\t$dst', MRMXrCC)
SETCCm = Instruction('SETCCm', 'set${cond}\t$dst', MRMXmCC)

# Control flow.
JMP_1 = Instruction('JMP_1', 'jmp\t$dst', RawFrm)
JMP_4 = Instruction('JMP_4', 'jmp\t$dst', RawFrm)
CALL64pcrel32 = Instruction('CALL64pcrel32', 'call{q}\t$dst', RawFrm)
RET64 = Instruction('RET64', 'ret{q}', RawFrm)
TCRETURNdi = Instruction(
        'TCRETURNdi', '#TC_RETURN $dst $offset', Pseudo, is_pseudo=True)

NOOP = Instruction('NOOP', 'nop', RawFrm)
NOOPL = Instruction('NOOPL', 'nop{l}\t$zero', MRM0m)

# String instructions.
MOVSB = Instruction('MOVSB', 'movsb\t{$src, $dst|$dst, $src}', RawFrmDstSrc)
MOVSL = Instruction('MOVSL', 'movs{l|d}\t{$src, $dst|$dst, $src}',
                    RawFrmDstSrc)

# The repeated string forms spell out the prefix in the assembly string.
REP_MOVSB_32 = Instruction(
        'REP_MOVSB_32',
        '{rep;movsb (%esi), %es:(%edi)|rep movsb es:[edi], [esi]}', RawFrm,
        asm_variant_name='NonParsable')
REP_STOSB_32 = Instruction(
        'REP_STOSB_32',
        '{rep;stosb %al, %es:(%edi)|rep stosb es:[edi], al}', RawFrm,
        asm_variant_name='NonParsable')

# Prefix bytes.
LOCK_PREFIX = Instruction('LOCK_PREFIX', 'lock', PrefixByte)
REP_PREFIX = Instruction('REP_PREFIX', 'rep', PrefixByte)
REX64_PREFIX = Instruction('REX64_PREFIX', '{rex64|rex.W}', PrefixByte)
DATA16_PREFIX = Instruction('DATA16_PREFIX', 'data16', PrefixByte)

GROUP.close()
