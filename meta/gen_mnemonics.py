"""
Generate mnemonic tables for each ISA.

Instructions are grouped by the mnemonic they print as in the ISA's primary
assembly syntax, and every mnemonic gets a predicate function:

    bool isADDL(unsigned Opcode);

which is true exactly for the opcodes of that group. The declarations and the
definitions are emitted as two sections guarded by separate macros, so the
generated file can be included once for each.
"""
from collections import OrderedDict
import srcgen
from cdsl.asmstring import get_mnemonic
from cdsl.forms import PrefixByte
from cdsl.recognizable import RecognizableInstr

from typing import Any, Callable, Iterable, List, Sequence  # noqa
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from cdsl.isa import TargetISA  # noqa
    MnemonicFunc = Callable[[Any, int], str]
    MnemonicGroups = OrderedDict[str, List[Any]]

# Outermost C++ namespace of the generated code.
TOP_NAMESPACE = 'llvm'

# Instructions with this assembly variant name have a prefix in their
# assembly string.
NON_PARSABLE = 'NonParsable'


def is_mnemonic_candidate(inst):
    # type: (Any) -> bool
    """
    Check if `inst` belongs in the mnemonic tables.

    `inst` is an instruction descriptor like `RecognizableInstr`.
    """
    if not inst.should_be_emitted:
        return False
    # Non-parsable instruction defs contain prefix as part of the asm string.
    if inst.asm_variant_name == NON_PARSABLE:
        return False
    # Prefix bytes are not instructions of their own.
    return inst.form != PrefixByte


def group_by_mnemonic(insts, variant, mnemonic=get_mnemonic):
    # type: (Iterable[Any], int, MnemonicFunc) -> MnemonicGroups
    """
    Group the instruction descriptors `insts` by mnemonic.

    :param insts: Instruction descriptors in opcode order.
    :param variant: Assembly syntax variant to derive mnemonics under.
    :param mnemonic: Function computing the mnemonic of a descriptor.
    :returns: Ordered mapping from mnemonic to the descriptors printing as
        it. Mnemonics are ordered by first occurrence, and each list keeps
        the order of `insts`.
    """
    groups = OrderedDict()  # type: MnemonicGroups
    for inst in insts:
        if not is_mnemonic_candidate(inst):
            continue
        m = mnemonic(inst, variant)
        if m not in groups:
            groups[m] = []
        groups[m].append(inst)
    return groups


def predicate_name(mnemonic):
    # type: (str) -> str
    return 'is' + mnemonic


def section_macros(isa):
    # type: (TargetISA) -> Sequence[str]
    """Get the macros guarding the declaration and definition sections."""
    prefix = 'GET_{}_MNEMONIC_TABLES'.format(isa.namespace.upper())
    return (prefix + '_H', prefix + '_CPP')


def gen_predicate(mnemonic, insts, fmt):
    # type: (str, Sequence[Any], srcgen.Formatter) -> None
    """
    Emit the predicate function for one mnemonic.

    A single instruction is a plain comparison. Mnemonics with many encoding
    variants get a switch.
    """
    with fmt.indented(
            'bool {}(unsigned Opcode) {{'.format(predicate_name(mnemonic)),
            '}'):
        if len(insts) == 1:
            fmt.format('return Opcode == {};', insts[0].name)
        else:
            sw = srcgen.Switch('Opcode')
            for inst in insts:
                sw.case(inst.name, 'return true;')
            fmt.switch(sw)
            fmt.line('return false;')
    fmt.line()


def gen_declarations(groups, macro, fmt):
    # type: (MnemonicGroups, str, srcgen.Formatter) -> None
    with fmt.guarded(macro):
        for mnemonic in groups.keys():
            fmt.format('bool {}(unsigned Opcode);', predicate_name(mnemonic))
        fmt.line()


def gen_definitions(groups, macro, fmt):
    # type: (MnemonicGroups, str, srcgen.Formatter) -> None
    with fmt.guarded(macro):
        for mnemonic, insts in groups.items():
            gen_predicate(mnemonic, insts, fmt)


def gen_tables(groups, namespace, macros, fmt):
    # type: (MnemonicGroups, str, Sequence[str], srcgen.Formatter) -> None
    """
    Emit both sections for `groups` inside the target's namespace.

    :param namespace: Target namespace, nested in `TOP_NAMESPACE`.
    :param macros: Macros guarding the declarations and the definitions.
    """
    decl_macro, def_macro = macros
    with fmt.namespace([TOP_NAMESPACE, namespace]):
        gen_declarations(groups, decl_macro, fmt)
        gen_definitions(groups, def_macro, fmt)


def gen_isa(isa, fmt):
    # type: (TargetISA, srcgen.Formatter) -> None
    """
    Generate the mnemonic tables for `isa`.
    """
    fmt.banner('{} Mnemonic tables'.format(isa.namespace))
    variant = isa.get_asm_writer().variant
    insts = [RecognizableInstr(i) for i in isa.instructions_by_enum_value()]
    groups = group_by_mnemonic(insts, variant)
    gen_tables(groups, isa.namespace, section_macros(isa), fmt)


def output_name(isa):
    # type: (TargetISA) -> str
    return '{}GenMnemonicTables.inc'.format(isa.namespace)


def generate(isas, out_dir):
    # type: (Sequence[TargetISA], str) -> List[str]
    """
    Write the mnemonic tables for every ISA in `isas` to `out_dir`.

    :returns: The names of the generated files.
    """
    outputs = []
    for isa in isas:
        fmt = srcgen.Formatter()
        gen_isa(isa, fmt)
        fmt.update_file(output_name(isa), out_dir)
        outputs.append(output_name(isa))
    return outputs
