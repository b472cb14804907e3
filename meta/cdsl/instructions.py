"""Classes for defining instructions."""
from . import is_identifier
from typing import Any, List, TYPE_CHECKING  # noqa
if TYPE_CHECKING:
    from .forms import Form  # noqa


class InstructionGroup(object):
    """
    Every instruction must belong to exactly one instruction group. A given
    target architecture can support instructions from multiple groups.

    New instructions are automatically added to the currently open instruction
    group.

    :param name: Name of the group.
    :param doc: Documentation string.
    :param target_independent: The group holds the generic instructions that
        every target shares. Their opcode numbers come first, in definition
        order.
    """

    # The currently open instruction group.
    _current = None  # type: InstructionGroup

    def open(self):
        # type: () -> None
        """
        Open this instruction group such that future new instructions are
        added to this group.
        """
        assert InstructionGroup._current is None, (
                "Can't open {} since {} is already open"
                .format(self, InstructionGroup._current))
        InstructionGroup._current = self

    def close(self):
        # type: () -> None
        """
        Close this instruction group. This function should be called before
        opening another instruction group.
        """
        assert InstructionGroup._current is self, (
                "Can't close {}, the open instuction group is {}"
                .format(self, InstructionGroup._current))
        InstructionGroup._current = None

    def __init__(self, name, doc, target_independent=False):
        # type: (str, str, bool) -> None
        self.name = name
        self.__doc__ = doc
        self.target_independent = target_independent
        self.instructions = []  # type: List[Instruction]
        self.open()

    def __str__(self):
        # type: () -> str
        return self.name

    @staticmethod
    def append(inst):
        # type: (Instruction) -> None
        assert InstructionGroup._current, \
                "Open an instruction group before defining instructions."
        InstructionGroup._current.instructions.append(inst)


class Instruction(object):
    """
    A single instruction record.

    Every encoding variant of a machine instruction is its own record: the
    register-register, register-memory and immediate forms of `add` are three
    instructions that happen to print the same mnemonic.

    :param name: Definition name, also becomes the opcode enumerator name.
    :param asm_string: Assembly string. Alternatives for the different
        assembly syntaxes are written as `{att|intel}` blocks.
    :param form: Encoding form, or `None` for target-independent instructions
        that have no encoding of their own.
    :param asm_variant_name: Restrict the instruction to the named assembly
        parser variant. `NonParsable` marks instructions whose assembly string
        embeds a prefix.
    :param is_pseudo: This is a pseudo-instruction that is expanded before
        emission.
    :param is_codegen_only: This instruction is only used by code generation
        and is invisible to the assembler and disassembler.
    :param is_asm_parser_only: This instruction is only used by the assembly
        parser.
    :param force_disassemble: Make a code generation only instruction visible
        to the disassembler anyway.
    """

    # Boolean instruction attributes that can be passed as keyword arguments to
    # the constructor.
    ATTRIBS = {
            'is_pseudo': 'Is this a pseudo-instruction?',
            'is_codegen_only': 'Is this instruction only used by codegen?',
            'is_asm_parser_only':
            'Is this instruction only used by the assembly parser?',
            'force_disassemble':
            'Should a codegen only instruction be disassembled anyway?',
            }

    def __init__(self, name, asm_string, form=None, asm_variant_name='',
                 **kwargs):
        # type: (str, str, Form, str, **Any) -> None
        if not is_identifier(name):
            raise AssertionError(
                    "instruction name '{}' is not an identifier".format(name))
        self.name = name
        self.asm_string = asm_string
        self.form = form
        self.asm_variant_name = asm_variant_name

        for attr in kwargs:
            if attr not in Instruction.ATTRIBS:
                raise AssertionError(
                        "unknown instruction attribute '" + attr + "'")
        for attr in Instruction.ATTRIBS:
            setattr(self, attr, not not kwargs.get(attr, False))

        InstructionGroup.append(self)

    def __str__(self):
        # type: () -> str
        return self.name

    def __repr__(self):
        # type: () -> str
        return 'Instruction({})'.format(self.name)
