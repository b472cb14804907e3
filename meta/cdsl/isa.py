"""Defining instruction set architectures."""
from .instructions import InstructionGroup

# The typing module is only required by mypy, and we don't use these imports
# outside type comments.
from typing import Sequence, List, Set  # noqa
from .instructions import Instruction  # noqa


class AsmWriter(object):
    """
    An assembly syntax for a target.

    :param name: Name of the syntax, e.g. 'att' or 'intel'.
    :param variant: Index of this syntax's alternative in the `{a|b}` blocks
        of assembly strings.
    """

    def __init__(self, name, variant):
        # type: (str, int) -> None
        self.name = name
        self.variant = variant

    def __str__(self):
        # type: () -> str
        return self.name


class TargetISA(object):
    """
    A target instruction set architecture.

    The `TargetISA` class collects everything known about a target ISA.

    :param name: Short mnemonic name for the ISA.
    :param instruction_groups: List of `InstructionGroup` instances that are
        relevant for this ISA.
    :param namespace: C++ namespace of the generated target code. Also used to
        name generated files and macros.
    :param asm_writers: The assembly syntaxes of the target. The first one is
        the primary syntax.
    """

    def __init__(self, name, instruction_groups, namespace, asm_writers=()):
        # type: (str, Sequence[InstructionGroup], str, Sequence[AsmWriter]) -> None  # noqa
        self.name = name
        self.instruction_groups = instruction_groups
        self.namespace = namespace
        self.asm_writers = list(asm_writers)
        self.instructions = list()  # type: List[Instruction]

        assert InstructionGroup._current is None,\
            "InstructionGroup {} is still open"\
            .format(InstructionGroup._current.name)

    def __str__(self):
        # type: () -> str
        return self.name

    def finish(self):
        # type: () -> TargetISA
        """
        Finish the definition of a target ISA after adding all instruction
        groups and assembly writers.

        This collects the instructions in opcode enumeration order.

        :returns self:
        """
        self._collect_instructions()
        return self

    def _collect_instructions(self):
        # type: () -> None
        """
        Collect all instructions.

        Target-independent instructions come first, in the order they are
        defined. The remaining instructions are sorted with pseudos first and
        by name.
        """
        fixed = list()  # type: List[Instruction]
        rest = list()  # type: List[Instruction]
        names = set()  # type: Set[str]
        for grp in self.instruction_groups:
            for inst in grp.instructions:
                if inst.name in names:
                    raise AssertionError(
                            "Instruction '{}' is defined twice in {}"
                            .format(inst.name, self.name))
                names.add(inst.name)
                if grp.target_independent:
                    fixed.append(inst)
                else:
                    rest.append(inst)
        rest.sort(key=lambda inst: (not inst.is_pseudo, inst.name))

        self.instructions = fixed + rest

    def instructions_by_enum_value(self):
        # type: () -> List[Instruction]
        """Get all instructions, ordered by opcode number."""
        return self.instructions

    def get_asm_writer(self):
        # type: () -> AsmWriter
        """Get the primary assembly syntax of this ISA."""
        assert self.asm_writers, \
            "{} has no assembly writers".format(self.name)
        return self.asm_writers[0]
