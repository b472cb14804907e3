"""
Instruction encoding model.

The disassembler and the mnemonic tables only care about instructions that
correspond to a real, decodable encoding. `RecognizableInstr` classifies an
instruction record accordingly.
"""
from .forms import Pseudo
from typing import TYPE_CHECKING  # noqa
if TYPE_CHECKING:
    from .instructions import Instruction  # noqa
    from .forms import Form  # noqa


class RecognizableInstr(object):
    """
    Encoding view of an instruction.

    Instructions without an encoding form are target-independent and never
    emitted. Otherwise an instruction is emitted unless it is a pseudo, a
    code generation only instruction that isn't forced into the disassembler,
    or an assembly parser only instruction.

    :param inst: The `Instruction` record.
    """

    def __init__(self, inst):
        # type: (Instruction) -> None
        self.name = inst.name
        self.asm_string = inst.asm_string
        self.asm_variant_name = inst.asm_variant_name
        self.form = inst.form  # type: Form
        if inst.form is None:
            self.should_be_emitted = False
        else:
            self.should_be_emitted = (
                    inst.form is not Pseudo and
                    (not inst.is_codegen_only or inst.force_disassemble) and
                    not inst.is_asm_parser_only)

    def __str__(self):
        # type: () -> str
        return self.name

    def __repr__(self):
        # type: () -> str
        return 'RecognizableInstr({})'.format(self.name)
