from unittest import TestCase
from .instructions import Instruction, InstructionGroup
from .recognizable import RecognizableInstr
from .forms import Pseudo, PrefixByte, MRMDestReg, MRMSrcReg, RawFrm


class TestRecognizable(TestCase):
    def setUp(self):
        # type: () -> None
        self.group = InstructionGroup('test', 'Test instructions')

    def tearDown(self):
        # type: () -> None
        self.group.close()

    def emitted(self, *args, **kwargs):
        # type: (*str, **object) -> bool
        return RecognizableInstr(
                Instruction(*args, **kwargs)).should_be_emitted

    def test_plain(self):
        self.assertTrue(self.emitted('ADD32rr', 'add{l}', MRMDestReg))
        self.assertTrue(self.emitted('LOCK_PREFIX', 'lock', PrefixByte))

    def test_target_independent(self):
        self.assertFalse(self.emitted('COPY', ''))

    def test_pseudo(self):
        self.assertFalse(self.emitted('MOV32r0', '', Pseudo, is_pseudo=True))
        self.assertFalse(self.emitted('ADD32rr_DB', '', Pseudo))

    def test_codegen_only(self):
        self.assertFalse(self.emitted(
            'MOV32rr_REV', 'mov{l}', MRMSrcReg, is_codegen_only=True))
        self.assertTrue(self.emitted(
            'MOV32rr_REV', 'mov{l}', MRMSrcReg, is_codegen_only=True,
            force_disassemble=True))

    def test_asm_parser_only(self):
        self.assertFalse(self.emitted(
            'JMP_2', 'jmp', RawFrm, is_asm_parser_only=True))
        self.assertFalse(self.emitted(
            'JMP_2', 'jmp', RawFrm, is_asm_parser_only=True,
            force_disassemble=True))

    def test_exposes_descriptor(self):
        inst = Instruction(
                'REP_MOVSB_32', '{rep;movsb|rep movsb}', RawFrm,
                asm_variant_name='NonParsable')
        ri = RecognizableInstr(inst)
        self.assertEqual(ri.name, 'REP_MOVSB_32')
        self.assertEqual(ri.asm_string, '{rep;movsb|rep movsb}')
        self.assertEqual(ri.asm_variant_name, 'NonParsable')
        self.assertIs(ri.form, RawFrm)
        self.assertTrue(ri.should_be_emitted)
