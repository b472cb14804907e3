from unittest import TestCase
from . import ISA
from .defs import ATT, INTEL


class TestX86(TestCase):
    def test_asm_writers(self):
        self.assertIs(ISA.get_asm_writer(), ATT)
        self.assertEqual((ATT.variant, INTEL.variant), (0, 1))
        self.assertEqual(ISA.namespace, 'X86')

    def test_generic_first(self):
        insts = ISA.instructions_by_enum_value()
        self.assertEqual(insts[0].name, 'PHI')
        first_target = [i.form is not None for i in insts].index(True)
        self.assertTrue(all(i.form is not None for i in insts[first_target:]))
        self.assertEqual(
                [i.name for i in insts[first_target:first_target + 2]],
                ['MOV32r0', 'TCRETURNdi'])
