from unittest import TestCase
from doctest import DocTestSuite
from . import asmstring
from .asmstring import flatten_variants, get_mnemonic


def load_tests(loader, tests, ignore):
    tests.addTests(DocTestSuite(asmstring))
    return tests


class Inst(object):
    def __init__(self, name, asm_string):
        # type: (str, str) -> None
        self.name = name
        self.asm_string = asm_string


class TestFlatten(TestCase):
    def test_no_variants(self):
        self.assertEqual(flatten_variants('nop', 0), 'nop')
        self.assertEqual(flatten_variants('', 1), '')

    def test_select(self):
        asm = '{a|b|c}x'
        self.assertEqual(flatten_variants(asm, 0), 'ax')
        self.assertEqual(flatten_variants(asm, 1), 'bx')
        self.assertEqual(flatten_variants(asm, 2), 'cx')
        self.assertEqual(flatten_variants(asm, 3), 'x')

    def test_several_blocks(self):
        asm = 'movs{l|d}\t{$src, $dst|$dst, $src}'
        self.assertEqual(flatten_variants(asm, 0), 'movsl\t$src, $dst')
        self.assertEqual(flatten_variants(asm, 1), 'movsd\t$dst, $src')

    def test_nested_blocks(self):
        asm = 'vaddps\t{$src, $dst {${mask}}|$dst {${mask}}, $src}'
        self.assertEqual(
                flatten_variants(asm, 0), 'vaddps\t$src, $dst {${mask}}')
        self.assertEqual(
                flatten_variants(asm, 1), 'vaddps\t$dst {${mask}}, $src')

    def test_escaped_braces(self):
        self.assertEqual(flatten_variants('a\\{b\\}', 0), 'a\\{b\\}')

    def test_operand_reference(self):
        self.assertEqual(flatten_variants('j${cond}\t$dst', 0),
                         'j${cond}\t$dst')

    def test_unterminated(self):
        with self.assertRaises(RuntimeError):
            flatten_variants('add{l\t$src', 0)


class TestMnemonic(TestCase):
    def test_simple(self):
        self.assertEqual(get_mnemonic(Inst('NOOP', 'nop'), 0), 'NOP')
        self.assertEqual(
                get_mnemonic(Inst('ADD32rr', 'add{l}\t{$a, $b|$b, $a}'), 0),
                'ADDL')
        self.assertEqual(
                get_mnemonic(Inst('ADD32rr', 'add{l}\t{$a, $b|$b, $a}'), 1),
                'ADD')

    def test_condition_code(self):
        cmov = Inst('CMOV32rr', 'cmov${cond}{l}\t{$a, $b|$b, $a}')
        self.assertEqual(get_mnemonic(cmov, 0), 'CMOVCC')
        self.assertEqual(get_mnemonic(cmov, 1), 'CMOVCC')
        self.assertEqual(get_mnemonic(Inst('JCC_1', 'j${cond}\t$dst'), 0),
                         'JCC')

    def test_condition_code_drops_size_suffix(self):
        cmov = Inst('CMOV64rr', 'cmov${cond}{q}\t{$a, $b|$b, $a}')
        self.assertEqual(get_mnemonic(cmov, 0), 'CMOVCC')
        setcc = Inst('SETCCr', 'set${cond}\t$dst')
        self.assertEqual(get_mnemonic(setcc, 0), 'SETCC')

    def test_stops_at_tab(self):
        self.assertEqual(
                get_mnemonic(Inst('RET64', 'ret{q}\t$amt'), 0), 'RETQ')
        self.assertEqual(get_mnemonic(Inst('RET64', 'ret{q}'), 1), 'RET')

    def test_errors_name_instruction(self):
        with self.assertRaises(RuntimeError) as cm:
            get_mnemonic(Inst('BAD32rr', 'bad{l\t$a'), 0)
        self.assertIn('BAD32rr', str(cm.exception))

        with self.assertRaises(RuntimeError) as cm:
            get_mnemonic(Inst('EMPTY', '\t$a'), 0)
        self.assertIn('EMPTY', str(cm.exception))

        with self.assertRaises(RuntimeError):
            get_mnemonic(Inst('INTEL_ONLY', '{|int3}'), 0)
