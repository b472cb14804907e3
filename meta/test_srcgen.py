import doctest
import srcgen
from unittest import TestCase
from srcgen import Formatter, Switch


def load_tests(loader, tests, ignore):
    tests.addTests(doctest.DocTestSuite(srcgen))
    return tests


class TestFormatter(TestCase):
    def test_nested_scopes(self):
        fmt = Formatter()
        with fmt.namespace(['llvm', 'X86']):
            with fmt.guarded('GET_X'):
                with fmt.indented('bool f() {', '}'):
                    fmt.line('return true;')
        self.assertEqual(fmt.text(), ''.join([
            'namespace llvm {\n',
            'namespace X86 {\n',
            '\n',
            '#ifdef GET_X\n',
            '#undef GET_X\n',
            '\n',
            'bool f() {\n',
            '    return true;\n',
            '}\n',
            '#endif // GET_X\n',
            '\n',
            '\n',
            '} // end namespace X86\n',
            '} // end namespace llvm\n',
        ]))

    def test_switch_in_function(self):
        fmt = Formatter()
        sw = Switch('Opcode')
        sw.case('A', 'return true;')
        sw.case('B', 'return true;')
        with fmt.indented('bool f(unsigned Opcode) {', '}'):
            fmt.switch(sw)
            fmt.line('return false;')
        self.assertEqual(fmt.lines, [
            'bool f(unsigned Opcode) {\n',
            '    switch (Opcode) {\n',
            '    case A:\n',
            '    case B:\n',
            '        return true;\n',
            '    }\n',
            '    return false;\n',
            '}\n',
        ])

    def test_switch_keeps_first_position(self):
        sw = Switch('x')
        sw.case('A', 'return 1;')
        sw.case('B', 'return 2;')
        sw.case('C', 'return 1;')
        self.assertEqual(
                [list(labels) for labels in sw.cases.values()],
                [['A', 'C'], ['B']])

    def test_banner(self):
        fmt = Formatter()
        fmt.banner('X86 Mnemonic tables')
        self.assertIn('X86 Mnemonic tables', fmt.lines[1])
        for l in fmt.lines[:-1]:
            self.assertEqual(len(l.rstrip('\n')), 80)
        self.assertEqual(fmt.lines[-1], '\n')

    def test_indent_pop_at_top_level(self):
        fmt = Formatter()
        with self.assertRaises(AssertionError):
            fmt.indent_pop()
