from unittest import TestCase
from doctest import DocTestSuite
from . import forms
from .forms import Form, PrefixByte, Pseudo


def load_tests(loader, tests, ignore):
    tests.addTests(DocTestSuite(forms))
    return tests


class TestForms(TestCase):
    def test_lookup(self):
        self.assertIs(Form.lookup('Pseudo'), Pseudo)
        self.assertIs(Form.lookup('PrefixByte'), PrefixByte)
        self.assertEqual(Form.lookup('MRMSrcReg').bits, 41)

    def test_unknown(self):
        with self.assertRaises(AttributeError):
            Form.lookup('MRMNowhere')

    def test_duplicate(self):
        with self.assertRaises(AssertionError):
            Form('PrefixByte', 99)
