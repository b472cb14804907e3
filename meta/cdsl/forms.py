"""
Instruction encoding forms.

The encoding form of an x86 instruction describes how its operands are
encoded relative to the opcode byte: in a ModR/M byte, added to the opcode,
as raw immediates, and so on. The form numbers match the `FormBits` field of
the instruction records so that the disassembler tables and the mnemonic
tables agree on them.
"""
from typing import Dict  # noqa


class Form(object):
    """
    An instruction encoding form.

    :param name: Name of the form, as used in instruction definitions.
    :param bits: Numeric value of the form in the instruction records.
    """

    # All forms by name.
    _registry = dict()  # type: Dict[str, Form]

    def __init__(self, name, bits):
        # type: (str, int) -> None
        assert name not in Form._registry, \
            "Duplicate encoding form '{}'".format(name)
        self.name = name
        self.bits = bits
        Form._registry[name] = self

    def __str__(self):
        # type: () -> str
        return self.name

    def __repr__(self):
        # type: () -> str
        return 'Form({}, {})'.format(self.name, self.bits)

    @staticmethod
    def lookup(name):
        # type: (str) -> Form
        """
        Find the form called `name`.

            >>> Form.lookup('PrefixByte')
            Form(PrefixByte, 10)
        """
        try:
            return Form._registry[name]
        except KeyError:
            raise AttributeError("No encoding form named '{}'".format(name))


Pseudo = Form('Pseudo', 0)
RawFrm = Form('RawFrm', 1)
AddRegFrm = Form('AddRegFrm', 2)
RawFrmMemOffs = Form('RawFrmMemOffs', 3)
RawFrmSrc = Form('RawFrmSrc', 4)
RawFrmDst = Form('RawFrmDst', 5)
RawFrmDstSrc = Form('RawFrmDstSrc', 6)
RawFrmImm8 = Form('RawFrmImm8', 7)
RawFrmImm16 = Form('RawFrmImm16', 8)
AddCCFrm = Form('AddCCFrm', 9)
# A byte that modifies the following instruction rather than standing alone.
PrefixByte = Form('PrefixByte', 10)

MRMDestMem = Form('MRMDestMem', 24)
MRMSrcMem = Form('MRMSrcMem', 25)
MRMSrcMemCC = Form('MRMSrcMemCC', 28)
MRMXmCC = Form('MRMXmCC', 30)
MRMXm = Form('MRMXm', 31)
MRM0m = Form('MRM0m', 32)
MRM1m = Form('MRM1m', 33)
MRM2m = Form('MRM2m', 34)
MRM3m = Form('MRM3m', 35)
MRM4m = Form('MRM4m', 36)
MRM5m = Form('MRM5m', 37)
MRM6m = Form('MRM6m', 38)
MRM7m = Form('MRM7m', 39)

MRMDestReg = Form('MRMDestReg', 40)
MRMSrcReg = Form('MRMSrcReg', 41)
MRMSrcRegCC = Form('MRMSrcRegCC', 44)
MRMXrCC = Form('MRMXrCC', 46)
MRMXr = Form('MRMXr', 47)
MRM0r = Form('MRM0r', 48)
MRM1r = Form('MRM1r', 49)
MRM2r = Form('MRM2r', 50)
MRM3r = Form('MRM3r', 51)
MRM4r = Form('MRM4r', 52)
MRM5r = Form('MRM5r', 53)
MRM6r = Form('MRM6r', 54)
MRM7r = Form('MRM7r', 55)
