r"""
Assembly string handling.

Instruction assembly strings cover all the assembly syntaxes of a target at
once. Text that differs between syntaxes is written as a `{a|b|...}` block,
and the syntax variant number selects one of the alternatives:

    add{l}\t{$src, $dst|$dst, $src}

prints as `addl $src, $dst` in AT&T syntax (variant 0) and as
`add $dst, $src` in Intel syntax (variant 1).
"""
from typing import Any  # noqa


def flatten_variants(asm, variant):
    # type: (str, int) -> str
    r"""
    Select the alternatives for `variant` in every `{...}` block of `asm`.

    Braces preceded by `$` or `\` do not start a block, so operand references
    like `${cond}` are left alone. Missing alternatives select nothing.

        >>> flatten_variants('add{l}\t{$src, $dst|$dst, $src}', 0)
        'addl\t$src, $dst'
        >>> flatten_variants('add{l}\t{$src, $dst|$dst, $src}', 1)
        'add\t$dst, $src'
        >>> flatten_variants('cmov${cond}{l}', 1)
        'cmov${cond}'
    """
    res = ''
    cur = asm
    while True:
        # Find the start of the next variant block.
        start = 0
        while start != len(cur):
            if cur[start] == '{' and (
                    start == 0 or cur[start - 1] not in ('$', '\\')):
                break
            start += 1
        res += cur[:start]
        if start == len(cur):
            return res
        start += 1

        # Scan to the matching close brace.
        end = start
        nested = 1
        while end != len(cur):
            if cur[end] == '}' and cur[end - 1] != '\\':
                nested -= 1
                if nested == 0:
                    break
            elif cur[end] == '{':
                nested += 1
            end += 1
        if end == len(cur):
            raise RuntimeError(
                    'Unterminated variants in assembly string {!r}'
                    .format(asm))

        alternatives = cur[start:end].split('|')
        if variant < len(alternatives):
            res += alternatives[variant]
        cur = cur[end + 1:]


def get_mnemonic(inst, variant):
    # type: (Any, int) -> str
    """
    Get the mnemonic that `inst` prints as under the syntax `variant`.

    The mnemonic is the part of the assembly string before the first tab,
    upper-cased. Condition code families like `j${cond}` are named with a
    `CC` placeholder that replaces everything from `${cond}` on, so `JCC_1`
    has the mnemonic `JCC` and `cmov${cond}{l}` is `CMOVCC` in every syntax.

    :param inst: Anything with `name` and `asm_string` attributes.
    :param variant: Assembly syntax variant number.
    """
    try:
        asm = flatten_variants(inst.asm_string, variant)
    except RuntimeError as e:
        raise RuntimeError('{}: {}'.format(inst.name, e))
    mnemonic = asm.split('\t', 1)[0]
    pos = mnemonic.find('${cond}')
    if pos != -1:
        mnemonic = mnemonic[:pos] + 'CC'
    if not mnemonic:
        raise RuntimeError(
                '{}: no mnemonic in assembly string {!r}'
                .format(inst.name, inst.asm_string))
    return mnemonic.upper()
