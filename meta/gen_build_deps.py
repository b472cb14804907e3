"""
Generate build dependencies for the generated sources.

The `build.py` script is invoked by the build system to generate C++ tables
from the instruction descriptions. The build system needs to know when it is
necessary to rerun the build script.

For every generated file, this prints one line per meta language source file
in Make syntax:

    X86GenMnemonicTables.inc: /path/to/meta/isa/x86/instructions.py

so the outputs are regenerated when those files have changed since the last
build. The output starts with a `#` comment line, so it is a valid Makefile
fragment as a whole.
"""
import os
from os.path import dirname, abspath, join
from typing import Iterable, List  # noqa


def meta_sources():
    # type: () -> List[str]
    """Get all Python files in the meta language directory, sorted."""
    meta = dirname(abspath(__file__))
    sources = []
    for (dirpath, _, filenames) in os.walk(meta):
        for f in filenames:
            if f.endswith('.py'):
                sources.append(join(dirpath, f))
    return sorted(sources)


def generate(outputs):
    # type: (Iterable[str]) -> None
    print("# Dependencies from meta language directory")
    sources = meta_sources()
    for output in outputs:
        for source in sources:
            print("{}: {}".format(output, source))
