# Build script.
#
# This script is run from the target's build system to generate the mnemonic
# table sources.

import argparse
import isa
import gen_mnemonics
import gen_build_deps


def main():
    # type: () -> None
    parser = argparse.ArgumentParser(
            description='Generate mnemonic tables for all target ISAs.')
    parser.add_argument('--out-dir', help='set output directory')

    args = parser.parse_args()
    out_dir = args.out_dir

    isas = isa.all_isas()

    outputs = gen_mnemonics.generate(isas, out_dir)
    gen_build_deps.generate(outputs)


if __name__ == "__main__":
    main()
