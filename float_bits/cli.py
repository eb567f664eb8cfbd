"""
命令行入口 (CLI)
================

    python -m float_bits                 # 演示: 5.0f, 0.1f, 0.1, -0.0f
    python -m float_bits 1.5 -inf        # binary32
    python -m float_bits -d 0.1          # binary64
    python -m float_bits -b 0x7fc00000   # 直接给出位模式
    python -m float_bits -c -- -nan      # 附加分类行

作者: FloatBitScope Project
"""
import argparse
import sys
from fractions import Fraction

from float_bits.decoder import decode, from_bits
from float_bits.encoding.converters import rational_to_bits
from float_bits.presentation import render

SEPARATOR = '----'

# 演示输入: (value, width)
DEMO_INPUTS = [
    (5.0, 32),
    (0.1, 32),
    (0.1, 64),
    (-0.0, 32),
]


def build_parser():
    parser = argparse.ArgumentParser(
        prog='floatbits',
        description='Show the IEEE-754 sign/exponent/fraction fields of floating-point values.'
    )
    parser.add_argument('inputs', nargs='*', metavar='VALUE',
                        help='values to decode (default: demo run)')
    parser.add_argument('-f', '--float', action='store_const', dest='width',
                        const=32, default=32,
                        help='single precision (IEEE binary32)')
    parser.add_argument('-d', '--double', action='store_const', dest='width',
                        const=64,
                        help='double precision (IEEE binary64)')
    parser.add_argument('-b', '--bits', action='store_true',
                        help='treat inputs as integer bit patterns (0x.., 0b.., decimal)')
    parser.add_argument('-c', '--classify', action='store_true',
                        help='also print the field classification')
    return parser


def _split_argv(argv):
    """把形如 -1.5 / -inf / -nan 的参数归为位置参数

    argparse 只识别简单负数, 因此先自行划分, 再在二者之间插入 "--"。
    """
    options = []
    positionals = []
    for i, arg in enumerate(argv):
        if arg == '--':
            positionals.extend(argv[i + 1:])
            break
        if not arg.startswith('-') or arg == '-':
            positionals.append(arg)
        elif arg.startswith('--'):
            options.append(arg)
        elif any(c.isdigit() for c in arg) or 'inf' in arg.lower() or 'nan' in arg.lower():
            positionals.append(arg)
        else:
            options.append(arg)
    return options + ['--'] + positionals


def parse_value(text, width):
    """解析十进制 / 十六进制浮点 (0x1.8p+1) / inf / nan, 返回 FloatBits

    十进制输入按精确有理数解析, 只舍入一次到目标格式。
    """
    lowered = text.strip().lower()
    if '0x' in lowered:
        return decode(float.fromhex(text), width)
    if 'inf' in lowered or 'nan' in lowered:
        return decode(float(text), width)
    q = Fraction(text.strip())
    return from_bits(rational_to_bits(q, width, negative=lowered.startswith('-')), width)


def parse_args(argv=None):
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(_split_argv(list(argv)))

    decoded = []
    for text in args.inputs:
        try:
            if args.bits:
                decoded.append(from_bits(int(text, 0), args.width))
            else:
                decoded.append(parse_value(text, args.width))
        except ValueError as e:
            parser.error(f"failed to parse input {text!r}: {e}")
    args.decoded = decoded
    return args


def main(argv=None):
    args = parse_args(argv)
    decoded = args.decoded
    if not args.inputs:
        decoded = [decode(value, width) for value, width in DEMO_INPUTS]

    for i, fb in enumerate(decoded):
        if i:
            print(SEPARATOR)
        print(render(fb, classify=args.classify))
    return 0


__all__ = ['main', 'parse_args', 'build_parser', 'DEMO_INPUTS']
