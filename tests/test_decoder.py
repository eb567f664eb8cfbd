"""
标量解码器测试 (Scalar Decoder Test)
===================================

覆盖:
1. 已知位模式 (5.0f, 0.1f, -0.0f, 0.1)
2. 特殊值: ±Inf, NaN, 次正规数, 最大有限值
3. 字段重建与字段互不重叠
4. 符号对称性: decode(-x) 与 decode(x) 仅 sign 不同
"""
import math
import random
from fractions import Fraction
import sys
import os

import numpy as np

# 添加项目根目录到 path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from float_bits import (
    FloatBits, FloatClass, decode, decode_float32, decode_float64,
    decode_array, from_bits, compose
)
from float_bits.encoding.converters import (
    float32_to_bits, bits_to_float32, bits_to_float64, rational_to_bits
)


SAMPLES = [5.0, 0.1, 1.0, 2.5, 1e-3, 123456.789, 3.0e38, 1e-40, 2.0 ** -149, 1e300, 5e-324]


def test_known_fp32():
    print("\nTesting known FP32 patterns...")
    fb = decode_float32(5.0)
    assert fb == FloatBits(width=32, raw=0x40A00000, sign=0, exponent=0x81, fraction=0x200000)
    assert fb.exponent == 129

    fb = decode(0.1, 32)
    assert (fb.sign, fb.exponent, fb.fraction) == (0, 123, 0x4CCCCD)
    assert fb.raw == 0x3DCCCCCD

    fb = decode(-0.0, 32)
    assert (fb.sign, fb.exponent, fb.fraction) == (1, 0, 0)
    assert fb.raw == 0x80000000
    assert fb.classification == FloatClass.ZERO

    # 1.0f 必须读作 0x3F800000, 不是整数 1
    assert decode(1.0, 32).raw == 0x3F800000
    print("Known FP32: PASS")


def test_known_fp64():
    print("\nTesting known FP64 patterns...")
    fb = decode_float64(0.1)
    assert (fb.sign, fb.exponent, fb.fraction) == (0, 1019, 0x999999999999A)
    assert fb.exponent == 0x3FB
    assert fb.raw == 0x3FB999999999999A

    fb = decode(-2.0, 64)
    assert fb.raw == 0xC000000000000000
    assert (fb.sign, fb.exponent, fb.fraction) == (1, 1024, 0)

    assert decode(1.0, 64).raw == 0x3FF0000000000000
    print("Known FP64: PASS")


def test_special_values():
    print("\nTesting special values...")
    inf = float('inf')
    nan = float('nan')

    assert decode(inf, 32).raw == 0x7F800000
    assert decode(-inf, 32).raw == 0xFF800000
    assert decode(inf, 64).raw == 0x7FF0000000000000
    assert decode(-inf, 64).classification == FloatClass.INFINITE
    assert decode(-inf, 64).sign == 1

    for width in (32, 64):
        fb = decode(nan, width)
        assert fb.classification == FloatClass.NAN
        assert fb.exponent == fb.format.exponent_max
        assert fb.fraction != 0
        assert math.isnan(fb.value)

    # 最小次正规数
    assert decode(2.0 ** -149, 32).raw == 1
    assert decode(5e-324, 64).raw == 1
    assert decode(5e-324, 64).classification == FloatClass.SUBNORMAL

    # 最大有限值
    assert decode(float(np.finfo(np.float32).max), 32).raw == 0x7F7FFFFF
    assert decode(float(np.finfo(np.float64).max), 64).raw == 0x7FEFFFFFFFFFFFFF

    # binary32 溢出舍入为 Inf
    assert decode(1e300, 32).raw == 0x7F800000
    print("Special values: PASS")


def test_numpy_scalars():
    print("\nTesting numpy scalar inputs...")
    assert decode(np.float32(0.1), 32).raw == 0x3DCCCCCD
    assert decode(np.float32(0.1), 64).raw == decode(float(np.float32(0.1)), 64).raw
    assert decode(np.float64(0.1), 64).raw == 0x3FB999999999999A
    print("Numpy scalars: PASS")


def test_round_trip():
    print("\nTesting field round-trip...")
    rng = random.Random(0)
    for width in (32, 64):
        for _ in range(2000):
            raw = rng.getrandbits(width)
            fb = from_bits(raw, width)
            assert fb.compose() == raw
            assert compose(fb.sign, fb.exponent, fb.fraction, width) == raw
            # NaN 在 float 转换中可能被静默化, 只检查非 NaN
            if fb.classification != FloatClass.NAN:
                assert decode(fb.value, width).raw == raw

    for x in SAMPLES:
        assert decode(x, 32).raw == float32_to_bits(x)
        assert decode(bits_to_float32(decode(x, 32).raw), 32).raw == decode(x, 32).raw
        assert decode(bits_to_float64(decode(x, 64).raw), 64).raw == decode(x, 64).raw
    print("Round-trip: PASS")


def test_field_disjointness():
    print("\nTesting field disjointness...")
    for width in (32, 64):
        for x in SAMPLES + [-x for x in SAMPLES] + [0.0, -0.0, float('inf')]:
            fb = decode(x, width)
            fmt = fb.format
            s = fb.sign << fmt.sign_shift
            e = fb.exponent << fmt.exponent_shift
            m = fb.fraction
            assert s & e == 0 and s & m == 0 and e & m == 0
            assert s | e | m == fb.raw
            assert fb.sign in (0, 1)
            assert fb.exponent <= fmt.exponent_mask
            assert fb.fraction <= fmt.fraction_mask
    print("Disjointness: PASS")


def test_sign_symmetry():
    print("\nTesting sign symmetry...")
    for width in (32, 64):
        for x in SAMPLES:
            pos = decode(x, width)
            neg = decode(-x, width)
            # 1e300 在 binary32 下溢出为 Inf, 5e-324 下溢为 0, 仍满足对称
            assert pos.sign == 0 and neg.sign == 1
            assert (neg.exponent, neg.fraction) == (pos.exponent, pos.fraction)
            assert neg.raw ^ pos.raw == 1 << (width - 1)
    print("Symmetry: PASS")


def test_invalid_inputs():
    print("\nTesting invalid width / bit patterns...")
    for bad_call in (
        lambda: decode(1.0, 16),
        lambda: decode(1.0, 80),
        lambda: from_bits(1 << 32, 32),
        lambda: from_bits(-1, 64),
        lambda: compose(2, 0, 0, 32),
        lambda: compose(0, 256, 0, 32),
        lambda: compose(0, 0, 1 << 52, 64),
    ):
        try:
            bad_call()
        except ValueError:
            continue
        raise AssertionError("expected ValueError")
    print("Invalid inputs: PASS")


def test_rational_rounding():
    print("\nTesting exact rational rounding...")
    # 与 numpy 单次舍入一致 (float64 可精确表示的输入)
    for x in SAMPLES + [-x for x in SAMPLES] + [float(np.finfo(np.float32).max)]:
        for width in (32, 64):
            assert rational_to_bits(Fraction(x), width) == decode(x, width).raw, (x, width)

    half_ulp = Fraction(1, 1 << 24)
    assert rational_to_bits(1 + half_ulp, 32) == 0x3F800000
    assert rational_to_bits(1 + half_ulp + Fraction(1, 10 ** 30), 32) == 0x3F800001
    assert rational_to_bits(1 + 3 * half_ulp, 32) == 0x3F800002
    assert rational_to_bits(0, 32, negative=True) == 0x80000000
    assert rational_to_bits(Fraction(1, 10), 64) == 0x3FB999999999999A
    # 最大次正规数向上舍入进入最小正规数
    assert rational_to_bits(Fraction(2) ** -126 - Fraction(2) ** -151, 32) == 0x00800000
    assert rational_to_bits(Fraction(2) ** 128, 32) == 0x7F800000
    print("Rational rounding: PASS")


def test_decode_array():
    print("\nTesting numpy batch decode...")
    values = np.array([5.0, 0.1, -0.0, 1e-40, float('inf'), -2.0])
    for width in (32, 64):
        sign, exponent, fraction = decode_array(values, width)
        assert sign.shape == values.shape
        for i, x in enumerate(values):
            fb = decode(float(x), width)
            assert (int(sign[i]), int(exponent[i]), int(fraction[i])) == (fb.sign, fb.exponent, fb.fraction)

    # 0 维输入保持 0 维, 非连续输入保持原形状
    for width in (32, 64):
        sign, exponent, fraction = decode_array(np.float64(5.0), width)
        assert sign.shape == () and exponent.shape == () and fraction.shape == ()
        assert int(exponent) == decode(5.0, width).exponent
        strided = np.arange(12.0).reshape(3, 4)[:, ::2]
        assert decode_array(strided, width)[1].shape == (3, 2)
    print("Batch decode: PASS")


if __name__ == "__main__":
    try:
        test_known_fp32()
        test_known_fp64()
        test_special_values()
        test_numpy_scalars()
        test_round_trip()
        test_field_disjointness()
        test_sign_symmetry()
        test_invalid_inputs()
        test_rational_rounding()
        test_decode_array()
        print("\nALL DECODER TESTS PASSED.")
    except Exception as e:
        print(f"\nTEST FAILED: {e}")
        exit(1)
