"""
存储重解释转换器 (Storage Reinterpretation Converters)
====================================================

浮点值 <-> 等宽无符号整数位模式, 以及浮点张量 <-> 脉冲位向量。

所有转换均为字节级重解释 (ndarray.view / Tensor.view), 不做数值转换:
1.0f 读作 0x3F800000, 而不是 1。

脉冲格式: [..., width], MSB 在前 [S, E..., M...], 值为 0.0/1.0

作者: FloatBitScope Project
"""
from fractions import Fraction

import numpy as np
import torch

from float_bits.core.float_format import FloatFormat


_NUMPY_DTYPES = {
    32: (np.float32, np.uint32),
    64: (np.float64, np.uint64),
}

_INT64_MIN = torch.iinfo(torch.int64).min


def _check_bits(bits, fmt):
    if not 0 <= bits <= fmt.raw_mask:
        raise ValueError(
            f"Invalid bit pattern: {bits:#x}. "
            f"Expected 0..{fmt.raw_mask:#x} for {fmt.width}-bit format"
        )


# ==============================================================================
# 标量 (numpy)
# ==============================================================================

def float_to_bits(value, width):
    """将浮点值的存储重解释为 width 位无符号整数

    width=32 时 Python float 先按 IEEE 就近舍入为 binary32, 溢出得到 Inf。
    """
    fmt = FloatFormat.validate(width)
    float_dtype, uint_dtype = _NUMPY_DTYPES[fmt.width]
    with np.errstate(over='ignore'):
        arr = np.asarray(value, dtype=float_dtype)
    return int(arr.view(uint_dtype))


def bits_to_float(bits, width):
    """将 width 位无符号整数重解释为浮点值 (返回 Python float)"""
    fmt = FloatFormat.validate(width)
    _check_bits(bits, fmt)
    float_dtype, uint_dtype = _NUMPY_DTYPES[fmt.width]
    return float(np.asarray(bits, dtype=uint_dtype).view(float_dtype))


def float32_to_bits(value):
    return float_to_bits(value, 32)


def bits_to_float32(bits):
    return bits_to_float(bits, 32)


def float64_to_bits(value):
    return float_to_bits(value, 64)


def bits_to_float64(bits):
    return bits_to_float(bits, 64)


def rational_to_bits(q, width, negative=False):
    """精确有理数 -> width 位模式, 只做一次就近偶数舍入

    (经 float64 中转再转 binary32 会在中点附近二次舍入。)

    Args:
        q: fractions.Fraction (或 int)
        width: 32 或 64
        negative: q 为 0 时决定零的符号

    Returns:
        int: 无符号位模式, 溢出得到 Inf
    """
    fmt = FloatFormat.validate(width)
    q = Fraction(q)
    sign = 1 if (q < 0 or (q == 0 and negative)) else 0
    a = abs(q)
    if a == 0:
        return sign << fmt.sign_shift

    # 2^e <= a < 2^(e+1)
    e = a.numerator.bit_length() - a.denominator.bit_length()
    if a < Fraction(2) ** e:
        e -= 1
    e_min = 1 - fmt.bias
    if e < e_min:
        e = e_min  # 次正规数: 固定量子 2^(e_min - M)

    # Fraction.__round__ 为就近偶数
    n = round(a / Fraction(2) ** (e - fmt.fraction_bits))
    if n.bit_length() > fmt.fraction_bits + 1:
        n >>= 1
        e += 1

    if e > fmt.bias:
        return (sign << fmt.sign_shift) | (fmt.exponent_max << fmt.exponent_shift)
    if n >> fmt.fraction_bits == 0:
        biased = 0
    else:
        biased = e + fmt.bias
    return (sign << fmt.sign_shift) | (biased << fmt.exponent_shift) | (n & fmt.fraction_mask)


def array_to_bits(values, width):
    """numpy 批量版本: 返回 uint32 / uint64 数组"""
    fmt = FloatFormat.validate(width)
    float_dtype, uint_dtype = _NUMPY_DTYPES[fmt.width]
    with np.errstate(over='ignore'):
        arr = np.asarray(values, dtype=float_dtype)
    if not arr.flags.c_contiguous:
        arr = arr.copy(order='C')
    return arr.view(uint_dtype)


# ==============================================================================
# 张量 (torch)
# ==============================================================================

def tensor_to_bits(x, width):
    """将浮点张量的存储重解释为 int64 张量

    Args:
        x: 任意形状的浮点张量
        width: 32 或 64

    Returns:
        int64 张量, 与 x 同形状
        - 32 位: 无符号位模式 (0..2^32-1)
        - 64 位: 位模式的补码别名 (符号位置 1 时为负数)
    """
    fmt = FloatFormat.validate(width)
    if fmt.width == 32:
        bits = x.to(torch.float32).contiguous().view(torch.int32)
        return bits.to(torch.int64) & 0xFFFFFFFF
    return x.to(torch.float64).contiguous().view(torch.int64)


def float_to_pulse(x, width):
    """浮点张量 -> 脉冲位向量 [..., width], MSB 在前"""
    fmt = FloatFormat.validate(width)
    bits = tensor_to_bits(x, fmt)
    shifts = torch.arange(fmt.width - 1, -1, -1, device=bits.device, dtype=torch.int64)
    # 算术右移对 64 位负数同样成立, 因为只取最低位
    return ((bits.unsqueeze(-1) >> shifts) & 1).float()


def pulse_to_bits(pulse):
    """脉冲位向量 [..., width] -> int64 位模式张量 (编码同 tensor_to_bits)"""
    fmt = FloatFormat.validate(pulse.shape[-1])
    p = pulse.to(torch.int64)
    sign = p[..., 0]

    acc = torch.zeros(p.shape[:-1], dtype=torch.int64, device=p.device)
    for i in range(1, fmt.width):
        acc = (acc << 1) | p[..., i]

    if fmt.width == 32:
        return acc | (sign << 31)
    # 符号位直接加 INT64_MIN, 避免左移溢出
    return torch.where(sign == 1, acc + _INT64_MIN, acc)


def pulse_to_float(pulse):
    """脉冲位向量 -> float32 / float64 张量"""
    fmt = FloatFormat.validate(pulse.shape[-1])
    bits = pulse_to_bits(pulse)
    if fmt.width == 32:
        signed = torch.where(bits >= (1 << 31), bits - (1 << 32), bits)
        return signed.to(torch.int32).view(torch.float32)
    return bits.view(torch.float64)
