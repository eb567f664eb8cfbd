"""
浮点位字段解码器 (Float Bit-Field Decoder)
=========================================

将单个浮点值分解为 IEEE-754 字段:

    raw = (sign << (width-1)) | (exponent << fraction_bits) | fraction

- decode_float32 / decode_float64: 两个格式专用入口
- decode(value, width): 按位宽分派
- from_bits(raw, width): 直接从位模式构造
- decode_array(values, width): numpy 批量版本

对任意位模式均为全函数, 无错误状态 (仅位宽非法时抛 ValueError)。

作者: FloatBitScope Project
"""
from typing import NamedTuple

from float_bits.core.float_format import FloatFormat
from float_bits.core.classification import classify
from float_bits.encoding.converters import float_to_bits, bits_to_float, array_to_bits


class FloatBits(NamedTuple):
    """单个浮点值的解码结果 (不可变)

    Attributes:
        width: 32 或 64
        raw: 存储位模式 (无符号整数)
        sign: 符号位 0/1
        exponent: 偏置指数字段, 未减 bias
        fraction: 尾数字段, 不含隐含位
    """
    width: int
    raw: int
    sign: int
    exponent: int
    fraction: int

    @property
    def format(self):
        return FloatFormat.validate(self.width)

    @property
    def classification(self):
        return classify(self.exponent, self.fraction, self.width)

    @property
    def value(self):
        """位模式所表示的浮点值"""
        return bits_to_float(self.raw, self.width)

    def compose(self):
        """由三个字段重建 raw"""
        return compose(self.sign, self.exponent, self.fraction, self.width)


def compose(sign, exponent, fraction, width):
    """由字段拼接位模式

    Raises:
        ValueError: 任一字段超出其位宽
    """
    fmt = FloatFormat.validate(width)
    fields = (
        ('sign', sign, 1),
        ('exponent', exponent, fmt.exponent_mask),
        ('fraction', fraction, fmt.fraction_mask),
    )
    for name, field, limit in fields:
        if not 0 <= field <= limit:
            raise ValueError(
                f"Invalid {name}: {field:#x}. "
                f"Expected 0..{limit:#x} for {fmt.width}-bit format"
            )
    return (sign << fmt.sign_shift) | (exponent << fmt.exponent_shift) | fraction


def from_bits(raw, width):
    """从位模式解码

    Raises:
        ValueError: raw 为负或超出 width 位
    """
    fmt = FloatFormat.validate(width)
    raw = int(raw)
    if not 0 <= raw <= fmt.raw_mask:
        raise ValueError(
            f"Invalid bit pattern: {raw:#x}. "
            f"Expected 0..{fmt.raw_mask:#x} for {fmt.width}-bit format"
        )
    return FloatBits(
        width=fmt.width,
        raw=raw,
        sign=(raw >> fmt.sign_shift) & 1,
        exponent=(raw >> fmt.exponent_shift) & fmt.exponent_mask,
        fraction=raw & fmt.fraction_mask,
    )


def decode(value, width):
    """解码浮点值的存储位

    Args:
        value: 浮点值; width=32 时先舍入为 binary32
        width: 32 或 64

    Returns:
        FloatBits
    """
    fmt = FloatFormat.validate(width)
    return from_bits(float_to_bits(value, fmt), fmt)


def decode_float32(value):
    return decode(value, 32)


def decode_float64(value):
    return decode(value, 64)


def decode_array(values, width):
    """numpy 批量解码

    Returns:
        (sign, exponent, fraction): 与 values 同形状的 uint32 / uint64 数组
    """
    fmt = FloatFormat.validate(width)
    u = array_to_bits(values, fmt)
    utype = u.dtype.type
    sign = (u >> utype(fmt.sign_shift)) & utype(1)
    exponent = (u >> utype(fmt.exponent_shift)) & utype(fmt.exponent_mask)
    fraction = u & utype(fmt.fraction_mask)
    return sign, exponent, fraction


__all__ = [
    'FloatBits', 'compose', 'from_bits',
    'decode', 'decode_float32', 'decode_float64', 'decode_array',
]
