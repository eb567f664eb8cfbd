"""
张量字段解码器 (Tensor Field Decoder)
====================================

批量提取浮点张量的 sign / exponent / fraction 字段。

- TensorFieldDecoder: 浮点张量 -> (sign, exponent, fraction) int64 张量
- PulseFieldSplitter: 脉冲 [..., width] -> (sign[..., 1], exp[..., E], frac[..., M])

FP32: [S | E7..E0 | M22..M0]
FP64: [S | E10..E0 | M51..M0]

作者: FloatBitScope Project
"""
import torch.nn as nn

from float_bits.core.float_format import FloatFormat
from .converters import tensor_to_bits


class TensorFieldDecoder(nn.Module):
    """浮点张量字段解码器

    无状态, 无参数; 每个元素的结果与标量 decode() 一致。
    输入: x 任意形状浮点张量
    输出: (sign, exponent, fraction), int64, 与 x 同形状
    """
    def __init__(self, width=32):
        super().__init__()
        self.fmt = FloatFormat.validate(width)

    def forward(self, x):
        fmt = self.fmt
        bits = tensor_to_bits(x, fmt)
        # 64 位时 bits 可能为负 (补码别名), 掩码后结果不受影响
        sign = (bits >> fmt.sign_shift) & 1
        exponent = (bits >> fmt.exponent_shift) & fmt.exponent_mask
        fraction = bits & fmt.fraction_mask
        return sign, exponent, fraction

    def extra_repr(self):
        return f"width={self.fmt.width}"


class PulseFieldSplitter(nn.Module):
    """脉冲字段切分器

    输入: pulse [..., width] [S, E..., M...]
    输出: (sign [..., 1], exponent [..., E], fraction [..., M])
    """
    def __init__(self, width=32):
        super().__init__()
        self.fmt = FloatFormat.validate(width)

    def forward(self, pulse):
        fmt = self.fmt
        if pulse.shape[-1] != fmt.width:
            raise ValueError(
                f"Invalid pulse width: {pulse.shape[-1]}. "
                f"Expected {fmt.width}"
            )
        e_end = 1 + fmt.exponent_bits
        s = pulse[..., 0:1]
        e = pulse[..., 1:e_end]
        m = pulse[..., e_end:]
        return s, e, m

    def extra_repr(self):
        return f"width={self.fmt.width}"
