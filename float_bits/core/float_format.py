"""
浮点格式布局表 (Float Format Layout)
===================================

定义 IEEE-754 binary32 / binary64 的固定位布局。

FP32: [S | E7..E0 | M22..M0], bias=127
FP64: [S | E10..E0 | M51..M0], bias=1023

使用示例
--------
```python
from float_bits import FloatFormat

fmt = FloatFormat.validate(32)
exponent = (raw >> fmt.exponent_shift) & fmt.exponent_mask
```

作者: FloatBitScope Project
"""
from typing import NamedTuple


class FloatLayout(NamedTuple):
    """单一格式的位布局常量"""
    name: str
    width: int
    exponent_bits: int
    fraction_bits: int
    decimal_digits: int

    @property
    def sign_shift(self):
        return self.width - 1

    @property
    def exponent_shift(self):
        return self.fraction_bits

    @property
    def exponent_mask(self):
        return (1 << self.exponent_bits) - 1

    @property
    def fraction_mask(self):
        return (1 << self.fraction_bits) - 1

    @property
    def bias(self):
        return (1 << (self.exponent_bits - 1)) - 1

    @property
    def exponent_max(self):
        """全 1 指数 (Inf/NaN)"""
        return self.exponent_mask

    @property
    def raw_mask(self):
        return (1 << self.width) - 1

    @property
    def exponent_hex_digits(self):
        return (self.exponent_bits + 3) // 4

    @property
    def fraction_hex_digits(self):
        return (self.fraction_bits + 3) // 4


class FloatFormat:
    """支持的浮点格式枚举

    支持的格式:
    - FP32: binary32, 8 位指数, 23 位尾数
    - FP64: binary64, 11 位指数, 52 位尾数

    `%.9g` / `%.17g` 足以让十进制输出唯一确定位模式。
    """

    FP32 = FloatLayout(name='float', width=32, exponent_bits=8,
                       fraction_bits=23, decimal_digits=9)
    FP64 = FloatLayout(name='double', width=64, exponent_bits=11,
                       fraction_bits=52, decimal_digits=17)

    @classmethod
    def widths(cls):
        return (cls.FP32.width, cls.FP64.width)

    @classmethod
    def is_supported(cls, width):
        """检查位宽是否受支持"""
        return width in cls.widths()

    @classmethod
    def validate(cls, width):
        """验证位宽并返回对应布局

        Args:
            width: 32 或 64 (也接受 FloatLayout 本身)

        Returns:
            FloatLayout

        Raises:
            ValueError: 如果 width 不是 32 或 64
        """
        if isinstance(width, FloatLayout):
            return width
        if width == cls.FP32.width:
            return cls.FP32
        if width == cls.FP64.width:
            return cls.FP64
        raise ValueError(
            f"Invalid width: {width}. "
            f"Expected one of: 32, 64"
        )
