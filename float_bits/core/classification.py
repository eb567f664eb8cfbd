"""
浮点分类 (Float Classification)
===============================

仅依据 (exponent, fraction) 两个字段判断类别, 不做任何数值运算。

| exponent         | fraction | 类别        |
|------------------|----------|-------------|
| 0                | 0        | ZERO        |
| 0                | ≠0       | SUBNORMAL   |
| 0 < E < E_max    | any      | NORMAL      |
| E_max            | 0        | INFINITE    |
| E_max            | ≠0       | NAN         |

作者: FloatBitScope Project
"""
from .float_format import FloatFormat


class FloatClass:
    """分类常量

    ZERO 与 INFINITE 是带符号的, 符号由 sign 字段单独给出。
    """

    ZERO = 'zero'
    SUBNORMAL = 'subnormal'
    NORMAL = 'normal'
    INFINITE = 'infinite'
    NAN = 'nan'

    ALL = (ZERO, SUBNORMAL, NORMAL, INFINITE, NAN)

    @classmethod
    def is_finite(cls, kind):
        return kind in (cls.ZERO, cls.SUBNORMAL, cls.NORMAL)


def classify(exponent, fraction, width):
    """根据偏置指数与尾数字段分类

    Args:
        exponent: 偏置指数字段 (无符号整数)
        fraction: 尾数字段 (无符号整数, 不含隐含位)
        width: 32 或 64

    Returns:
        str: FloatClass 常量之一

    Raises:
        ValueError: 字段超出该格式的位宽
    """
    fmt = FloatFormat.validate(width)
    if not 0 <= exponent <= fmt.exponent_max:
        raise ValueError(
            f"Invalid exponent: {exponent}. "
            f"Expected 0..{fmt.exponent_max} for {fmt.width}-bit format"
        )
    if not 0 <= fraction <= fmt.fraction_mask:
        raise ValueError(
            f"Invalid fraction: {fraction:#x}. "
            f"Expected 0..{fmt.fraction_mask:#x} for {fmt.width}-bit format"
        )

    if exponent == 0:
        return FloatClass.ZERO if fraction == 0 else FloatClass.SUBNORMAL
    if exponent == fmt.exponent_max:
        return FloatClass.INFINITE if fraction == 0 else FloatClass.NAN
    return FloatClass.NORMAL
