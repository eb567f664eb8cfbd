"""
文本输出 (Presentation)
=======================

float = 5
bits  = 0 10000001 01000000000000000000000
sign  = 0
exp   = 0x81 (129)
frac  = 0x200000 (2097152)

位串在符号位之后, 指数字段之后各插入一个空格。

作者: FloatBitScope Project
"""
import math

from float_bits.core.float_format import FloatFormat


def format_bits(raw, width, sep=' '):
    """位模式 -> MSB 在前的二进制串, 按 [S | E | M] 分隔"""
    fmt = FloatFormat.validate(width)
    digits = format(raw, f'0{fmt.width}b')
    e_end = 1 + fmt.exponent_bits
    return sep.join((digits[:1], digits[1:e_end], digits[e_end:]))


def format_value(value, width):
    """足够位数的十进制近似 (%.9g / %.17g), 可唯一确定位模式"""
    fmt = FloatFormat.validate(width)
    if math.isnan(value) and math.copysign(1.0, value) < 0:
        return '-nan'
    return '%.*g' % (fmt.decimal_digits, value)


def render(fb, classify=False):
    """将 FloatBits 渲染为多行文本"""
    fmt = fb.format
    # 标签按最长的格式名左对齐
    pad = len(fmt.name)
    rows = [
        (fmt.name, format_value(fb.value, fmt)),
        ('bits', format_bits(fb.raw, fmt)),
        ('sign', str(fb.sign)),
        ('exp', f"0x{fb.exponent:0{fmt.exponent_hex_digits}X} ({fb.exponent})"),
        ('frac', f"0x{fb.fraction:0{fmt.fraction_hex_digits}X} ({fb.fraction})"),
    ]
    if classify:
        rows.append(('class', fb.classification))
    return '\n'.join(f"{label:<{pad}} = {text}" for label, text in rows)


def show(fb, classify=False):
    print(render(fb, classify=classify))
