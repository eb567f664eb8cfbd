"""
FloatBitScope - IEEE-754 binary32 / binary64 bit-field inspection
"""
from .core import FloatFormat, FloatLayout, FloatClass, classify
from .encoding import (
    float32_to_bits, bits_to_float32,
    float64_to_bits, bits_to_float64,
    float_to_pulse, pulse_to_bits, pulse_to_float,
    TensorFieldDecoder, PulseFieldSplitter
)
from .decoder import (
    FloatBits, compose, from_bits,
    decode, decode_float32, decode_float64, decode_array
)
from .presentation import format_bits, format_value, render, show

__version__ = '0.1.0'
