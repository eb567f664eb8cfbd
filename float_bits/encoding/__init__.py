"""
Encoding components - Float <-> Bits <-> Pulse reinterpretation
"""
from .converters import (
    float_to_bits, bits_to_float,
    float32_to_bits, bits_to_float32,
    float64_to_bits, bits_to_float64,
    rational_to_bits, array_to_bits, tensor_to_bits,
    float_to_pulse, pulse_to_bits, pulse_to_float
)
from .field_decoder import TensorFieldDecoder, PulseFieldSplitter
