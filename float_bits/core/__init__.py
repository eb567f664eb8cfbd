"""
Core layout components - Format table and field classification
"""
from .float_format import FloatFormat, FloatLayout
from .classification import FloatClass, classify
