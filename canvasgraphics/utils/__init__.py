from .num_utils import (
    rationalize,
    rationalize_hue,
    rationalize_percentage,
    np_rationalize,
    validate_real,
)

__all__ = [
    'rationalize',
    'rationalize_hue',
    'rationalize_percentage',
    'np_rationalize',
    'validate_real',
]
