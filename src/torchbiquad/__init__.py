"""torchbiquad: biquad filter coefficient design for PyTorch."""

from . import filter_design

__all__ = [
    "filter_design",
]

__version__ = "0.1.0"
