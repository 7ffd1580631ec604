"""Constants for filter design module."""

import math

import torch

# Butterworth filter Q factor (1/sqrt(2))
# This gives maximally flat passband response
Q_BUTTERWORTH: float = 1.0 / math.sqrt(2.0)  # 0.7071067811865476

# Butterworth Q at single and double precision
Q_BUTTERWORTH_F32 = torch.tensor(Q_BUTTERWORTH, dtype=torch.float32)
Q_BUTTERWORTH_F64 = torch.tensor(Q_BUTTERWORTH, dtype=torch.float64)

# Precisions the coefficient formulas are evaluated at
SUPPORTED_DTYPES: tuple[torch.dtype, ...] = (torch.float32, torch.float64)
