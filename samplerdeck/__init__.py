"""Building blocks for a five-slot sampler: sample slots, parameter smoothing and control-surface logic."""

__version__ = "1.0.0"