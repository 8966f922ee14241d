"""Classic algorithms and data structures: sorting, searching, subarrays, matrices, DFT, complex numbers and logic circuits."""

__version__ = "0.1.0"

__all__ = [
    "circuits",
    "complex",
    "gates",
    "matrix",
    "numeric",
    "search",
    "sort",
    "structures",
    "subarray",
]