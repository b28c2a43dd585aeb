"""Case file loading."""

from .loader import load_case, load_case_file, load_default_case, read_case_data

__all__ = [
    "load_case",
    "load_case_file",
    "load_default_case",
    "read_case_data",
]
