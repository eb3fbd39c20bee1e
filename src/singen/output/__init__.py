from .formatters import (
    OutputFormat,
    array_name,
    format_c_array,
    format_hex,
    format_info,
    format_rust_array,
)

__all__ = [
    "OutputFormat",
    "array_name",
    "format_c_array",
    "format_hex",
    "format_info",
    "format_rust_array",
]
