from .core import (
    MetadataBlockError,
    convert_file,
    convert_text,
    read_source_text,
    replace_accents,
    replace_hdrs,
    replace_jis,
    replace_page_breaks,
    replace_ruby,
    trim_info,
)
from .formats import FORMATS, OutputFormat, UnknownFormatError, get_output_format

__all__ = [
    "FORMATS",
    "OutputFormat",
    "UnknownFormatError",
    "get_output_format",
    "MetadataBlockError",
    "convert_file",
    "convert_text",
    "read_source_text",
    "replace_jis",
    "replace_ruby",
    "replace_accents",
    "replace_hdrs",
    "replace_page_breaks",
    "trim_info",
]
