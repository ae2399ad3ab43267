"""Parsing of color specs from strings and structured input."""

from color_engine.codec.spec_parser import (
    HslSpec,
    RgbSpec,
    StructuredSpec,
    Unrecognized,
    classify,
    parse,
    parse_string,
    parse_strict,
)

__all__ = [
    "parse",
    "parse_string",
    "parse_strict",
    "classify",
    "RgbSpec",
    "HslSpec",
    "Unrecognized",
    "StructuredSpec",
]
