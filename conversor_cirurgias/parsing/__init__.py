"""
Parsing Module for the surgery export converter

- Sanitizer (malformed tag names, byte-order mark)
- Document tree and lookup helpers
- Surgery extractor
- Month grouping
- Pipeline orchestration
"""

# Configuration
from .config.layout import ExportLayout, DEFAULT_LAYOUT, load_layout

# Errors
from .exceptions import (
    ConversionError,
    ParseError,
    StructuralMismatchError,
    DateParseError,
    EmptyResultError,
)

# Core steps
from .sanitizer import sanitize_xml
from .tree import Node, parse_document, find_first_descendant_text
from .extractor import SurgeryExtractor
from .grouping import group_by_month, month_key

# Pipeline
from .pipeline import ConversionPipeline, ConversionResult

__all__ = [
    # Config
    'ExportLayout',
    'DEFAULT_LAYOUT',
    'load_layout',
    # Errors
    'ConversionError',
    'ParseError',
    'StructuralMismatchError',
    'DateParseError',
    'EmptyResultError',
    # Core
    'sanitize_xml',
    'Node',
    'parse_document',
    'find_first_descendant_text',
    'SurgeryExtractor',
    'group_by_month',
    'month_key',
    # Pipeline
    'ConversionPipeline',
    'ConversionResult',
]
