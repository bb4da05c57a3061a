"""Python package for generating .ninja files.

Statements are formatted into an in-memory buffer and only written to
disk when Writer.close() is called.
"""
import logging

from ninja_writer.build import Build
from ninja_writer.escape import as_list, escape, escape_path
from ninja_writer.rule import Rule
from ninja_writer.writer import DEFAULT_WIDTH, Writer, wrap

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Build',
    'DEFAULT_WIDTH',
    'Rule',
    'Writer',
    'as_list',
    'escape',
    'escape_path',
    'wrap',
]
