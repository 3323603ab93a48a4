"""
CSS values and declaration blocks.
"""

from .length import Length, to_length
from .declarations import AtRule, Comment, Declaration, DeclarationBlock, StyleRule, Stylesheet

__all__ = [
    'Length', 'to_length',
    'AtRule', 'Comment', 'Declaration', 'DeclarationBlock', 'StyleRule', 'Stylesheet'
]
