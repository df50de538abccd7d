"""Engine - Pure reorder and projection functions"""

from .ordered_list import reorder, is_permutation
from .code_projector import to_snippet, to_document

__all__ = ["reorder", "is_permutation", "to_snippet", "to_document"]
