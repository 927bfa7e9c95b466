from .chunk import batch_blocks
from .text_split import split_string

__all__ = [
    "batch_blocks",
    "split_string",
]
