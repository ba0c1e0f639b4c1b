"""Space-and-tab tokenizer prompt with numbered history, and a tree-based argument sorter."""

__version__ = "0.1.0"
__all__ = ["bst", "history", "sortargs", "tokenizer", "uimain"]