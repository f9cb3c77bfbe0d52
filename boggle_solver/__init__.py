from boggle_solver.errors import (
    BoggleError,
    InsufficientLettersError,
    InvalidBoardSizeError,
    MissingArgumentError,
)
from boggle_solver.solver import Boggle, Trie, TrieNode, load_trie, load_words, rank_words

__all__ = [
    "Boggle",
    "BoggleError",
    "InsufficientLettersError",
    "InvalidBoardSizeError",
    "MissingArgumentError",
    "Trie",
    "TrieNode",
    "load_trie",
    "load_words",
    "rank_words",
]
