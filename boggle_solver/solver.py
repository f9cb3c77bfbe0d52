from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from boggle_solver.errors import InsufficientLettersError, InvalidBoardSizeError, MissingArgumentError

logger = logging.getLogger("boggle")

# (row, column) offsets: orthogonal first, then diagonal
DIRECTIONS = (
    (0, 1), (0, -1), (1, 0), (-1, 0),
    (1, 1), (-1, 1), (1, -1), (-1, -1),
)


class TrieNode:
    __slots__ = ("letter", "children", "is_word")

    def __init__(self, letter: str | None = None):
        self.letter = letter
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    """Prefix tree over the legal words, keyed by uppercase letters."""

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Trie:
        if words is None:
            raise MissingArgumentError("words must not be None")
        trie = cls()
        for word in words:
            trie.insert(word)
        return trie

    def insert(self, word: str):
        node = self.root
        for ch in word:
            key = ch.upper()
            if key not in node.children:
                node.children[key] = TrieNode(key)
            node = node.children[key]
        if not node.is_word:
            node.is_word = True
            self._size += 1

    @staticmethod
    def child(node: TrieNode, letter: str) -> TrieNode | None:
        return node.children.get(letter.upper())

    def find(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix:
            node = self.child(node, ch)
            if node is None:
                return None
        return node

    def has_prefix(self, prefix: str) -> bool:
        return self.find(prefix) is not None

    def __contains__(self, word: str) -> bool:
        node = self.find(word)
        return node is not None and node.is_word

    def __len__(self) -> int:
        return self._size


def load_words(path: str, min_length: int = 3) -> list[str]:
    words = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if len(word) >= min_length and word.isalpha():
                words.append(word)
    return words


def load_trie(path: str, min_length: int = 3) -> Trie:
    return Trie.from_words(load_words(path, min_length))


def rank_words(words: Iterable[str], max_results: int = 0) -> list[str]:
    """Longest first, then alphabetical. ``max_results <= 0`` means no cap."""
    result = sorted(words, key=lambda w: (-len(w), w))
    return result[:max_results] if max_results > 0 else result


def _descend(node: TrieNode, letter: str) -> tuple[str, TrieNode] | None:
    """Follow one board cell down the trie.

    Returns the text the cell adds to the word and the node reached, or None
    when no legal word continues through this cell. A Q cell is a "Qu" tile: it
    adds two letters and skips two levels of the trie.
    """
    child = Trie.child(node, letter)
    if child is None:
        return None
    if child.letter == "Q":
        child = child.children.get("U")
        if child is None:
            return None
        return "qu", child
    return letter.lower(), child


class Boggle:
    """Finds the legal words on letter boards.

    Call ``set_legal_words`` once, then ``solve_board`` for as many boards as
    needed. Each ``solve_board`` call keeps its own visited set and word
    buffer, so calls do not interfere with each other. Search depth grows with
    the number of cells, so boards must stay well below the interpreter's
    recursion limit.
    """

    def __init__(self):
        self._trie: Trie | None = None

    @property
    def trie(self) -> Trie | None:
        return self._trie

    def set_legal_words(self, words: Iterable[str]):
        """Replace the dictionary. Word order and letter case do not matter."""
        trie = Trie.from_words(words)
        self._trie = trie
        logger.info("Legal words set: %d words", len(trie))

    def solve_board(self, width: int, height: int, letters: Sequence[str]) -> set[str]:
        """Return every legal word that can be traced on the board.

        ``letters`` lists the cells row by row; anything past ``width * height``
        is ignored. Words come back lowercase. Before ``set_legal_words`` has
        been called this returns an empty set.
        """
        trie = self._trie
        if trie is None:
            logger.debug("No legal words set, nothing to solve")
            return set()

        if width <= 0 or height <= 0:
            raise InvalidBoardSizeError(f"Board dimensions must be positive, got {width}x{height}")
        if letters is None:
            raise MissingArgumentError("letters must not be None")
        if len(letters) < width * height:
            raise InsufficientLettersError(
                f"A {width}x{height} board needs {width * height} letters, got {len(letters)}"
            )

        found: set[str] = set()
        visited: set[tuple[int, int]] = set()
        path: list[str] = []

        def visit(row: int, col: int, node: TrieNode):
            step = _descend(node, letters[row * width + col])
            if step is None:
                return
            fragment, current = step

            visited.add((row, col))
            path.append(fragment)

            if current.is_word:
                found.add("".join(path))

            if current.children:
                for dr, dc in DIRECTIONS:
                    nr, nc = row + dr, col + dc
                    if 0 <= nr < height and 0 <= nc < width and (nr, nc) not in visited:
                        visit(nr, nc, current)

            path.pop()
            visited.remove((row, col))

        for row in range(height):
            for col in range(width):
                visit(row, col, trie.root)

        logger.debug("Solved %dx%d board: %d words", width, height, len(found))
        return found
