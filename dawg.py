# dawg.py
# Prefix dictionary over Unicode code points. Plain trie for now: suffix
# subtrees are not merged yet, see compact().

from typing import Dict, Iterable, List, Optional, Tuple


class UnsupportedOperationError(NotImplementedError):
    """Raised by DAWG operations that are declared but not implemented yet."""

    def __init__(self, operation: str):
        super().__init__(f"DAWG.{operation} is not supported yet")
        self.operation = operation


class DAWG:
    """
    Prefix dictionary with the API we want:
      - DAWG.build(words) -> DAWG
      - insert(word)
      - contains(word) -> bool   (also ``word in dawg``)
      - has_prefix(prefix) -> bool
      - prefixes(word) -> List[str], shortest first
      - iter_extensions(prefix) -> Iterable[(char, is_terminal)]
    Internals:
      nodes: List[{'term': bool, 'edges': Dict[str, int]}]
      node 0 is the root. Every child index sits under exactly one edge.
    """

    __slots__ = ("_nodes", "_size")

    def __init__(self, words: Optional[Iterable[str]] = None):
        # nodes[i] = {'term': bool, 'edges': {code_point: child_index}}
        self._nodes: List[Dict] = [{"term": False, "edges": {}}]
        self._size = 0
        if words is not None:
            for w in words:
                self.insert(w)

    # ---------- Public API ----------
    @classmethod
    def build(cls, words: Iterable[str]) -> "DAWG":
        """
        Build a dictionary from the given words, inserted in order.
        Duplicates and the empty string are accepted.
        """
        return cls(words)

    def insert(self, word: str) -> None:
        """Add ``word``; inserting "" marks the root as terminal."""
        if not isinstance(word, str):
            raise TypeError(f"DAWG words must be str, not {type(word).__name__}")
        nodes = self._nodes
        cur = 0
        edges = nodes[cur]["edges"]
        for ch in word:
            nxt = edges.get(ch)
            if nxt is None:
                nodes.append({"term": False, "edges": {}})
                nxt = len(nodes) - 1
                edges[ch] = nxt
            cur = nxt
            edges = nodes[cur]["edges"]
        if not nodes[cur]["term"]:
            nodes[cur]["term"] = True
            self._size += 1

    def contains(self, word: str) -> bool:
        """True if ``word`` was inserted (a stored prefix alone is not enough)."""
        idx = self._walk(word)
        return (idx is not None) and bool(self._nodes[idx]["term"])

    def has_prefix(self, prefix: str) -> bool:
        """True if ``prefix`` is a path from the root (empty string always is)."""
        return self._walk(prefix) is not None

    def prefixes(self, word: str) -> List[str]:
        """
        Return the stored words that are prefixes of ``word``, shortest first.

        Matching stops at the first code point with no edge. The empty
        prefix is never reported, so prefixes("") is always [] even when ""
        itself was inserted.
        """
        res: List[str] = []
        nodes = self._nodes
        idx = 0
        for i, ch in enumerate(word):
            nxt = nodes[idx]["edges"].get(ch)
            if nxt is None:
                break
            idx = nxt
            if nodes[idx]["term"]:
                res.append(word[:i + 1])
        return res

    def iter_extensions(self, prefix: str) -> Iterable[Tuple[str, bool]]:
        """
        Yield (next_char, is_terminal_after_appending_char) for all single
        code point continuations of 'prefix', in code point order. If prefix
        isn't present, yields nothing.
        """
        idx = self._walk(prefix)
        if idx is None:
            return
        edges: Dict[str, int] = self._nodes[idx]["edges"]
        for ch in sorted(edges):
            yield ch, bool(self._nodes[edges[ch]]["term"])

    def words(self) -> List[str]:
        """All stored words in code point order."""
        out: List[str] = []
        nodes = self._nodes
        # (node index, prefix); children pushed in reverse to pop in order
        stack = [(0, "")]
        while stack:
            idx, prefix = stack.pop()
            node = nodes[idx]
            if node["term"]:
                out.append(prefix)
            for ch in sorted(node["edges"], reverse=True):
                stack.append((node["edges"][ch], prefix + ch))
        return out

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    # ---------- Not implemented yet ----------
    def iter_prefixes(self, word: str):
        """Lazily yield the stored prefixes of ``word``. Not implemented yet."""
        raise UnsupportedOperationError("iter_prefixes")

    def compact(self) -> int:
        """Merge identical suffix subtrees and return the number of trimmed
        branches. Not implemented yet."""
        raise UnsupportedOperationError("compact")

    # ---------- Dunder ----------
    def __contains__(self, word) -> bool:
        if not isinstance(word, str):
            return False
        return self.contains(word)

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other):
        if not isinstance(other, DAWG):
            return NotImplemented
        return _nodes_equal(self._nodes, 0, other._nodes, 0)

    __hash__ = None

    def __repr__(self) -> str:
        return f"DAWG({_node_repr(self._nodes, 0)})"

    # ---------- Helpers ----------
    def _walk(self, s: str) -> Optional[int]:
        """Return node index after consuming s, or None if no such path."""
        idx = 0
        nodes = self._nodes
        for ch in s:
            edges: Dict[str, int] = nodes[idx]["edges"]
            nxt = edges.get(ch)
            if nxt is None:
                return None
            idx = nxt
        return idx


def _nodes_equal(xs: List[Dict], x: int, ys: List[Dict], y: int) -> bool:
    # Compare by structure only; indices differ with insertion order.
    stack = [(x, y)]
    while stack:
        i, j = stack.pop()
        a, b = xs[i], ys[j]
        if a["term"] != b["term"]:
            return False
        if a["edges"].keys() != b["edges"].keys():
            return False
        for ch, child in a["edges"].items():
            stack.append((child, b["edges"][ch]))
    return True


def _node_repr(nodes: List[Dict], idx: int) -> str:
    out: List[str] = []
    # Entries are node indices still to render, or literal text to emit.
    stack: List = [idx]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
            continue
        node = nodes[item]
        edges = node["edges"]
        out.append("node(")
        if node["term"]:
            out.append("term=True")
        if not edges:
            out.append(")")
            continue
        if node["term"]:
            out.append(", ")
        seq: List = ["edges={"]
        for n, ch in enumerate(sorted(edges)):
            if n:
                seq.append(", ")
            seq.append(f"{ch!r}: ")
            seq.append(edges[ch])
        seq.append("})")
        stack.extend(reversed(seq))
    return "".join(out)
