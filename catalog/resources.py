"""Curated external references."""
from __future__ import annotations

from core.models import Resource

RESOURCES: tuple[Resource, ...] = (
    Resource(name="Cracking the Coding Interview", url="https://www.crackingthecodinginterview.com/"),
    Resource(name="Big-O Cheat-Sheet", url="https://www.bigocheatsheet.com/"),
    Resource(name="Python: PEP-8", url="https://peps.python.org/pep-0008"),
    Resource(name="Python: PEP-20", url="https://peps.python.org/pep-0020"),
    Resource(name="Python: PEP-484", url="https://peps.python.org/pep-0484/"),
    Resource(name="Python: Heap", url="https://docs.python.org/3/library/heapq.html#module-heapq"),
    Resource(name="Python: Binary Search & Insertion", url="https://docs.python.org/3/library/bisect.html#module-bisect"),
    Resource(name="Python: Specialized Container Data-Types", url="https://docs.python.org/3/library/collections.html#module-collections"),
    Resource(name="Python: Queue FIFO & Stack LIFO", url="https://docs.python.org/3/library/queue.html#module-queue"),
    Resource(name="Python: Deque (Queue + Stack)", url="https://docs.python.org/3/library/collections.html#collections.deque"),
    Resource(name="Python: Built-in", url="https://docs.python.org/3/library/functions.html"),
    Resource(name="Python: Functools", url="https://docs.python.org/3/library/functools.html"),
    Resource(name="Python: Collections", url="https://docs.python.org/3/library/collections.html"),
    Resource(name="Python: Itertools", url="https://docs.python.org/3/library/itertools.html"),
    Resource(name="Python: Random", url="https://docs.python.org/3/library/random.html"),
    Resource(name="Python: Math", url="https://docs.python.org/3/library/math.html"),
)
