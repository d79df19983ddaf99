"""The Zen of Python, dunder methods and assorted Python notes."""
from __future__ import annotations

from core.models import Concept, PythonDunder

# PEP 20
PYTHON_ZEN: tuple[str, ...] = (
    "Beautiful is better than ugly.",
    "Explicit is better than implicit.",
    "Simple is better than complex.",
    "Complex is better than complicated.",
    "Flat is better than nested.",
    "Sparse is better than dense.",
    "Readability counts.",
    "Special cases aren't special enough to break the rules.",
    "Although practicality beats purity.",
    "Errors should never pass silently.",
    "Unless explicitly silenced.",
    "In the face of ambiguity, refuse the temptation to guess.",
    "There should be one-- and preferably only one --obvious way to do it.",
    "Although that way may not be obvious at first unless you're Dutch.",
    "Now is better than never.",
    "Although never is often better than *right* now.",
    "If the implementation is hard to explain, it's a bad idea.",
    "If the implementation is easy to explain, it may be a good idea.",
    "Namespaces are one honking great idea -- let's do more of those!",
)

PYTHON_MAGIC_METHODS: tuple[PythonDunder, ...] = (
    PythonDunder(name="__init__(self, ...)", description="Initializes a newly created instance."),
    PythonDunder(name="__new__(cls, ...)", description="Creates and returns a new instance before __init__ runs."),
    PythonDunder(name="__repr__(self)", description="Unambiguous string representation, ideally valid Python to recreate the object."),
    PythonDunder(name="__str__(self)", description="Readable string representation used by str() and print()."),
    PythonDunder(name="__len__(self)", description="Returns the number of items; called by len()."),
    PythonDunder(name="__getitem__(self, key)", description="Implements indexing with self[key]."),
    PythonDunder(name="__setitem__(self, key, value)", description="Implements assignment with self[key] = value."),
    PythonDunder(name="__delitem__(self, key)", description="Implements deletion with del self[key]."),
    PythonDunder(name="__iter__(self)", description="Returns an iterator over the object."),
    PythonDunder(name="__next__(self)", description="Returns the next item from an iterator or raises StopIteration."),
    PythonDunder(name="__contains__(self, item)", description="Implements membership tests with the in operator."),
    PythonDunder(name="__eq__(self, other)", description="Implements equality with ==."),
    PythonDunder(name="__lt__(self, other)", description="Implements ordering with <; used by sorted()."),
    PythonDunder(name="__hash__(self)", description="Returns an integer hash so the object can be a dict key or set member."),
    PythonDunder(name="__call__(self, ...)", description="Makes instances callable like functions."),
    PythonDunder(name="__enter__(self)", description="Entered at the start of a with block."),
    PythonDunder(name="__exit__(self, exc_type, exc, tb)", description="Runs at the end of a with block, even on error."),
    PythonDunder(name="__add__(self, other)", description="Implements addition with +."),
)

PYTHON_USEFUL_NOTES: tuple[Concept, ...] = (
    Concept(name="Mutable default arguments", description="Default values are evaluated once at definition time; use None and create the object inside the function."),
    Concept(name="is vs ==", description="is compares identity, == compares value; use is only for singletons like None."),
    Concept(name="List comprehensions", description="[expr for x in iterable if cond] builds a list in one readable expression."),
    Concept(name="Generators", description="Functions that yield values lazily, keeping memory usage constant for large sequences."),
    Concept(name="Unpacking", description="a, *rest = items splits sequences; ** merges mappings into keyword arguments."),
    Concept(name="Context managers", description="with blocks guarantee cleanup of files, locks and connections."),
    Concept(name="Slicing", description="seq[start:stop:step] returns a new sequence; seq[::-1] reverses it."),
    Concept(name="dict.get", description="d.get(key, default) avoids KeyError when a key may be missing."),
)
