"""Programming concepts, grouped by theme."""
from __future__ import annotations

from core.models import Concept, ConceptGroups


def _group(*pairs: tuple[str, str]) -> tuple[Concept, ...]:
    return tuple(Concept(name=name, description=description) for name, description in pairs)


CONCEPTS = ConceptGroups(
    oop=_group(
        ("Encapsulation", "Bundling data with the methods that operate on it and hiding internal state behind an interface."),
        ("Abstraction", "Exposing only the essential behaviour of an object and hiding implementation details."),
        ("Inheritance", "Deriving a class from another to reuse and extend its behaviour."),
        ("Polymorphism", "Treating objects of different types through a common interface."),
    ),
    solid=_group(
        ("Single Responsibility", "A class should have one, and only one, reason to change."),
        ("Open/Closed", "Software entities should be open for extension but closed for modification."),
        ("Liskov Substitution", "Subtypes must be substitutable for their base types without altering correctness."),
        ("Interface Segregation", "Clients should not be forced to depend on methods they do not use."),
        ("Dependency Inversion", "Depend on abstractions, not on concrete implementations."),
    ),
    design=_group(
        ("Singleton", "Ensures a class has a single instance with a global access point."),
        ("Factory", "Delegates object creation to a method or class instead of calling constructors directly."),
        ("Observer", "Lets subscribers be notified automatically when a subject changes state."),
        ("Strategy", "Encapsulates interchangeable algorithms behind a common interface."),
        ("Decorator", "Wraps an object to add behaviour without changing its class."),
        ("Adapter", "Converts one interface into another that clients expect."),
    ),
    paradigms=_group(
        ("Imperative", "Describes computation as a sequence of statements that change program state."),
        ("Procedural", "Organises imperative code into reusable procedures."),
        ("Object-Oriented", "Models programs as interacting objects that combine state and behaviour."),
        ("Declarative", "Describes what result is wanted rather than how to compute it."),
        ("Functional", "Builds programs from pure functions and immutable data."),
        ("Event-Driven", "Flow of the program is determined by events such as user input or messages."),
    ),
    principles=_group(
        ("DRY", "Don't Repeat Yourself: every piece of knowledge should have a single representation."),
        ("KISS", "Keep It Simple, Stupid: prefer the simplest solution that works."),
        ("YAGNI", "You Aren't Gonna Need It: don't build functionality until it is required."),
        ("Separation of Concerns", "Divide a program into sections that each address a distinct concern."),
        ("Composition over Inheritance", "Prefer assembling behaviour from components over deep class hierarchies."),
        ("Law of Demeter", "A unit should only talk to its immediate collaborators."),
    ),
)
