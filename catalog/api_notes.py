"""REST and GraphQL notes."""
from __future__ import annotations

from core.models import GraphQLOperation, RestConstraint, RestMethod

REST_METHODS: tuple[RestMethod, ...] = (
    RestMethod(method="GET", crud="Read"),
    RestMethod(method="POST", crud="Create"),
    RestMethod(method="PUT", crud="Update/Replace"),
    RestMethod(method="PATCH", crud="Update/Modify"),
    RestMethod(method="DELETE", crud="Delete"),
)

REST_CONSTRAINTS: tuple[RestConstraint, ...] = (
    RestConstraint(
        name="Client-Server",
        description="Separates user-interface concerns from data-storage concerns so each side can evolve independently.",
    ),
    RestConstraint(
        name="Stateless",
        description="Each request carries all the information needed to process it; the server keeps no session state.",
    ),
    RestConstraint(
        name="Cacheable",
        description="Responses label themselves as cacheable or not so clients can reuse them.",
    ),
    RestConstraint(
        name="Uniform Interface",
        description="Resources are identified by URIs and manipulated through representations with self-descriptive messages.",
    ),
    RestConstraint(
        name="Layered System",
        description="A client cannot tell whether it is connected to the end server or an intermediary.",
    ),
    RestConstraint(
        name="Code on Demand (optional)",
        description="Servers can extend client functionality by sending executable code.",
    ),
)

GRAPHQL_CONCEPTS: tuple[GraphQLOperation, ...] = (
    GraphQLOperation(operation="Query", description="Reads data; the client names exactly the fields it needs."),
    GraphQLOperation(operation="Mutation", description="Writes data and returns the updated fields."),
    GraphQLOperation(operation="Subscription", description="Streams results to the client when the underlying data changes."),
    GraphQLOperation(operation="Schema", description="Strongly typed contract describing every type and field the API exposes."),
    GraphQLOperation(operation="Resolver", description="Function that produces the value for a single field."),
    GraphQLOperation(operation="Fragment", description="Reusable selection of fields shared between queries."),
)
