# storegraph/resolvers/__init__.py
from __future__ import annotations

from . import checkout, profile
from .registry import MissingArgument, ResolverRegistry, UnknownResolver


def build_registry() -> ResolverRegistry:
    reg = ResolverRegistry()
    reg.register_type("Query", checkout.queries)
    reg.register_type("Mutation", checkout.mutations)
    for type_name, fields in {**checkout.field_resolvers, **profile.field_resolvers}.items():
        reg.register_type(type_name, fields)
    return reg


# built once at import; entries are immutable and hold no per-request state
registry = build_registry()

__all__ = ("MissingArgument", "ResolverRegistry", "UnknownResolver", "build_registry", "registry")
