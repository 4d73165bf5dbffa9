# storegraph/resolvers/registry.py
"""
Resolver dispatch table.

Every schema field maps to one entry. Entries come in three kinds and
all share the same entry point, `execute(parent, args, context)`:

    direct       forwards (a subset of) args to one checkout client method
    derived      a plain function computing the value, sync or async
    declarative  an HTTP call described as data, compiled once (see http_resolver)

New operations are added by registering an entry, never by editing
the dispatcher.
"""
from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable, Callable, ClassVar, Dict, Iterator, List, Mapping, Optional, Tuple, Union

if TYPE_CHECKING:
    from ..context import ResolverContext

Handler = Callable[[Any, Dict[str, Any], "ResolverContext"], Any]


class Kind(str, Enum):
    DIRECT = "direct"
    DERIVED = "derived"
    DECLARATIVE = "declarative"


class UnknownResolver(KeyError):
    def __init__(self, type_name: str, field_name: str) -> None:
        super().__init__(f"{type_name}.{field_name}")
        self.type_name = type_name
        self.field_name = field_name

    def __str__(self) -> str:
        return f"no resolver registered for {self.type_name}.{self.field_name}"


class MissingArgument(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"missing argument: {self.name}"


def require(args: Dict[str, Any], name: str) -> Any:
    """Read a required schema argument."""
    try:
        return args[name]
    except KeyError:
        raise MissingArgument(name) from None


@dataclass(frozen=True)
class Direct:
    """
    Forward to `context.checkout.<operation>`.

    arg_names=None passes the whole args dict, () passes nothing, and a
    tuple of names passes those values positionally in that order. The
    result is returned untouched.
    """
    operation: str
    arg_names: Optional[Tuple[str, ...]] = ()
    kind: ClassVar[Kind] = Kind.DIRECT

    async def execute(self, parent: Any, args: Dict[str, Any], context: "ResolverContext") -> Any:
        method = getattr(context.checkout, self.operation)
        if self.arg_names is None:
            return await method(args)
        values = [require(args, name) for name in self.arg_names]
        return await method(*values)


@dataclass(frozen=True)
class Derived:
    fn: Handler
    kind: ClassVar[Kind] = Kind.DERIVED

    async def execute(self, parent: Any, args: Dict[str, Any], context: "ResolverContext") -> Any:
        result = self.fn(parent, args, context)
        if inspect.isawaitable(result):
            result = await result
        return result


@dataclass(frozen=True)
class Declarative:
    descriptor: Any
    handler: Callable[[Any, Dict[str, Any], "ResolverContext"], Awaitable[Any]]
    kind: ClassVar[Kind] = Kind.DECLARATIVE

    async def execute(self, parent: Any, args: Dict[str, Any], context: "ResolverContext") -> Any:
        return await self.handler(parent, args, context)


Entry = Union[Direct, Derived, Declarative]


def prop(key: str) -> Derived:
    """Field that reads one key off the parent object."""
    return Derived(lambda parent, args, context: parent.get(key))


class ResolverRegistry:
    def __init__(self) -> None:
        self._entries: Dict[Tuple[str, str], Entry] = {}

    def register(self, type_name: str, field_name: str, entry: Entry) -> "ResolverRegistry":
        key = (type_name, field_name)
        if key in self._entries:
            raise ValueError(f"resolver already registered for {type_name}.{field_name}")
        self._entries[key] = entry
        return self

    def register_type(self, type_name: str, fields: Mapping[str, Entry]) -> "ResolverRegistry":
        for field_name, entry in fields.items():
            self.register(type_name, field_name, entry)
        return self

    def get(self, type_name: str, field_name: str) -> Entry:
        try:
            return self._entries[(type_name, field_name)]
        except KeyError:
            raise UnknownResolver(type_name, field_name) from None

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def describe(self) -> List[Dict[str, str]]:
        return [
            {"name": f"{t}.{f}", "kind": entry.kind.value}
            for (t, f), entry in sorted(self._entries.items())
        ]

    async def execute(
        self,
        type_name: str,
        field_name: str,
        parent: Any,
        args: Optional[Dict[str, Any]],
        context: "ResolverContext",
    ) -> Any:
        entry = self.get(type_name, field_name)
        return await entry.execute(parent, args or {}, context)
