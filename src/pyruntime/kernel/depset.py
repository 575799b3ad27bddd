"""DepSet: immutable, structurally shared set of artifacts in stable order.

A DepSet holds a tuple of direct members and a tuple of transitive child
DepSets. Children are referenced, never copied, so a large closure (e.g. a
coverage tool's runfiles) can be shared by many descriptors at no cost.

Iteration order is stable (postorder): each transitive child is expanded left
to right, then the direct members follow. Duplicates are collapsed on first
occurrence.
"""

from typing import Any, Iterable, Iterator, List, Optional, Tuple

from pydantic_core import core_schema

from .artifacts import Artifact


class DepSet:
    """Immutable ordered set built from direct items and transitive DepSets."""

    __slots__ = ("_direct", "_transitive", "_flat")

    def __init__(
        self,
        direct: Iterable[Artifact] = (),
        transitive: Iterable["DepSet"] = (),
    ):
        # Empty children carry nothing; dropping them keeps the structure shallow.
        self._direct: Tuple[Artifact, ...] = tuple(direct)
        self._transitive: Tuple["DepSet", ...] = tuple(t for t in transitive if not t.is_empty())
        self._flat: Optional[Tuple[Artifact, ...]] = None

    @classmethod
    def of(cls, items: Iterable[Artifact]) -> "DepSet":
        """Build a DepSet with only direct members."""
        return cls(direct=items)

    @classmethod
    def empty(cls) -> "DepSet":
        return cls()

    @property
    def direct(self) -> Tuple[Artifact, ...]:
        return self._direct

    @property
    def transitive(self) -> Tuple["DepSet", ...]:
        return self._transitive

    def is_empty(self) -> bool:
        return not self._direct and not self._transitive

    def to_list(self) -> List[Artifact]:
        """Flatten in stable order (memoized on first call)."""
        if self._flat is None:
            self._flat = self._expand()
        return list(self._flat)

    def _expand(self) -> Tuple[Artifact, ...]:
        seen_items = set()
        seen_nodes = set()
        result: List[Artifact] = []

        # Iterative postorder walk; a shared child is expanded once.
        stack: List[Tuple["DepSet", int]] = [(self, 0)]
        while stack:
            node, child_index = stack.pop()
            if child_index < len(node._transitive):
                stack.append((node, child_index + 1))
                child = node._transitive[child_index]
                if id(child) not in seen_nodes:
                    seen_nodes.add(id(child))
                    stack.append((child, 0))
                continue
            for item in node._direct:
                if item not in seen_items:
                    seen_items.add(item)
                    result.append(item)
        return tuple(result)

    def is_singleton(self) -> bool:
        """True if the set holds exactly one distinct item."""
        return len(self.to_list()) == 1

    def get_singleton(self) -> Artifact:
        items = self.to_list()
        if len(items) != 1:
            raise ValueError(f"DepSet has {len(items)} items, expected exactly one")
        return items[0]

    def __iter__(self) -> Iterator[Artifact]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return len(self.to_list())

    def __contains__(self, item: object) -> bool:
        return item in self.to_list()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DepSet):
            return NotImplemented
        return self is other or self.to_list() == other.to_list()

    def __hash__(self) -> int:
        return hash(tuple(self.to_list()))

    def __repr__(self) -> str:
        return f"DepSet({[a.exec_path for a in self.to_list()]!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        """Validate from a list of artifacts (or exec path strings); dump as a flat list."""
        from_list = core_schema.no_info_after_validator_function(
            cls.of,
            handler.generate_schema(List[Artifact]),
        )
        return core_schema.json_or_python_schema(
            json_schema=from_list,
            python_schema=core_schema.union_schema([
                core_schema.is_instance_schema(cls),
                from_list,
            ]),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda depset: [a.exec_path for a in depset.to_list()]
            ),
        )


class DepSetBuilder:
    """Accumulates direct items and transitive children for one DepSet."""

    def __init__(self):
        self._direct: List[Artifact] = []
        self._transitive: List[DepSet] = []

    def add(self, item: Artifact) -> "DepSetBuilder":
        self._direct.append(item)
        return self

    def add_all(self, items: Iterable[Artifact]) -> "DepSetBuilder":
        self._direct.extend(items)
        return self

    def add_transitive(self, depset: DepSet) -> "DepSetBuilder":
        self._transitive.append(depset)
        return self

    def build(self) -> DepSet:
        return DepSet(direct=self._direct, transitive=self._transitive)
