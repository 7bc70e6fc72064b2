"""Case-insensitive string-keyed mapping."""

import typing as t
from collections.abc import Mapping, MutableMapping

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

V = t.TypeVar("V")


class CaseInsensitiveDict(MutableMapping, t.Generic[V]):
    """Mapping whose keys compare without regard to case.

    ``"Food"`` and ``"FOOD"`` address the same entry. The spelling used the
    first time a key is stored is the one reported by iteration, and later
    writes under any spelling replace the value.

    The class can be used directly as a pydantic field type, e.g.
    ``CaseInsensitiveDict[int]``. Input is validated as ``dict[str, V]``
    and colliding keys collapse with the last value winning. Output is a
    plain ``dict``.
    """

    def __init__(
        self, data: Mapping[str, V] | t.Iterable[tuple[str, V]] | None = None
    ) -> None:
        self._store: t.Dict[str, tuple[str, V]] = {}
        if data is not None:
            self.update(data)

    @staticmethod
    def _normalize(key: object) -> str:
        if not isinstance(key, str):
            raise KeyError(key)
        return key.casefold()

    def __getitem__(self, key: str) -> V:
        return self._store[self._normalize(key)][1]

    def __setitem__(self, key: str, value: V) -> None:
        if not isinstance(key, str):
            raise TypeError(f"Keys must be strings, got {type(key).__name__}")
        normalized: str = self._normalize(key)
        existing = self._store.get(normalized)
        original: str = existing[0] if existing is not None else key
        self._store[normalized] = (original, value)

    def __delitem__(self, key: str) -> None:
        del self._store[self._normalize(key)]

    def __iter__(self) -> t.Iterator[str]:
        return (original for original, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._normalize(key) in self._store

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if not all(isinstance(key, str) for key in other):
            return False
        return dict(self._normalized_items()) == dict(
            CaseInsensitiveDict(other)._normalized_items()
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"

    def _normalized_items(self) -> t.Iterator[tuple[str, V]]:
        return ((key, value) for key, (_, value) in self._store.items())

    def copy(self) -> "CaseInsensitiveDict[V]":
        """Return a shallow copy keeping the stored key spellings."""
        return CaseInsensitiveDict(self.items())

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: t.Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        args: tuple[t.Any, ...] = t.get_args(source_type)
        value_type: t.Any = args[0] if args else t.Any
        dict_schema: CoreSchema = handler.generate_schema(
            t.Dict[str, value_type]  # type: ignore[valid-type]
        )

        return core_schema.no_info_after_validator_function(
            cls,
            dict_schema,
            serialization=core_schema.wrap_serializer_function_ser_schema(
                lambda value, serializer: serializer(dict(value.items())),
                info_arg=False,
                schema=dict_schema,
            ),
        )
