"""Equivalence registry: signatures already covered by the standard library."""

from typing import Iterator

from pydantic import BaseModel, ConfigDict, PrivateAttr

from .entity import Signature


class EquivalenceEntry(BaseModel):
    """A standard-library interface and the signature it provides."""

    model_config = ConfigDict(frozen=True)

    signature: Signature
    name: str

    @property
    def simple_name(self) -> str:
        return self.name.rsplit(".", 1)[-1]


class EquivalenceRegistry(BaseModel):
    """Immutable, signature-indexed list of standard-library interfaces.

    Populated once before a generation run. The registry never changes
    afterwards; build a new one instead.
    """

    model_config = ConfigDict(frozen=True)

    entries: tuple[EquivalenceEntry, ...] = ()

    _index: dict[Signature, EquivalenceEntry] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context) -> None:
        index: dict[Signature, EquivalenceEntry] = {}
        for entry in self.entries:
            existing = index.get(entry.signature)
            if existing is not None:
                raise ValueError(
                    f"duplicate signature {entry.signature} for {existing.name} and {entry.name}"
                )
            index[entry.signature] = entry
        self._index = index

    def lookup(self, signature: Signature) -> str | None:
        """Return the standard-library name for a signature, or None."""
        entry = self._index.get(signature)
        return entry.name if entry is not None else None

    @property
    def simple_names(self) -> frozenset[str]:
        return frozenset(entry.simple_name for entry in self.entries)

    def __contains__(self, signature: object) -> bool:
        return signature in self._index

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[EquivalenceEntry]:  # type: ignore[override]
        return iter(self.entries)
