"""Pattern models describing what to pull out of a nested value.

A pattern is an immutable tree:

- :class:`Name` binds the value it meets (after default substitution)
- :class:`Hole` skips a sequence position
- :class:`SeqPattern` matches a sequence position by position, with an
  optional rest binding
- :class:`MapPattern` matches a mapping key by key through :class:`Entry`
  items, with an optional rest binding

Patterns can also be loaded from plain dicts (``SeqPattern.model_validate``)
thanks to the ``kind`` discriminator.
"""
from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .sentinel import ABSENT


def _check_identifier(value: str) -> str:
    if not value.isidentifier():
        raise ValueError(f"binding name must be an identifier, got {value!r}")
    return value


def _check_unique(names: list[str]) -> None:
    seen: set[str] = set()
    for n in names:
        if n in seen:
            raise ValueError(f"binding name {n!r} appears more than once")
        seen.add(n)


class Name(BaseModel):
    """Leaf binding, optionally with a default for the absent case."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["name"] = "name"
    name: str
    default: Any = ABSENT

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_identifier(v)

    def binding_names(self) -> list[str]:
        return [self.name]


class Hole(BaseModel):
    """A skipped sequence position."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["hole"] = "hole"

    def binding_names(self) -> list[str]:
        return []


Element = Annotated[
    Union[Name, Hole, "SeqPattern", "MapPattern"], Field(discriminator="kind")
]
Target = Annotated[Union[Name, "SeqPattern", "MapPattern"], Field(discriminator="kind")]


class Entry(BaseModel):
    """One key of a :class:`MapPattern`.

    Without a target the entry binds a :class:`Name` equal to the key.
    A :class:`Name` target renames the binding; a nested pattern descends.
    """

    model_config = ConfigDict(frozen=True)

    key: str | int
    target: Target | None = None

    @model_validator(mode="after")
    def validate_shorthand(self) -> "Entry":
        if self.target is None:
            if not isinstance(self.key, str):
                raise ValueError(f"key {self.key!r} needs an explicit target")
            _check_identifier(self.key)
        return self

    @property
    def resolved_target(self) -> Name | SeqPattern | MapPattern:
        if self.target is None:
            return Name(name=self.key)
        return self.target

    def binding_names(self) -> list[str]:
        return self.resolved_target.binding_names()


class SeqPattern(BaseModel):
    """Positional pattern over a sequence."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["seq"] = "seq"
    elements: tuple[Element, ...] = ()
    rest: str | None = Field(default=None, description="Collects remaining elements")
    default: Any = Field(default=ABSENT, description="Used when the whole value is absent")

    @field_validator("rest")
    @classmethod
    def validate_rest(cls, v: str | None) -> str | None:
        return v if v is None else _check_identifier(v)

    @model_validator(mode="after")
    def validate_bindings(self) -> "SeqPattern":
        _check_unique(self.binding_names())
        return self

    def binding_names(self) -> list[str]:
        names = [n for element in self.elements for n in element.binding_names()]
        if self.rest is not None:
            names.append(self.rest)
        return names


class MapPattern(BaseModel):
    """Key-based pattern over a mapping."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["map"] = "map"
    entries: tuple[Entry, ...] = ()
    rest: str | None = Field(default=None, description="Collects keys not named by an entry")
    default: Any = Field(default=ABSENT, description="Used when the whole value is absent")

    @field_validator("rest")
    @classmethod
    def validate_rest(cls, v: str | None) -> str | None:
        return v if v is None else _check_identifier(v)

    @model_validator(mode="after")
    def validate_bindings(self) -> "MapPattern":
        keys = [entry.key for entry in self.entries]
        if len(set(keys)) != len(keys):
            raise ValueError("a key may only be destructured once per mapping pattern")
        _check_unique(self.binding_names())
        return self

    def binding_names(self) -> list[str]:
        names = [n for entry in self.entries for n in entry.binding_names()]
        if self.rest is not None:
            names.append(self.rest)
        return names


Entry.model_rebuild()
SeqPattern.model_rebuild()
MapPattern.model_rebuild()

Pattern = Union[Name, SeqPattern, MapPattern]


# ------------------------ Builders ------------------------


def name(binding: str, default: Any = ABSENT) -> Name:
    return Name(name=binding, default=default)


def hole() -> Hole:
    return Hole()


def seq(*elements: Any, rest: str | None = None, default: Any = ABSENT) -> SeqPattern:
    """Build a :class:`SeqPattern`.

    Strings become :class:`Name` bindings and ``None`` becomes a
    :class:`Hole`, so ``seq("first", None, None, "last")`` reads like the
    positions it matches.
    """
    items = []
    for element in elements:
        if element is None:
            items.append(Hole())
        elif isinstance(element, str):
            items.append(Name(name=element))
        else:
            items.append(element)
    return SeqPattern(elements=tuple(items), rest=rest, default=default)


def obj(*entries: Any, rest: str | None = None, default: Any = ABSENT) -> MapPattern:
    """Build a :class:`MapPattern`; plain strings become shorthand entries."""
    items = [Entry(key=e) if isinstance(e, str) else e for e in entries]
    return MapPattern(entries=tuple(items), rest=rest, default=default)


def key(
    source_key: str | int,
    target: Name | SeqPattern | MapPattern | None = None,
    *,
    as_: str | None = None,
    default: Any = ABSENT,
) -> Entry:
    """Build an :class:`Entry`.

    ``key("location", default="Unknown")`` binds ``location``;
    ``key("name", as_="authorName")`` renames; ``key("details", obj(...),
    default={})`` descends and falls back to ``{}`` when ``details`` is absent.
    """
    if target is None:
        if as_ is None and default is ABSENT:
            return Entry(key=source_key)
        return Entry(key=source_key, target=Name(name=as_ or source_key, default=default))
    if as_ is not None:
        raise ValueError("as_ only applies to entries without a nested target")
    if default is not ABSENT:
        target = target.model_copy(update={"default": default})
    return Entry(key=source_key, target=target)
