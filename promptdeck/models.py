from types import MappingProxyType
from typing import Annotated, Any, Literal, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class LiteralSegment(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["literal"] = "literal"
    text: str


class PlaceholderSegment(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["placeholder"] = "placeholder"
    name: str = Field(..., min_length=1)


Segment = Annotated[Union[LiteralSegment, PlaceholderSegment], Field(discriminator="kind")]


class Placeholder(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1)
    description: str = ""
    type: Literal["string"] = "string"


class Template(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    description: str = ""
    segments: Tuple[Segment, ...]
    placeholders: Tuple[Placeholder, ...]
    required_sections: Tuple[str, ...] = ()

    @model_validator(mode="after")
    def validate_declarations(self) -> "Template":
        declared = [placeholder.name for placeholder in self.placeholders]
        if len(declared) != len(set(declared)):
            raise ValueError(f"template '{self.id}' declares a placeholder twice")

        referenced = set(self.referenced_placeholders)
        undeclared = sorted(referenced - set(declared))
        if undeclared:
            raise ValueError(f"template '{self.id}' references undeclared placeholders: {undeclared}")
        unused = sorted(set(declared) - referenced)
        if unused:
            raise ValueError(f"template '{self.id}' declares unused placeholders: {unused}")

        literal_text = "".join(
            segment.text for segment in self.segments if isinstance(segment, LiteralSegment)
        )
        absent = [section for section in self.required_sections if section not in literal_text]
        if absent:
            raise ValueError(f"template '{self.id}' lacks required sections: {absent}")
        return self

    @property
    def referenced_placeholders(self) -> list[str]:
        names: list[str] = []
        for segment in self.segments:
            if isinstance(segment, PlaceholderSegment) and segment.name not in names:
                names.append(segment.name)
        return names

    @classmethod
    def from_body(
        cls,
        id: str,
        title: str,
        body: str,
        placeholders: list[Placeholder],
        required_sections: list[str] | None = None,
        description: str = "",
    ) -> "Template":
        from .parsing import parse_template

        return cls(
            id=id,
            title=title,
            description=description,
            segments=parse_template(body),
            placeholders=tuple(placeholders),
            required_sections=tuple(required_sections or ()),
        )


class RenderedDocument(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    template_id: str
    text: str
    value_items: Tuple[Tuple[str, str], ...] = ()

    @model_validator(mode="before")
    @classmethod
    def pack_values(cls, data: Any) -> Any:
        if isinstance(data, dict) and "values" in data:
            data = dict(data)
            data["value_items"] = tuple(data.pop("values").items())
        return data

    @property
    def values(self) -> Mapping[str, str]:
        return MappingProxyType(dict(self.value_items))

    def __str__(self) -> str:
        return self.text


class MappingTable(BaseModel):
    """Fixed, ordered key/value table embedded into a template body."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1)
    key_header: str
    value_header: str
    entries: Tuple[Tuple[str, str], ...]

    @field_validator("entries")
    @classmethod
    def validate_unique_keys(cls, entries: Tuple[Tuple[str, str], ...]) -> Tuple[Tuple[str, str], ...]:
        seen: set[str] = set()
        for key, _ in entries:
            if key in seen:
                raise ValueError(f"duplicate key: {key}")
            seen.add(key)
        return entries

    def __getitem__(self, key: str) -> str:
        for entry_key, value in self.entries:
            if entry_key == key:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return any(entry_key == key for entry_key, _ in self.entries)

    def get(self, key: str, default: str | None = None) -> str | None:
        try:
            return self[key]
        except KeyError:
            return default

    def keys(self) -> list[str]:
        return [key for key, _ in self.entries]

    def items(self) -> list[tuple[str, str]]:
        return list(self.entries)

    def as_dict(self) -> dict[str, str]:
        return dict(self.entries)

    def to_markdown(self) -> str:
        rows = [
            f"| {self.key_header} | {self.value_header} |",
            "|---|---|",
        ]
        rows.extend(f"| `{key}` | `{value}` |" for key, value in self.entries)
        return "\n".join(rows)
