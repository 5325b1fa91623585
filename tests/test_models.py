"""Unit tests for template, document and mapping models."""

import pytest
from pydantic import ValidationError

from promptdeck.models import (
    LiteralSegment,
    MappingTable,
    Placeholder,
    PlaceholderSegment,
    RenderedDocument,
    Template,
)


def _greeting(**overrides) -> Template:
    params = {
        "id": "greeting",
        "title": "Greeting",
        "body": "# Hello\n\nDear {Name}, from {Sender}. Regards, {Name}.",
        "placeholders": [Placeholder(name="Name"), Placeholder(name="Sender")],
        "required_sections": ["# Hello"],
    }
    params.update(overrides)
    return Template.from_body(**params)


class TestTemplate:
    """Tests for Template construction and invariants."""

    def test_from_body_builds_segments(self):
        template = _greeting()

        assert template.segments[0] == LiteralSegment(text="# Hello\n\nDear ")
        assert template.segments[1] == PlaceholderSegment(name="Name")
        assert template.required_sections == ("# Hello",)

    def test_referenced_placeholders_in_first_use_order(self):
        assert _greeting().referenced_placeholders == ["Name", "Sender"]

    def test_undeclared_placeholder_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            _greeting(placeholders=[Placeholder(name="Name")])

        assert "undeclared" in str(exc_info.value)

    def test_unused_declaration_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            _greeting(
                placeholders=[
                    Placeholder(name="Name"),
                    Placeholder(name="Sender"),
                    Placeholder(name="Extra"),
                ]
            )

        assert "unused" in str(exc_info.value)

    def test_duplicate_declaration_rejected(self):
        with pytest.raises(ValidationError):
            _greeting(
                placeholders=[
                    Placeholder(name="Name"),
                    Placeholder(name="Name"),
                    Placeholder(name="Sender"),
                ]
            )

    def test_required_section_must_be_literal_text(self):
        """A required section cannot depend on a caller value."""
        with pytest.raises(ValidationError) as exc_info:
            _greeting(required_sections=["# Goodbye"])

        assert "required sections" in str(exc_info.value)

    def test_template_is_immutable(self):
        template = _greeting()

        with pytest.raises(ValidationError):
            template.title = "Changed"

    def test_segments_round_trip_through_discriminator(self):
        template = _greeting()

        restored = Template.model_validate(template.model_dump())

        assert restored == template


class TestRenderedDocument:
    def test_str_is_text(self):
        document = RenderedDocument(template_id="t", text="body", values={"A": "1"})

        assert str(document) == "body"

    def test_document_is_immutable(self):
        document = RenderedDocument(template_id="t", text="body", values={})

        with pytest.raises(ValidationError):
            document.text = "other"

    def test_values_cannot_be_changed_in_place(self):
        """Values stay in step with the text they were rendered into."""
        document = RenderedDocument(template_id="t", text="Acme Corp", values={"CustomerName": "Acme Corp"})

        with pytest.raises(TypeError):
            document.values["CustomerName"] = "Other"

        assert document.values == {"CustomerName": "Acme Corp"}
        assert document.value_items == (("CustomerName", "Acme Corp"),)


class TestMappingTable:
    """Tests for MappingTable lookups and rendering."""

    @pytest.fixture
    def table(self):
        return MappingTable(
            name="icons",
            key_header="Type",
            value_header="Icon",
            entries=(("aws_vpc", "fa:fa-cloud"), ("aws_instance", "fa:fa-server")),
        )

    def test_lookup(self, table):
        assert table["aws_vpc"] == "fa:fa-cloud"
        assert "aws_instance" in table
        assert "aws_lb" not in table
        assert table.get("aws_lb") is None
        assert table.get("aws_lb", "fa:fa-cube") == "fa:fa-cube"

    def test_missing_key_raises_key_error(self, table):
        with pytest.raises(KeyError):
            table["aws_lb"]

    def test_keys_keep_declaration_order(self, table):
        assert table.keys() == ["aws_vpc", "aws_instance"]

    def test_as_dict_is_a_copy(self, table):
        copy = table.as_dict()
        copy["aws_vpc"] = "changed"

        assert table["aws_vpc"] == "fa:fa-cloud"

    def test_duplicate_keys_rejected(self):
        with pytest.raises(ValidationError):
            MappingTable(
                name="dup",
                key_header="K",
                value_header="V",
                entries=(("a", "1"), ("a", "2")),
            )

    def test_entries_cannot_be_reassigned(self, table):
        with pytest.raises(ValidationError):
            table.entries = ()

    def test_to_markdown(self, table):
        assert table.to_markdown() == (
            "| Type | Icon |\n"
            "|---|---|\n"
            "| `aws_vpc` | `fa:fa-cloud` |\n"
            "| `aws_instance` | `fa:fa-server` |"
        )
