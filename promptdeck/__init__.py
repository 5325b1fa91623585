"""Prompt templates for Terraform diagrams and strategic account blueprints."""

from .errors import (
    IncompleteDocumentError,
    InvalidPlaceholderValueError,
    MissingPlaceholderError,
    NotFoundError,
    TemplateError,
    TemplateSyntaxError,
    UnknownPlaceholderError,
)
from .models import LiteralSegment, MappingTable, Placeholder, PlaceholderSegment, RenderedDocument, Template
from .renderer import render, render_template, validate_structure
from .store import TemplateStore, default_store

__all__ = [
    "IncompleteDocumentError",
    "InvalidPlaceholderValueError",
    "LiteralSegment",
    "MappingTable",
    "MissingPlaceholderError",
    "NotFoundError",
    "Placeholder",
    "PlaceholderSegment",
    "RenderedDocument",
    "Template",
    "TemplateError",
    "TemplateStore",
    "TemplateSyntaxError",
    "UnknownPlaceholderError",
    "default_store",
    "render",
    "render_template",
    "validate_structure",
]
