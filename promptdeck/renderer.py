import logging
from typing import Mapping

from .errors import (
    IncompleteDocumentError,
    InvalidPlaceholderValueError,
    MissingPlaceholderError,
    UnknownPlaceholderError,
)
from .models import LiteralSegment, RenderedDocument, Template
from .store import TemplateStore, default_store

logger = logging.getLogger(__name__)


def _check_values(template: Template, values: Mapping[str, object], strict: bool) -> None:
    for name, value in values.items():
        if not isinstance(value, str):
            raise InvalidPlaceholderValueError(template.id, name, type(value).__name__)

    referenced = template.referenced_placeholders
    missing = [name for name in referenced if name not in values]
    if missing:
        raise MissingPlaceholderError(template.id, missing)

    unknown = sorted(set(values) - set(referenced))
    if not unknown:
        return
    if strict:
        raise UnknownPlaceholderError(template.id, unknown)
    logger.debug("Ignoring values not referenced by '%s': %s", template.id, unknown)


def validate_structure(text: str, template: Template) -> None:
    missing_sections = [section for section in template.required_sections if section not in text]
    if missing_sections:
        raise IncompleteDocumentError(template.id, missing_sections)


def render_template(
    template: Template,
    values: Mapping[str, str],
    *,
    strict: bool = False,
) -> RenderedDocument:
    _check_values(template, values, strict)

    parts: list[str] = []
    for segment in template.segments:
        if isinstance(segment, LiteralSegment):
            parts.append(segment.text)
        else:
            parts.append(values[segment.name])
    text = "".join(parts)

    validate_structure(text, template)

    used = {name: values[name] for name in template.referenced_placeholders}
    logger.debug(
        "Rendered template '%s' (%d chars)",
        template.id,
        len(text),
        extra={"template_id": template.id, "placeholders": sorted(used)},
    )
    return RenderedDocument(template_id=template.id, text=text, values=used)


def render(
    template_id: str,
    values: Mapping[str, str],
    *,
    strict: bool = False,
    store: TemplateStore | None = None,
) -> RenderedDocument:
    resolved_store = store if store is not None else default_store()
    template = resolved_store.get_template(template_id)
    return render_template(template, values, strict=strict)
