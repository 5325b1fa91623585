from string import Formatter

from .errors import TemplateSyntaxError
from .models import LiteralSegment, PlaceholderSegment, Segment

_FORMATTER = Formatter()


def _check_field(field_name: str, format_spec: str | None, conversion: str | None) -> None:
    if not field_name:
        raise TemplateSyntaxError("positional placeholder '{}' is not allowed")
    if not field_name.isidentifier():
        raise TemplateSyntaxError("placeholder name must be an identifier", field=field_name)
    if conversion:
        raise TemplateSyntaxError(f"conversion '!{conversion}' is not allowed", field=field_name)
    if format_spec:
        raise TemplateSyntaxError(f"format spec ':{format_spec}' is not allowed", field=field_name)


def parse_template(body: str) -> tuple[Segment, ...]:
    """Split a template body into literal and placeholder segments.

    Bodies follow the ``str.format`` brace convention: ``{Name}`` marks a
    placeholder and ``{{``/``}}`` produce literal braces. Adjacent literal
    text is merged into a single segment.
    """
    try:
        parsed = list(_FORMATTER.parse(body))
    except ValueError as e:
        raise TemplateSyntaxError(str(e)) from e

    segments: list[Segment] = []
    pending: list[str] = []
    for literal_text, field_name, format_spec, conversion in parsed:
        if literal_text:
            pending.append(literal_text)
        if field_name is None:
            continue
        _check_field(field_name, format_spec, conversion)
        if pending:
            segments.append(LiteralSegment(text="".join(pending)))
            pending = []
        segments.append(PlaceholderSegment(name=field_name))

    if pending:
        segments.append(LiteralSegment(text="".join(pending)))
    return tuple(segments)
