class TemplateError(ValueError):
    """Base class for template lookup, parsing and rendering failures."""


class NotFoundError(TemplateError, LookupError):
    def __init__(self, name: str, available: list[str], kind: str = "template"):
        super().__init__(f"Unknown {kind} '{name}' (available: {', '.join(available) or 'none'})")
        self.name = name
        self.available = available
        self.kind = kind

    @property
    def template_id(self) -> str:
        return self.name


class MissingPlaceholderError(TemplateError):
    def __init__(self, template_id: str, missing: list[str]):
        super().__init__(f"Template '{template_id}' is missing values for: {', '.join(missing)}")
        self.template_id = template_id
        self.missing = missing


class UnknownPlaceholderError(TemplateError):
    def __init__(self, template_id: str, unknown: list[str]):
        super().__init__(f"Template '{template_id}' does not reference: {', '.join(unknown)}")
        self.template_id = template_id
        self.unknown = unknown


class InvalidPlaceholderValueError(TemplateError):
    def __init__(self, template_id: str, name: str, value_type: str):
        super().__init__(f"Template '{template_id}' value for '{name}' must be str, got {value_type}")
        self.template_id = template_id
        self.name = name
        self.value_type = value_type


class IncompleteDocumentError(TemplateError):
    def __init__(self, template_id: str, missing_sections: list[str]):
        super().__init__(
            f"Rendered '{template_id}' is missing required sections: {', '.join(missing_sections)}"
        )
        self.template_id = template_id
        self.missing_sections = missing_sections


class TemplateSyntaxError(TemplateError):
    def __init__(self, error: str, field: str | None = None):
        detail = f" in field '{field}'" if field is not None else ""
        super().__init__(f"Invalid template body{detail}: {error}")
        self.error = error
        self.field = field
