import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping

from .blueprint_prompts import BLUEPRINT_TEMPLATE
from .diagram_prompts import DIAGRAM_TEMPLATE, ICON_MAPPING, RESOURCE_CLASSES, STYLE_CLASSES
from .errors import NotFoundError
from .models import MappingTable, Template

logger = logging.getLogger(__name__)


class TemplateStore:
    """Read-only registry of templates and the mapping tables they embed."""

    def __init__(self, templates: Iterable[Template], mappings: Iterable[MappingTable] = ()):
        by_id: dict[str, Template] = {}
        for template in templates:
            if template.id in by_id:
                raise ValueError(f"duplicate template id: {template.id}")
            by_id[template.id] = template

        by_name: dict[str, MappingTable] = {}
        for mapping in mappings:
            if mapping.name in by_name:
                raise ValueError(f"duplicate mapping name: {mapping.name}")
            by_name[mapping.name] = mapping

        self._templates: Mapping[str, Template] = MappingProxyType(by_id)
        self._mappings: Mapping[str, MappingTable] = MappingProxyType(by_name)
        logger.debug(
            "Template store ready: templates=%s mappings=%s",
            sorted(by_id),
            sorted(by_name),
        )

    @property
    def templates(self) -> Mapping[str, Template]:
        return self._templates

    @property
    def mappings(self) -> Mapping[str, MappingTable]:
        return self._mappings

    def template_ids(self) -> list[str]:
        return sorted(self._templates)

    def get_template(self, template_id: str) -> Template:
        try:
            return self._templates[template_id]
        except KeyError:
            raise NotFoundError(template_id, self.template_ids()) from None

    def get_mapping(self, name: str) -> MappingTable:
        try:
            return self._mappings[name]
        except KeyError:
            raise NotFoundError(name, sorted(self._mappings), kind="mapping") from None

    @property
    def icon_mapping(self) -> MappingTable:
        return self.get_mapping(ICON_MAPPING.name)

    @property
    def style_classes(self) -> MappingTable:
        return self.get_mapping(STYLE_CLASSES.name)

    @property
    def resource_classes(self) -> MappingTable:
        return self.get_mapping(RESOURCE_CLASSES.name)


@lru_cache(maxsize=1)
def default_store() -> TemplateStore:
    return TemplateStore(
        templates=[DIAGRAM_TEMPLATE, BLUEPRINT_TEMPLATE],
        mappings=[ICON_MAPPING, STYLE_CLASSES, RESOURCE_CLASSES],
    )
