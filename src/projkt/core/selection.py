"""Selection sources: resolve which catalog entries to materialize."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from projkt.core.exceptions import TemplateNotFoundError
from projkt.core.models import Template


if TYPE_CHECKING:
    from projkt.core.models import TemplateCatalog
    from projkt.core.ports import PickerPort


class SelectionSource(Protocol):
    """Produces the templates to write from a catalog."""

    def resolve(self, catalog: TemplateCatalog) -> list[Template]:
        """Return selected templates in selection order."""
        ...


class ExactLookup:
    """Select templates by exact, case-sensitive name."""

    def __init__(self, *names: str) -> None:
        if not names:
            raise ValueError("ExactLookup needs at least one name")
        self.names = names

    def resolve(self, catalog: TemplateCatalog) -> list[Template]:
        """Look up each name in the order given.

        Raises:
            TemplateNotFoundError: On the first name missing from the catalog.
                Its message lists every available name.
        """
        selected = []
        for name in self.names:
            try:
                selected.append(Template(name, catalog[name]))
            except KeyError:
                raise TemplateNotFoundError(name, available=catalog.names()) from None
        return selected


class InteractivePick:
    """Delegate the choice to an interactive picker."""

    def __init__(self, picker: PickerPort, multi: bool = True) -> None:
        self.picker = picker
        self.multi = multi

    def resolve(self, catalog: TemplateCatalog) -> list[Template]:
        candidates = [t.as_pair() for t in catalog.templates()]
        chosen = self.picker.pick(candidates, multi=self.multi)
        return [Template(name, content) for name, content in chosen]


def selection_for(
    names: list[str] | None,
    picker: PickerPort,
    multi: bool = True,
) -> SelectionSource:
    """Exact lookup when names were given, interactive pick otherwise."""
    if names:
        return ExactLookup(*names)
    return InteractivePick(picker, multi=multi)
