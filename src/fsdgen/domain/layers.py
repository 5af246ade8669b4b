"""Layer kinds and the layer → path mapping.

Every layer maps to a plural top-level directory and shares the same
ordered segment list. A slice lives at ``./{plural}/{name}`` and holds
one subdirectory per segment.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from fsdgen.domain.errors import ValidationError

# Order is significant: it drives the export order of the slice barrel.
SEGMENTS: tuple[str, ...] = ("ui", "model", "lib", "api")


class LayerKind(StrEnum):
    """The five fixed architectural layers."""

    PAGE = "page"
    WIDGET = "widget"
    FEATURE = "feature"
    ENTITY = "entity"
    SHARED = "shared"


@dataclass(frozen=True)
class LayerSpec:
    """Derived attributes of a layer kind."""

    kind: LayerKind
    plural: str
    display_name: str
    segments: tuple[str, ...] = SEGMENTS


LAYER_SPECS: dict[LayerKind, LayerSpec] = {
    LayerKind.PAGE: LayerSpec(LayerKind.PAGE, "pages", "Page"),
    LayerKind.WIDGET: LayerSpec(LayerKind.WIDGET, "widgets", "Widget"),
    LayerKind.FEATURE: LayerSpec(LayerKind.FEATURE, "features", "Feature"),
    LayerKind.ENTITY: LayerSpec(LayerKind.ENTITY, "entities", "Entity"),
    LayerKind.SHARED: LayerSpec(LayerKind.SHARED, "shared", "Shared"),
}


@dataclass(frozen=True)
class ResolvedSlice:
    """A slice with its concrete, project-relative layout."""

    spec: LayerSpec
    name: str
    root: str

    @property
    def segments(self) -> tuple[str, ...]:
        return self.spec.segments

    def segment_path(self, segment: str) -> str:
        return f"{self.root}/{segment}"


def get_layer_spec(kind: LayerKind | str) -> LayerSpec:
    """Look up the spec for *kind*, accepting the enum or its value."""
    try:
        return LAYER_SPECS[LayerKind(kind)]
    except ValueError:
        choices = ", ".join(k.value for k in LayerKind)
        msg = f"Unknown layer kind {kind!r} (expected one of: {choices})"
        raise ValidationError(msg) from None


def resolve(kind: LayerKind | str, name: str | None) -> ResolvedSlice:
    """Resolve *kind* and *name* into the slice root path and segments.

    - Root: ``./{plural}/{name}``
    - Segments: the layer's ordered segment list

    Raises:
        ValidationError: *name* is missing or blank, or *kind* is unknown.
    """
    if name is None or not name.strip():
        msg = "Slice name is required"
        raise ValidationError(msg)
    spec = get_layer_spec(kind)
    return ResolvedSlice(spec=spec, name=name, root=f"./{spec.plural}/{name}")
