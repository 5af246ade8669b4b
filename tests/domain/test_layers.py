"""Tests for layer kinds, the layer table, and slice path resolution."""

import pytest

from fsdgen.domain.errors import ValidationError
from fsdgen.domain.layers import (
    LAYER_SPECS,
    SEGMENTS,
    LayerKind,
    LayerSpec,
    get_layer_spec,
    resolve,
)

PLURALS = {
    LayerKind.PAGE: "pages",
    LayerKind.WIDGET: "widgets",
    LayerKind.FEATURE: "features",
    LayerKind.ENTITY: "entities",
    LayerKind.SHARED: "shared",
}


class TestLayerTable:
    def test_every_kind_has_a_spec(self) -> None:
        assert set(LAYER_SPECS) == set(LayerKind)

    @pytest.mark.parametrize(("kind", "plural"), PLURALS.items())
    def test_plural_prefix(self, kind: LayerKind, plural: str) -> None:
        assert LAYER_SPECS[kind].plural == plural

    def test_display_names(self) -> None:
        names = [LAYER_SPECS[k].display_name for k in LayerKind]
        assert names == ["Page", "Widget", "Feature", "Entity", "Shared"]

    def test_segments_shared_and_ordered(self) -> None:
        assert SEGMENTS == ("ui", "model", "lib", "api")
        for spec in LAYER_SPECS.values():
            assert spec.segments == SEGMENTS

    def test_segment_override(self) -> None:
        spec = LayerSpec(LayerKind.SHARED, "shared", "Shared", segments=("ui", "config"))
        assert spec.segments == ("ui", "config")
        assert LAYER_SPECS[LayerKind.SHARED].segments == SEGMENTS

    def test_lookup_by_value(self) -> None:
        assert get_layer_spec("entity") is LAYER_SPECS[LayerKind.ENTITY]

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValidationError, match="Unknown layer kind"):
            get_layer_spec("process")


class TestResolve:
    @pytest.mark.parametrize(("kind", "plural"), PLURALS.items())
    def test_root_path(self, kind: LayerKind, plural: str) -> None:
        target = resolve(kind, "login")
        assert target.root == f"./{plural}/login"

    def test_segments(self) -> None:
        target = resolve(LayerKind.WIDGET, "button")
        assert target.segments == ("ui", "model", "lib", "api")
        assert target.segment_path("model") == "./widgets/button/model"

    def test_keeps_name(self) -> None:
        target = resolve(LayerKind.FEATURE, "auth-by-phone")
        assert target.name == "auth-by-phone"
        assert target.spec.display_name == "Feature"

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_missing_name(self, name: str | None) -> None:
        with pytest.raises(ValidationError, match="Slice name is required"):
            resolve(LayerKind.PAGE, name)

    def test_validation_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            resolve(LayerKind.PAGE, "")
