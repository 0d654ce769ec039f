"""
Unit tests for the raw result schema.

Tests cover:
- FacetDescriptor / RawResultRow: parsing both wire shapes
- FacetShape: facet count validation and named access
- axis_label: value-axis label and its fallback
"""

import pytest

from facetpivot.exceptions import MalformedFacetShapeError
from facetpivot.model.schema import (
    FacetDescriptor,
    FacetShape,
    RawResultRow,
    axis_label,
    coerce_rows,
    facet_shapes,
)


class TestRawResultRow:
    """Test Suite for RawResultRow parsing."""

    def test_from_host_shape(self, make_row):
        row = RawResultRow.from_dict(make_row("Jan", "US", 10))
        assert row.groups[0].display_name == "GB"
        assert row.groups[1].value == "Jan"
        assert row.groups[2].value == "US"
        assert row.series == (10,)
        assert row.value == 10

    def test_from_engine_shape(self, engine_rows):
        row = RawResultRow.from_dict(engine_rows[0])
        assert row.groups[0].display_name == "Average duration"
        assert row.groups[1].value == "Chrome"
        assert row.color == "#000000"
        assert row.value == 1.5

    def test_only_first_series_point_is_the_value(self):
        row = RawResultRow.from_dict({
            "groups": [{}, {"value": "a"}],
            "series": [{"y": 3}, {"y": 99}],
        })
        assert row.value == 3

    def test_snake_case_display_name(self):
        facet = FacetDescriptor.from_dict({"display_name": "Count"})
        assert facet.display_name == "Count"

    def test_missing_groups_raises(self):
        with pytest.raises(MalformedFacetShapeError, match="groups"):
            RawResultRow.from_dict({"series": [{"y": 1}]})

    def test_missing_series_raises(self):
        with pytest.raises(MalformedFacetShapeError, match="series"):
            RawResultRow.from_dict({"groups": [{}, {"value": "a"}], "series": []})

    def test_non_mapping_row_raises(self):
        with pytest.raises(MalformedFacetShapeError, match="mapping"):
            RawResultRow.from_dict(["not", "a", "row"])

    def test_non_mapping_facet_raises(self):
        with pytest.raises(MalformedFacetShapeError, match="mapping"):
            RawResultRow.from_dict({"groups": ["a", "b"], "series": [{"y": 1}]})

    def test_non_numeric_value_raises(self):
        with pytest.raises(TypeError, match="numeric"):
            RawResultRow.from_dict({"groups": [{}, {"value": "a"}], "series": [{"y": "ten"}]})

    def test_null_value_is_kept_as_none(self):
        row = RawResultRow.from_dict({"groups": [{}, {"value": "a"}], "series": [{"y": None}]})
        assert row.value is None
        assert FacetShape.from_row(row, require_column=False).value is None

    def test_bool_value_raises(self):
        with pytest.raises(TypeError, match="numeric"):
            RawResultRow.from_dict({"groups": [{}, {"value": "a"}], "series": [{"y": True}]})

    def test_groups_are_stored_as_tuple(self):
        row = RawResultRow(groups=[FacetDescriptor(), FacetDescriptor("a")], series=[1])
        assert isinstance(row.groups, tuple)
        assert isinstance(row.series, tuple)


class TestFacetShape:
    """Test Suite for FacetShape validation."""

    def test_named_fields(self, make_row):
        shape = FacetShape.from_row(RawResultRow.from_dict(make_row("Jan", "US", 10)))
        assert shape.value_dimension.display_name == "GB"
        assert shape.row_key == "Jan"
        assert shape.column_key == "US"
        assert shape.value == 10

    def test_numeric_facet_values_become_strings(self):
        row = RawResultRow(
            groups=(FacetDescriptor(), FacetDescriptor(2024), FacetDescriptor(7)),
            series=(1,),
        )
        shape = FacetShape.from_row(row)
        assert shape.row_key == "2024"
        assert shape.column_key == "7"

    def test_column_required_by_default(self, make_row):
        row = RawResultRow.from_dict(make_row("Jan", y=1))
        with pytest.raises(MalformedFacetShapeError, match="2 facet group"):
            FacetShape.from_row(row)

    def test_single_facet_allowed_when_column_not_required(self, make_row):
        row = RawResultRow.from_dict(make_row("Jan", y=1))
        shape = FacetShape.from_row(row, require_column=False)
        assert shape.row_key == "Jan"
        assert shape.column_facet is None
        with pytest.raises(MalformedFacetShapeError, match="no column facet"):
            shape.column_key

    def test_error_names_row_index(self, make_row):
        rows = coerce_rows([make_row("Jan", "US", 1), make_row("Feb", y=2)])
        with pytest.raises(MalformedFacetShapeError, match="Row 1 has 2"):
            facet_shapes(rows)

    def test_one_group_is_malformed_for_ranking(self):
        row = RawResultRow(groups=(FacetDescriptor(),), series=(1,))
        with pytest.raises(MalformedFacetShapeError):
            FacetShape.from_row(row, require_column=False)


class TestAxisLabel:
    """Test Suite for axis_label."""

    def test_first_row_display_name(self, region_rows):
        assert axis_label(coerce_rows(region_rows)) == "GB"

    def test_empty_input_uses_fallback(self):
        assert axis_label([]) == "Y-Axis"

    def test_missing_display_name_uses_fallback(self):
        rows = coerce_rows([{"groups": [{}, {"value": "a"}], "series": [{"y": 1}]}])
        assert axis_label(rows) == "Y-Axis"

    def test_custom_fallback(self):
        assert axis_label([], default="Value") == "Value"

    def test_coerce_rows_keeps_instances(self, make_row):
        row = RawResultRow.from_dict(make_row("Jan", "US", 1))
        assert coerce_rows([row])[0] is row
