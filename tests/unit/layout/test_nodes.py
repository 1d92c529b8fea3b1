"""Unit tests for inkboard.layout.nodes module."""

import json
from pathlib import Path

import pytest

from inkboard.layout.exceptions import FormatError, LayoutNotFoundError, SchemaError
from inkboard.layout.nodes import (
    Container,
    Leaf,
    SplitDirection,
    WidgetKind,
    count_nodes,
    load_layout,
    node_from_dict,
    node_to_dict,
    parse_layout,
    parse_split,
)
from inkboard.layout.size import Pixels, Units


class TestParseSplit:
    """Test split direction parsing."""

    def test_parse_split_when_horizontal_then_returns_horizontal(self) -> None:
        assert parse_split("horizontal") is SplitDirection.HORIZONTAL

    def test_parse_split_when_vertical_then_returns_vertical(self) -> None:
        assert parse_split("vertical") is SplitDirection.VERTICAL

    @pytest.mark.parametrize("value", ["Horizontal", "VERTICAL", "row", ""])
    def test_parse_split_when_unknown_literal_then_raises_format_error(self, value) -> None:
        with pytest.raises(FormatError) as exc_info:
            parse_split(value, "root")

        assert "horizontal" in exc_info.value.expected

    def test_parse_split_when_not_string_then_raises_schema_error(self) -> None:
        with pytest.raises(SchemaError):
            parse_split(1, "root")


class TestNodeFromDict:
    """Test building layout trees from decoded JSON."""

    def test_node_from_dict_when_leaf_then_returns_leaf(self) -> None:
        node = node_from_dict({"type": "weather", "size": "2u"})

        assert node == Leaf(kind=WidgetKind.WEATHER, size=Units(2.0))

    def test_node_from_dict_when_container_then_preserves_entry_order(
        self, sample_layout_dict, sample_layout
    ) -> None:
        node = node_from_dict(sample_layout_dict)

        assert node == sample_layout
        body = node.entries[1]
        assert [entry.kind for entry in body.entries] == [
            WidgetKind.TODO,
            WidgetKind.VERTICAL_RULE,
            WidgetKind.COUNTDOWN,
        ]

    def test_node_from_dict_when_empty_entries_then_container_has_no_children(self) -> None:
        node = node_from_dict(
            {"type": "container", "size": "1u", "split": "vertical", "entries": []}
        )

        assert isinstance(node, Container)
        assert node.entries == ()

    def test_node_from_dict_when_every_widget_kind_then_parses(self) -> None:
        for kind in WidgetKind:
            node = node_from_dict({"type": kind.value, "size": "10px"})
            assert node == Leaf(kind=kind, size=Pixels(10))

    def test_node_from_dict_when_unknown_type_then_schema_error_with_path(self) -> None:
        document = {
            "type": "container",
            "size": "1u",
            "split": "horizontal",
            "entries": [
                {"type": "date", "size": "1u"},
                {"type": "clock", "size": "1u"},
            ],
        }

        with pytest.raises(SchemaError) as exc_info:
            node_from_dict(document)

        error = exc_info.value
        assert error.path == "root.entries[1]"
        assert error.field_name == "type"
        assert "'clock'" in error.message

    def test_node_from_dict_when_missing_type_then_schema_error(self) -> None:
        with pytest.raises(SchemaError) as exc_info:
            node_from_dict({"size": "1u"})

        assert exc_info.value.field_name == "type"
        assert exc_info.value.path == "root"

    def test_node_from_dict_when_missing_size_then_schema_error(self) -> None:
        with pytest.raises(SchemaError) as exc_info:
            node_from_dict({"type": "todo"})

        assert exc_info.value.field_name == "size"

    @pytest.mark.parametrize("missing", ["split", "entries"])
    def test_node_from_dict_when_container_field_missing_then_schema_error(self, missing) -> None:
        document = {"type": "container", "size": "1u", "split": "vertical", "entries": []}
        del document[missing]

        with pytest.raises(SchemaError) as exc_info:
            node_from_dict(document)

        assert exc_info.value.field_name == missing

    def test_node_from_dict_when_entries_not_list_then_schema_error(self) -> None:
        with pytest.raises(SchemaError) as exc_info:
            node_from_dict(
                {"type": "container", "size": "1u", "split": "vertical", "entries": {}}
            )

        assert exc_info.value.field_name == "entries"

    def test_node_from_dict_when_node_not_object_then_schema_error(self) -> None:
        with pytest.raises(SchemaError) as exc_info:
            node_from_dict(
                {"type": "container", "size": "1u", "split": "vertical", "entries": ["date"]}
            )

        assert exc_info.value.path == "root.entries[0]"

    def test_node_from_dict_when_nested_bad_size_then_format_error_with_path(self) -> None:
        document = {
            "type": "container",
            "size": "1u",
            "split": "vertical",
            "entries": [
                {
                    "type": "container",
                    "size": "1u",
                    "split": "horizontal",
                    "entries": [{"type": "battery", "size": "12"}],
                }
            ],
        }

        with pytest.raises(FormatError) as exc_info:
            node_from_dict(document)

        assert exc_info.value.path == "root.entries[0].entries[0]"
        assert exc_info.value.value == "12"

    def test_node_from_dict_when_bad_split_then_format_error(self) -> None:
        with pytest.raises(FormatError):
            node_from_dict({"type": "container", "size": "1u", "split": "diagonal", "entries": []})


class TestNodeSerialization:
    """Test converting nodes back to JSON form."""

    def test_node_to_dict_when_tree_then_matches_source_document(
        self, sample_layout, sample_layout_dict
    ) -> None:
        assert node_to_dict(sample_layout) == sample_layout_dict

    def test_count_nodes_when_tree_then_counts_containers_and_leaves(self, sample_layout) -> None:
        assert count_nodes(sample_layout) == 6


class TestLayoutDocuments:
    """Test parsing and loading whole layout documents."""

    def test_parse_layout_when_valid_json_then_returns_root(
        self, sample_layout_dict, sample_layout
    ) -> None:
        assert parse_layout(json.dumps(sample_layout_dict)) == sample_layout

    def test_parse_layout_when_invalid_json_then_schema_error(self) -> None:
        with pytest.raises(SchemaError):
            parse_layout("{not json")

    def test_load_layout_when_file_exists_then_returns_root(
        self, layout_file, sample_layout
    ) -> None:
        assert load_layout(layout_file) == sample_layout

    def test_load_layout_when_file_missing_then_raises_layout_not_found(self, tmp_path) -> None:
        with pytest.raises(LayoutNotFoundError):
            load_layout(tmp_path / "missing.json")

    def test_load_layout_when_example_layout_then_parses(self) -> None:
        example = Path(__file__).resolve().parents[3] / "examples" / "layout.json"

        root = load_layout(example)

        assert isinstance(root, Container)
        assert count_nodes(root) > 10
