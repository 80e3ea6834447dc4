"""Tests for the aligned exporter."""

import pytest
from json_inspector.config import InspectorConfig
from json_inspector.exporter import AlignedExporter
from json_inspector.flattener import TreeFlattener
from json_inspector.types import ExportMode, ExportError, RowNotFoundError
from json_inspector.visibility import VisibilityController


FULL_EXPORT = (
    'users\t0\tname\t\t"Alice"\n'
    '\t\tprofile\tage\t30\n'
    '\t\t\tcity\t"New York"\n'
    '\t1\tname\t\t"Bob"\n'
    '\t\tprofile\tage\t25\n'
    '\t\t\tcity\t"San Francisco"\n'
    'settings\ttheme\t\t\t"dark"\n'
    '\tnotifications\t\t\ttrue\n'
    '\tproxy\t\t\tnull\n'
    'version\t\t\t\t2\n'
)


class TestExportVisible:
    """Tests for exporting the visible rows."""

    def setup_method(self):
        """Set up test fixtures."""
        self.exporter = AlignedExporter()

    def test_parent_merges_onto_first_child(self):
        """Test the small nested object export."""
        tree = TreeFlattener().flatten({"a": 1, "b": {"c": 2}})
        visibility = VisibilityController(tree)

        assert self.exporter.export_visible(tree, visibility) == "a\t\t1\nb\tc\t2\n"

    def test_full_export_aligns_values(self, nested_tree, nested_visibility):
        """Test that every value lands in the same column."""
        text = self.exporter.export_visible(nested_tree, nested_visibility)

        assert text == FULL_EXPORT
        for line in text.splitlines():
            assert line.count("\t") == 4

    def test_collapsed_parent_exports_summary(self, nested_tree, nested_visibility):
        """Test that a collapsed parent is exported like a leaf."""
        nested_visibility.set_expanded("row-0", False)

        text = self.exporter.export_visible(nested_tree, nested_visibility)

        assert text == (
            'users\t\tArray(2)\n'
            'settings\ttheme\t"dark"\n'
            '\tnotifications\ttrue\n'
            '\tproxy\tnull\n'
            'version\t\t2\n'
        )

    def test_collapse_all_export(self, nested_tree, nested_visibility):
        """Test exporting only the roots."""
        nested_visibility.collapse_all()

        text = self.exporter.export_visible(nested_tree, nested_visibility)

        assert text == 'users\tArray(2)\nsettings\tObject{3}\nversion\t2\n'

    def test_value_mode(self, nested_tree, nested_visibility):
        """Test exporting values only."""
        nested_visibility.set_expanded("row-0", False)

        text = self.exporter.export_visible(nested_tree, nested_visibility, ExportMode.VALUE)

        assert text == 'Array(2)\n"dark"\ntrue\nnull\n2\n'

    def test_key_mode(self, nested_tree, nested_visibility):
        """Test exporting keys only."""
        nested_visibility.reveal_to_depth(2)

        text = self.exporter.export_visible(nested_tree, nested_visibility, ExportMode.KEY)

        assert text == (
            'users\t0\n'
            '\t1\n'
            'settings\ttheme\n'
            '\tnotifications\n'
            '\tproxy\n'
            'version\n'
        )

    def test_export_is_idempotent(self, nested_tree, nested_visibility):
        """Test that exporting an unchanged state twice gives the same text."""
        nested_visibility.set_expanded("row-8", False)

        first = self.exporter.export_visible(nested_tree, nested_visibility)
        second = self.exporter.export_visible(nested_tree, nested_visibility)

        assert first == second

    def test_export_empty_tree(self):
        """Test that zero rows export as empty text."""
        tree = TreeFlattener().flatten({})

        assert self.exporter.export_visible(tree, VisibilityController(tree)) == ""

    def test_export_primitive_root(self):
        """Test exporting a primitive document."""
        tree = TreeFlattener().flatten("hello")

        assert self.exporter.export_visible(tree, VisibilityController(tree)) == 'Root\t"hello"\n'

    def test_export_rows_from_another_tree(self, nested_visibility):
        """Test that rows of a different tree are rejected."""
        other = TreeFlattener(InspectorConfig(id_prefix="other-")).flatten({"x": 1})

        with pytest.raises(ExportError):
            self.exporter.export_rows(other.rows, nested_visibility)

    def test_export_rows_rejects_hidden_rows(self, nested_tree, nested_visibility):
        """Test that a collapsed parent's children cannot be exported."""
        nested_visibility.set_expanded("row-11", False)

        with pytest.raises(ExportError, match="row-12 is hidden"):
            self.exporter.export_rows(nested_tree.subtree("row-11"), nested_visibility)

    def test_export_rows_rejects_out_of_order_rows(self, nested_tree, nested_visibility):
        """Test that rows must be passed in tree order."""
        rows = [nested_tree.get("row-15"), nested_tree.get("row-11")]

        with pytest.raises(ExportError, match="out of tree order"):
            self.exporter.export_rows(rows, nested_visibility)

    def test_export_rows_rejects_rows_with_same_ids(self, sample_nested_json, nested_visibility):
        """Test that rows from an identical flatten call are still foreign."""
        other = TreeFlattener().flatten(sample_nested_json)

        with pytest.raises(ExportError, match="not part of the current tree"):
            self.exporter.export_rows(other.rows, nested_visibility)

    def test_export_visible_with_mismatched_state(self, nested_visibility):
        """Test that state from a different tree is rejected."""
        other = TreeFlattener().flatten([1])

        with pytest.raises(ExportError):
            self.exporter.export_visible(other, nested_visibility)


class TestExportSubtree:
    """Tests for exporting a single subtree."""

    def setup_method(self):
        """Set up test fixtures."""
        self.exporter = AlignedExporter()

    def test_subtree_row_mode(self, nested_tree):
        """Test exporting an array element and its descendants."""
        text = self.exporter.export_subtree(nested_tree, "row-1")

        assert text == '\t0\tname\t\t"Alice"\n\t\tprofile\tage\t30\n\t\t\tcity\t"New York"\n'

    def test_subtree_ignores_visibility(self, nested_tree, nested_visibility):
        """Test that collapsed rows inside the subtree are still exported."""
        nested_visibility.collapse_all()

        text = self.exporter.export_subtree(nested_tree, "row-11")

        assert text == 'settings\ttheme\t"dark"\n\tnotifications\ttrue\n\tproxy\tnull\n'

    def test_subtree_value_mode_skips_parents(self, nested_tree):
        """Test that value mode prints leaf values only."""
        text = self.exporter.export_subtree(nested_tree, "row-1", ExportMode.VALUE)

        assert text == '"Alice"\n30\n"New York"\n'

    def test_subtree_key_mode(self, nested_tree):
        """Test that key mode merges parents and drops values."""
        text = self.exporter.export_subtree(nested_tree, "row-1", ExportMode.KEY)

        assert text == '\t0\tname\n\t\tprofile\tage\n\t\t\tcity\n'

    def test_subtree_of_leaf(self, nested_tree):
        """Test exporting a single leaf."""
        assert self.exporter.export_subtree(nested_tree, "row-15") == "version\t2\n"

    def test_subtree_unknown_row(self, nested_tree):
        """Test exporting a subtree that does not exist."""
        with pytest.raises(RowNotFoundError):
            self.exporter.export_subtree(nested_tree, "row-99")

    def test_copy_key(self, nested_tree):
        """Test copying a single key."""
        assert AlignedExporter.copy_key(nested_tree.get("row-3")) == "profile"
