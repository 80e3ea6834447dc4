"""Tests for the table converter."""

from json_inspector.table import TableConverter, TableView


class TestTableConverter:
    """Tests for TableConverter class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.converter = TableConverter()

    def test_records_union_of_keys(self, sample_records_json):
        """Test that columns are the union of record keys."""
        view = self.converter.convert(sample_records_json)

        assert view.headers == ["id", "name", "active", "tags"]
        assert view.column("id") == ["1", "2", "3"]
        assert view.column("active") == ["true", None, "false"]
        assert view.column("name") == ["Item 1", "Item 2", None]

    def test_nested_cells_are_tables(self, sample_records_json):
        """Test that container cells are converted recursively."""
        view = self.converter.convert(sample_records_json)
        tags = view.column("tags")[1]

        assert isinstance(tags, TableView)
        assert tags.headers == ["Value"]
        assert tags.rows == [["a"], ["b"]]

    def test_primitive_array(self):
        """Test a single Value column for arrays of primitives."""
        view = self.converter.convert([1, "two", None])

        assert view.headers == ["Value"]
        assert view.rows == [["1"], ["two"], ["null"]]

    def test_empty_array(self):
        """Test converting an empty array."""
        view = self.converter.convert([])

        assert view.is_empty
        assert view.to_text() == ""

    def test_object_is_key_value_grid(self):
        """Test that an object becomes a two-column grid."""
        view = self.converter.convert({"name": "Alice", "age": 30, "extra": None})

        assert view.headers == []
        assert view.rows == [["name", "Alice"], ["age", "30"], ["extra", "null"]]

    def test_primitive_root(self):
        """Test that a primitive converts to its text."""
        assert self.converter.convert(True) == "true"
        assert self.converter.convert("plain") == "plain"

    def test_to_text(self, sample_records_json):
        """Test tab-separated rendering."""
        text = self.converter.convert(sample_records_json).to_text()

        assert text == (
            "id\tname\tactive\ttags\n"
            "1\tItem 1\ttrue\t-\n"
            '2\tItem 2\t-\t["a","b"]\n'
            "3\t-\tfalse\t-\n"
        )
