"""Tests for the table renderer."""

import io

import pytest

from gridprint import (
    ConfigurationError,
    EncodingError,
    Grid,
    HeavyBorderStyle,
    PlainBorderStyle,
    PrinterConfig,
    Renderer,
    SimpleTableSource,
)
from gridprint.render import resolve_encoding
from tests.fixtures.tables import table


def render(headers, rows, config: PrinterConfig | None = None) -> str:
    """Build a grid and render it to text."""
    config = config or PrinterConfig()
    grid = Grid.build(SimpleTableSource(headers, rows), config)
    return Renderer(grid, config.style, config).text()


class TestRendererLayout:
    """Tests for line layout."""

    def test_nothing_rendered_without_table(self) -> None:
        """An empty grid produces no output at all."""
        assert render(None, []) == ""

    def test_single_cell(self) -> None:
        """The smallest table has one header and one value."""
        assert render(["a"], [["b"]]) == table(
            """
            +---+
            | a |
            +===+
            | b |
            +---+
            """
        )

    def test_multi_line_cells_in_lockstep(self) -> None:
        """Cells of one row share output lines; shorter cells pad with blanks."""
        config = PrinterConfig(max_cell_width=4)
        assert render(["id", "name"], [["1", "abcdefghij"], ["2", "x\ny"]], config) == table(
            """
            +----+------+
            | id | name |
            +====+======+
            | 1  | abcd |
            |    | efgh |
            |    | ij   |
            | 2  | x    |
            |    | y    |
            +----+------+
            """
        )

    def test_multi_line_header(self) -> None:
        """Headers wrap like any other cell."""
        assert render(["first\nname", "id"], [["john", "1"]]) == table(
            """
            +-------+----+
            | first | id |
            | name  |    |
            +=======+====+
            | john  | 1  |
            +-------+----+
            """
        )

    def test_ragged_rows_pad_missing_columns(self) -> None:
        """Short rows get blank cells of the right width."""
        rows = [["1", "john"], ["2", "tom", "20", "munich"], ["3"]]
        assert render(["id", "name", "age"], rows) == table(
            """
            +----+------+-----+--------+
            | id | name | age | 3      |
            +====+======+=====+========+
            | 1  | john |     |        |
            | 2  | tom  | 20  | munich |
            | 3  |      |     |        |
            +----+------+-----+--------+
            """
        )

    def test_row_without_values_has_no_lines(self) -> None:
        """A row with no cells is zero lines tall."""
        assert render(["a"], [[], ["b"]]) == table(
            """
            +---+
            | a |
            +===+
            | b |
            +---+
            """
        )

    def test_rendering_is_repeatable(self, headers, data) -> None:
        """Rendering one grid twice produces identical text."""
        config = PrinterConfig(border_style=HeavyBorderStyle(), horizontal_dividers=True)
        grid = Grid.build(SimpleTableSource(headers, data), config)
        renderer = Renderer(grid, config.style, config)
        assert renderer.text() == renderer.text()

    def test_lines_have_equal_length(self, headers, data) -> None:
        """Every line of a table is equally wide."""
        config = PrinterConfig(max_cell_width=3, row_numbers=True, horizontal_dividers=True)
        grid = Grid.build(SimpleTableSource(headers, data), config)
        lines = list(Renderer(grid, config.style, config).lines())
        assert len({len(line) for line in lines}) == 1


class TestRendererStream:
    """Tests for writing encoded output."""

    def test_writes_encoded_bytes(self) -> None:
        """Output is encoded with the configured encoding."""
        config = PrinterConfig(border_style=HeavyBorderStyle(), encoding="utf-16")
        grid = Grid.build(SimpleTableSource(["a"], [["b"]]), config)
        stream = io.BytesIO()
        Renderer(grid, config.style, config).render(stream)
        assert stream.getvalue().decode("utf-16").startswith("╔═══╗\n")

    def test_unknown_encoding(self) -> None:
        """An unknown encoding is a configuration error."""
        config = PrinterConfig(encoding="no-such-encoding")
        grid = Grid.build(SimpleTableSource(["a"], [["b"]]), config)
        with pytest.raises(ConfigurationError, match="encoding"):
            Renderer(grid, config.style, config).render(io.BytesIO())

    def test_unencodable_output_writes_nothing(self) -> None:
        """A table the encoding cannot represent leaves the stream untouched."""
        config = PrinterConfig(border_style=HeavyBorderStyle(), encoding="ascii")
        grid = Grid.build(SimpleTableSource(["a"], [["b"]]), config)
        stream = io.BytesIO()
        with pytest.raises(EncodingError) as exc_info:
            Renderer(grid, config.style, config).render(stream)
        assert stream.getvalue() == b""
        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)

    def test_plain_style_fits_ascii(self) -> None:
        """The plain style can be written in ASCII."""
        config = PrinterConfig(border_style=PlainBorderStyle(), encoding="ascii")
        grid = Grid.build(SimpleTableSource(["a"], [["b"]]), config)
        stream = io.BytesIO()
        Renderer(grid, config.style, config).render(stream)
        assert stream.getvalue().startswith(b"+---+\n")


class TestResolveEncoding:
    """Tests for resolve_encoding."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("UTF-8", "utf-8"), ("utf8", "utf-8"), ("latin-1", "iso8859-1")],
    )
    def test_aliases(self, name: str, expected: str) -> None:
        """Encoding aliases resolve to the canonical codec name."""
        assert resolve_encoding(name) == expected

    def test_unknown(self) -> None:
        """Unknown names raise ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_encoding("klingon")
        assert exc_info.value.field == "encoding"
        assert exc_info.value.value == "klingon"
