"""Unit and property-based tests for the chat markdown renderer."""
import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from quimibot.replies import escape_html, render_markdown, render_table

TABLE = (
    '<table class="qb-table"><thead><tr><th>Elemento</th><th>Símbolo</th></tr></thead>'
    "<tbody><tr><td>Oro</td><td>Au</td></tr></tbody></table>"
)

# Every tag the renderer is allowed to emit
OWN_TAGS = re.compile(
    r'<table class="qb-table">|<strong class="qb-heading">|<br/>'
    r"|</?(?:p|strong|em|code|ul|li|table|thead|tbody|tr|th|td)>"
)


class TestEscaping:
    """Tests for HTML escaping."""

    def test_escape_html(self):
        """Test the three significant characters are escaped."""
        assert escape_html("a < b & c > d") == "a &lt; b &amp; c &gt; d"

    def test_script_is_escaped(self):
        """Test markup in the input is shown as text."""
        html = render_markdown("<script>alert('x')</script> & co")
        assert html == "<p>&lt;script&gt;alert('x')&lt;/script&gt; &amp; co</p>"

    def test_markup_inside_emphasis_is_escaped(self):
        """Test escaping happens before emphasis is applied."""
        assert render_markdown("**<img src=x>**") == "<p><strong>&lt;img src=x&gt;</strong></p>"

    def test_existing_entities_are_escaped_again(self):
        """Test entity text from the model is not trusted."""
        assert render_markdown("&lt;b&gt;") == "<p>&amp;lt;b&amp;gt;</p>"

    @given(st.text(max_size=500))
    def test_only_own_tags_in_output(self, text: str):
        """Property test: no markup survives except the renderer's own tags."""
        html = OWN_TAGS.sub("", render_markdown(text))
        assert "<" not in html
        assert ">" not in html
        assert re.search(r"&(?!amp;|lt;|gt;)", html) is None


class TestInline:
    """Tests for inline emphasis."""

    def test_italic(self):
        """Test single asterisks become emphasis inside a paragraph."""
        assert render_markdown("a *b* c") == "<p>a <em>b</em> c</p>"

    def test_bold_and_code(self):
        """Test bold and inline code."""
        assert render_markdown("**Oro** es `Au`") == "<p><strong>Oro</strong> es <code>Au</code></p>"

    def test_unbalanced_markers_left_alone(self):
        """Test unclosed markers degrade to plain text."""
        assert render_markdown("**sin cerrar") == "<p>**sin cerrar</p>"

    def test_emphasis_does_not_cross_lines(self):
        """Test markers on different lines are not paired."""
        assert render_markdown("*uno\ndos*") == "<p>*uno<br/>dos*</p>"


class TestBlocks:
    """Tests for headings, lists and paragraphs."""

    def test_heading_becomes_bold_lead_in(self):
        """Test headings render as a styled strong span."""
        html = render_markdown("## Propiedades\nEs denso.")
        assert html == '<p><strong class="qb-heading">Propiedades</strong><br/>Es denso.</p>'

    def test_four_hashes_is_not_a_heading(self):
        """Test only one to three hashes form a heading."""
        assert render_markdown("#### No") == "<p>#### No</p>"

    def test_hash_without_space_is_not_a_heading(self):
        """Test a heading needs a space after the hashes."""
        assert render_markdown("#hashtag") == "<p>#hashtag</p>"

    def test_list_items_collapse_into_one_list(self):
        """Test consecutive bullets form a single list between paragraphs."""
        html = render_markdown("Usos:\n- Joyería\n- Electrónica\nFin")
        assert html == "<p>Usos:</p><ul><li>Joyería</li><li>Electrónica</li></ul><p>Fin</p>"

    def test_bullet_character(self):
        """Test the bullet character is accepted as a list marker."""
        assert render_markdown("• uno\n• dos") == "<ul><li>uno</li><li>dos</li></ul>"

    def test_separate_lists(self):
        """Test lists separated by text stay separate."""
        html = render_markdown("- a\ntexto\n- b")
        assert html.count("<ul>") == 2

    def test_paragraphs_and_line_breaks(self):
        """Test blank lines split paragraphs and single newlines break lines."""
        assert render_markdown("Uno.\n\nDos.\nTres.") == "<p>Uno.</p><p>Dos.<br/>Tres.</p>"

    @pytest.mark.parametrize("text", ["", "   ", "\n\n"])
    def test_blank_input(self, text):
        """Test blank input renders to nothing."""
        assert render_markdown(text) == ""


class TestTables:
    """Tests for markdown tables."""

    def test_three_row_table(self):
        """Test header, separator and one data row."""
        html = render_markdown("| Elemento | Símbolo |\n|---|---|\n| Oro | Au |")
        assert html == TABLE
        assert html.count("<table") == 1
        assert html.count("<th>") == 2
        assert html.count("<td>") == 2

    def test_table_between_paragraphs(self):
        """Test text around a table becomes sibling paragraphs."""
        html = render_markdown("Mira:\n| Elemento | Símbolo |\n|---|---|\n| Oro | Au |\nFin.")
        assert html == "<p>Mira:</p>" + TABLE + "<p>Fin.</p>"

    def test_trailing_partial_row_dropped(self):
        """Test a last row missing its closing pipe is discarded."""
        html = render_markdown("| A | B |\n|---|---|\n| 1 | 2 |\n| 3")
        assert html.count("<tr>") == 2
        assert "3" not in html

    def test_emphasis_inside_cells(self):
        """Test inline markup still applies inside cells."""
        html = render_markdown("| A | B |\n|---|---|\n| **x** | `y` |")
        assert "<td><strong>x</strong></td><td><code>y</code></td>" in html

    def test_single_pipe_row_is_text(self):
        """Test one row on its own is not a table."""
        assert render_markdown("| solo |") == "<p>| solo |</p>"

    def test_render_table_direct(self):
        """Test render_table skips the separator row."""
        html = render_table("| a | b |\n| - | - |\n| 1 | 2 |\n| 3 | 4 |")
        assert html.count("<tr>") == 3
        assert "<th>a</th><th>b</th>" in html
        assert "<td>-</td>" not in html

    def test_list_right_after_table(self):
        """Test bullets on the line after the last row still form a list."""
        html = render_markdown("| Elemento | Símbolo |\n|---|---|\n| Oro | Au |\n- nota uno\n- nota dos")
        assert html == TABLE + "<ul><li>nota uno</li><li>nota dos</li></ul>"

    def test_heading_right_after_table(self):
        """Test a heading on the line after the last row is still a heading."""
        html = render_markdown("| Elemento | Símbolo |\n|---|---|\n| Oro | Au |\n## Resumen\nTexto")
        assert html == TABLE + '<p><strong class="qb-heading">Resumen</strong><br/>Texto</p>'

    def test_emphasis_does_not_cross_cells(self):
        """Test asterisks in different cells are not paired."""
        html = render_markdown("| a | b |\n|---|---|\n| 2*3 | 4*5 |")
        assert "<td>2*3</td><td>4*5</td>" in html
        assert "<em>" not in html

    def test_bold_does_not_cross_cells(self):
        """Test double asterisks in different cells are not paired."""
        html = render_markdown("| a | b |\n|---|---|\n| **x | y** |")
        assert "<td>**x</td><td>y**</td>" in html
