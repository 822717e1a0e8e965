"""Unit tests for the periodic table module."""
import json

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from quimibot.periodic import (
    CATEGORY_COLORS,
    CATEGORY_LABELS,
    STATE_LABELS,
    STATE_SYMBOLS,
    ChemicalElement,
    ElementCategory,
    ElementFilter,
    MatterState,
    electron_shells,
    element_facts,
    grid_position,
    load_elements,
    toggle_compare,
)


class TestChemicalElement:
    """Tests for the element model."""

    def test_camel_case_keys(self, by_symbol):
        """Test dataset keys populate snake_case fields."""
        hg = by_symbol["Hg"]
        assert hg.atomic_number == 80
        assert hg.melting_point == 234.32
        assert hg.electron_configuration == "[Xe] 4f14 5d10 6s2"
        assert hg.state == MatterState.LIQUID
        assert hg.uses == ("Termómetros",)

    def test_field_names_accepted(self):
        """Test snake_case names also work."""
        el = ChemicalElement(atomic_number=6, symbol="C", name="Carbono", atomic_mass=12.011, period=2)
        assert el.category == ElementCategory.UNKNOWN
        assert el.label == "Carbono (C)"

    def test_zero_means_unknown(self, by_symbol):
        """Test zero values become None."""
        assert by_symbol["He"].electronegativity is None
        assert by_symbol["La"].group is None
        assert by_symbol["H"].melting_point is None

    @pytest.mark.parametrize("field,value", [("atomicNumber", 0), ("atomicNumber", 119), ("period", 8)])
    def test_out_of_range(self, element_rows, field, value):
        """Test invalid positions are rejected."""
        row = dict(element_rows[0], **{field: value})
        with pytest.raises(ValidationError):
            ChemicalElement.model_validate(row)

    def test_unknown_category_rejected(self, element_rows):
        """Test categories are a closed set."""
        row = dict(element_rows[0], category="plasma-metal")
        with pytest.raises(ValidationError):
            ChemicalElement.model_validate(row)

    def test_frozen(self, by_symbol):
        """Test elements are immutable."""
        with pytest.raises(ValidationError):
            by_symbol["Au"].name = "Gold"  # type: ignore


class TestTheme:
    """Tests for the display lookups."""

    def test_every_category_has_color_and_label(self):
        """Test the lookups cover the closed category set."""
        assert set(CATEGORY_COLORS) == set(ElementCategory)
        assert set(CATEGORY_LABELS) == set(ElementCategory)

    def test_every_state_has_label_and_symbol(self):
        """Test the lookups cover every state."""
        assert set(STATE_LABELS) == set(MatterState)
        assert set(STATE_SYMBOLS) == set(MatterState)

    def test_lookups_are_read_only(self):
        """Test the tables cannot be modified."""
        with pytest.raises(TypeError):
            CATEGORY_COLORS[ElementCategory.UNKNOWN] = "#000"  # type: ignore


class TestLayout:
    """Tests for grid placement and electron shells."""

    def test_main_table(self, by_symbol):
        """Test column is the group and row the period."""
        assert grid_position(by_symbol["Fe"]) == (8, 4)
        assert grid_position(by_symbol["He"]) == (18, 1)

    def test_lanthanide_row(self, by_symbol):
        """Test lanthanides go to the detached row."""
        assert grid_position(by_symbol["La"]) == (3, 9)

    def test_actinide_row(self):
        """Test actinides go to the second detached row."""
        lr = ChemicalElement(atomic_number=103, symbol="Lr", name="Laurencio", atomic_mass=266, period=7)
        assert grid_position(lr) == (17, 10)

    @pytest.mark.parametrize("n,expected", [
        (1, [1]),
        (11, [2, 8, 1]),
        (80, [2, 8, 18, 32, 20]),
        (118, [2, 8, 18, 32, 32]),
    ])
    def test_electron_shells(self, n, expected):
        """Test shells fill in order and only five are drawn."""
        assert electron_shells(n) == expected

    @given(st.integers(min_value=1, max_value=60))
    def test_shells_hold_every_electron(self, n: int):
        """Property test: below the drawing limit every electron is placed."""
        shells = electron_shells(n)
        assert sum(shells) == n
        assert len(shells) <= 5


class TestLoadElements:
    """Tests for the dataset loader."""

    def test_sorted_by_atomic_number(self, elements_file):
        """Test the loader orders elements."""
        elements = load_elements(elements_file)
        numbers = [el.atomic_number for el in elements]
        assert numbers == sorted(numbers)
        assert elements[0].symbol == "H"

    def test_missing_file(self, tmp_path):
        """Test a missing dataset raises."""
        with pytest.raises(FileNotFoundError):
            load_elements(tmp_path / "nope.json")

    def test_invalid_row(self, tmp_path):
        """Test invalid rows fail validation."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"symbol": "X"}]), encoding="utf-8")
        with pytest.raises(ValidationError):
            load_elements(path)


class TestElementFilter:
    """Tests for search and filters."""

    def test_inactive_by_default(self, elements):
        """Test an empty filter keeps everything."""
        f = ElementFilter()
        assert not f.is_active
        assert f.apply(elements) == elements

    def test_search_by_symbol(self, elements):
        """Test a symbol match is case-insensitive."""
        assert [el.symbol for el in ElementFilter(search="AU").apply(elements)] == ["Au"]

    def test_search_by_name(self, elements):
        """Test a name substring matches."""
        assert [el.symbol for el in ElementFilter(search="plat").apply(elements)] == ["Ag"]

    def test_search_by_number_prefix(self, elements):
        """Test a number matches atomic numbers starting with it."""
        assert [el.symbol for el in ElementFilter(search=" 1 ").apply(elements)] == ["H", "Na"]

    def test_category_and_state(self, elements):
        """Test category and state restrictions combine."""
        f = ElementFilter(category=ElementCategory.TRANSITION_METAL, state=MatterState.SOLID)
        assert f.is_active
        assert [el.symbol for el in f.apply(elements)] == ["Fe", "Ag", "Au"]

    def test_no_match(self, elements):
        """Test a search with no hits."""
        assert ElementFilter(search="zz").apply(elements) == []


class TestToggleCompare:
    """Tests for the comparison selection."""

    def test_select_two(self):
        """Test up to two elements are selected."""
        assert toggle_compare((), 1) == (1,)
        assert toggle_compare((1,), 2) == (1, 2)

    def test_third_replaces_oldest(self):
        """Test a third pick drops the oldest."""
        assert toggle_compare((1, 2), 3) == (2, 3)

    def test_deselect(self):
        """Test clicking a selected element removes it."""
        assert toggle_compare((1, 2), 1) == (2,)

    @given(st.lists(st.integers(min_value=1, max_value=118), max_size=20))
    def test_never_more_than_two(self, clicks: list[int]):
        """Property test: the selection holds at most two distinct elements."""
        selected: tuple[int, ...] = ()
        for n in clicks:
            selected = toggle_compare(selected, n)
            assert len(selected) <= 2
            assert len(set(selected)) == len(selected)


class TestElementFacts:
    """Tests for the generated facts."""

    def test_four_facts(self, by_symbol):
        """Test family, protons, configuration and electronegativity facts."""
        facts = element_facts(by_symbol["Au"])
        assert len(facts) == 4
        assert "familia de los transición" in facts[0]
        assert "79 protones" in facts[1]
        assert "2.54" in facts[3]
        assert "moderada" in facts[3]

    @pytest.mark.parametrize("symbol,phrase", [
        ("Hg", "suele ceder electrones"),
        ("Na", "suele ceder electrones"),
        ("He", "no está bien documentada"),
    ])
    def test_electronegativity_phrase(self, by_symbol, symbol, phrase):
        """Test the phrase depends on the electronegativity."""
        assert phrase in element_facts(by_symbol[symbol])[3]

    def test_strong_attraction(self):
        """Test high electronegativity wording."""
        f = ChemicalElement(atomic_number=9, symbol="F", name="Flúor", atomic_mass=18.998,
                            period=2, group=17, category="halogen", electronegativity=3.98)
        assert "atrae fuertemente" in element_facts(f)[3]
