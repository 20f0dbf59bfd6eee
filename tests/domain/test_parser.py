"""Tests for free-text grocery entry parsing."""
import pytest

from hogar.domain.parser import parse_grocery_entry, UNIT_KEYWORDS
from hogar.domain.types import ParsedGroceryEntry


@pytest.mark.parametrize("text, name, quantity, unit", [
    ("2 litros de leche", "Leche", 2, "litros"),
    ("Pan integral", "Pan integral", 1, None),
    ("6 manzanas", "Manzanas", 6, None),
    ("1/2 kg de pollo", "Pollo", 0.5, "kg"),
    ("detergente", "Detergente", 1, None),
])
def test_parse_examples(text, name, quantity, unit):
    """Test the reference grocery entries."""
    entry = parse_grocery_entry(text)
    assert isinstance(entry, ParsedGroceryEntry)
    assert entry.name == name
    assert entry.quantity == quantity
    assert entry.unit == unit


def test_integer_between_words():
    """Test an integer token between two words is taken as quantity."""
    entry = parse_grocery_entry("huevos 12 rojos")
    assert entry.quantity == 12
    assert "12" not in entry.name
    assert entry.name == "Huevos rojos"


def test_decimal_quantity():
    """Test dot-separated decimals."""
    entry = parse_grocery_entry("1.5 kg de arroz")
    assert entry.quantity == 1.5
    assert entry.unit == "kg"
    assert entry.name == "Arroz"


@pytest.mark.parametrize("fraction, expected", [
    ("1/2", 0.5),
    ("3/4", 0.75),
    ("1/3", 1 / 3),
    ("5/2", 2.5),
])
def test_fraction_quantity(fraction, expected):
    """Test simple fractions become numerator divided by denominator."""
    entry = parse_grocery_entry(f"{fraction} de queso")
    assert entry.quantity == pytest.approx(expected)
    assert entry.name == "Queso"


def test_zero_denominator_is_not_a_quantity():
    """Test a fraction over zero is left in the name and never raises."""
    entry = parse_grocery_entry("3/0 tomates")
    assert entry.quantity == 1
    assert entry.name == "3/0 tomates"


@pytest.mark.parametrize("token", [
    "1" * 400 + "/3",
    "1" * 5000 + "/2",
    "3/" + "9" * 400,
    "1" * 5000,
    "1234567890",
    "1." + "5" * 20,
])
def test_oversized_numbers_stay_in_name(token):
    """Test numeric tokens too long to be a quantity are kept as text."""
    entry = parse_grocery_entry(f"{token} manzanas")
    assert entry.quantity == 1
    assert entry.name == f"{token} manzanas"


@pytest.mark.parametrize("text, quantity", [
    ("007 huevos", 7),
    ("999999999 huevos", 999999999),
    ("000000001/000000002 queso", 0.5),
])
def test_padded_and_large_numbers(text, quantity):
    """Test zero-padded and nine-digit numbers are still quantities."""
    assert parse_grocery_entry(text).quantity == quantity


@pytest.mark.parametrize("token", ["٣", "３", "३/४", "²"])
def test_non_ascii_digits_are_not_quantities(token):
    """Test only ASCII digits count as quantities."""
    entry = parse_grocery_entry(f"{token} manzanas")
    assert entry.quantity == 1
    assert entry.name == f"{token} manzanas"


def test_no_number_defaults_to_one():
    """Test missing quantities default to 1."""
    entry = parse_grocery_entry("queso campesino")
    assert entry.quantity == 1
    assert entry.unit is None


def test_attached_digits_are_not_a_quantity():
    """Test digits inside a word are not a standalone token."""
    entry = parse_grocery_entry("xyz123unknown")
    assert entry.quantity == 1
    assert entry.unit is None
    assert entry.name == "Xyz123unknown"


@pytest.mark.parametrize("unit", UNIT_KEYWORDS)
def test_every_unit_keyword(unit):
    """Test each unit keyword is recognised and removed from the name."""
    entry = parse_grocery_entry(f"3 {unit} azucar")
    assert entry.unit == unit
    assert entry.quantity == 3
    assert entry.name == "Azucar"


@pytest.mark.parametrize("text, unit", [
    ("2 kilos de papa", "kilos"),
    ("500 gramos de carne molida", "gramos"),
    ("3 cajas de huevos", "cajas"),
    ("2 botellas de vino", "botellas"),
    ("4 paquetes de galletas", "paquetes"),
    ("6 unidades de pan", "unidades"),
    ("2 kgs de arroz", "kgs"),
])
def test_plural_units(text, unit):
    """Test units are recognised with a trailing plural."""
    entry = parse_grocery_entry(text)
    assert entry.unit == unit
    assert unit not in entry.name.lower().split()


def test_unit_is_case_insensitive():
    """Test units written in upper case are normalized."""
    entry = parse_grocery_entry("2 Litros de Jugo")
    assert entry.unit == "litros"
    assert entry.name == "Jugo"


def test_unit_inside_word_is_ignored():
    """Test unit keywords only match whole tokens."""
    entry = parse_grocery_entry("gelatina")
    assert entry.unit is None
    assert entry.name == "Gelatina"


def test_first_quantity_and_unit_win():
    """Test later numbers and units stay in the name."""
    entry = parse_grocery_entry("2 bananas 3 kg")
    assert entry.quantity == 2
    assert entry.unit == "kg"
    assert entry.name == "Bananas 3"


def test_quantity_is_removed_before_unit_scan():
    """Test the quantity token cannot be read as part of the unit."""
    entry = parse_grocery_entry("1 l de leche 2 ml")
    assert entry.quantity == 1
    assert entry.unit == "l"
    assert entry.name == "Leche 2 ml"


def test_linking_word_only_removed_as_token():
    """Test "de" inside words is kept."""
    entry = parse_grocery_entry("1 kg de dedos de queso")
    assert entry.name == "Dedos queso"


def test_whitespace_collapsed():
    """Test repeated whitespace is collapsed and trimmed."""
    entry = parse_grocery_entry("   2    litros   de    leche   ")
    assert entry.name == "Leche"


@pytest.mark.parametrize("text", ["", "   ", "2 kg", "3 de", "1/2 litros de"])
def test_empty_name(text):
    """Test inputs with nothing left for the name give an empty name."""
    entry = parse_grocery_entry(text)
    assert entry.name == ""


def test_non_string_input():
    """Test non-text input is treated as empty."""
    entry = parse_grocery_entry(None)
    assert entry.name == ""
    assert entry.quantity == 1
    assert entry.unit is None


def test_parse_is_deterministic():
    """Test parsing the same text twice gives equal entries."""
    assert parse_grocery_entry("2 litros de leche") == parse_grocery_entry("2 litros de leche")
