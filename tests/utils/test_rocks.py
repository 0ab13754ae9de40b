import pytest

from utils.rocks import RockType, ROCK_TYPES, DEFAULT_ROCK_TYPE, PIN_COLORS, pin_color, label


def test_rock_types_order_and_default():
    assert [r.value for r in ROCK_TYPES] == ["Petoskey", "Quartz", "Copper", "Agate", "Other"]
    assert DEFAULT_ROCK_TYPE is RockType.PETOSKEY


def test_every_rock_type_has_one_color():
    assert set(PIN_COLORS) == set(RockType)
    assert len(set(PIN_COLORS.values())) == len(RockType)


@pytest.mark.parametrize(
    "rock_type,color",
    [
        ("Petoskey", "#2563EB"),
        ("Quartz", "#16A34A"),
        ("Copper", "#D97706"),
        ("Agate", "#F97316"),
        ("Other", "#6B7280"),
    ],
)
def test_pin_color(rock_type, color):
    assert pin_color(rock_type) == color
    assert pin_color(RockType(rock_type)) == color


def test_pin_color_unknown_type():
    with pytest.raises(ValueError):
        pin_color("Granite")


def test_label_passthrough():
    assert label(RockType.AGATE) == "Agate"
    assert label("Other") == "Other"
