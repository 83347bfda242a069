import math

import pytest

from bmicalc.calculator import (
    Assessment,
    Category,
    Gender,
    assess,
    calculate_bmi,
    category_markup,
    dge_category,
    scale_marker_margin,
    who_category,
)


@pytest.mark.parametrize(
    "weight,height", [(70, 175), (55.5, 162), (120, 190), (40, 150), (95.3, 181.2)]
)
def test_bmi_is_floored_to_one_decimal(weight, height):
    exact = weight / (height / 100) ** 2
    result = calculate_bmi(weight, height)
    assert result <= exact + 1e-9
    assert exact - result < 0.1
    assert abs(result * 10 - round(result * 10)) < 1e-9


def test_bmi_of_one_metre_equals_weight():
    assert calculate_bmi(100, 100) == 100.0


@pytest.mark.parametrize("height", [0, -10])
def test_non_positive_height_rejected(height):
    with pytest.raises(ValueError):
        calculate_bmi(70, height)


@pytest.mark.parametrize(
    "bmi,expected",
    [
        (10.0, Category.UNDERWEIGHT),
        (18.4, Category.UNDERWEIGHT),
        (18.5, Category.NORMAL),
        (24.9, Category.NORMAL),
        (25.0, Category.OVERWEIGHT),
        (29.9, Category.OVERWEIGHT),
        (30.0, Category.OBESE_I),
        (34.9, Category.OBESE_I),
        (35.0, Category.OBESE_II),
        (39.9, Category.OBESE_II),
        (40.0, Category.OBESE_III),
        (math.inf, Category.OBESE_III),
    ],
)
def test_who_boundaries(bmi, expected):
    assert who_category(bmi) is expected


@pytest.mark.parametrize("bmi", [24.95, 29.95, 34.95, 39.95, math.nan])
def test_who_gaps_are_unclassified(bmi):
    assert who_category(bmi) is None


@pytest.mark.parametrize(
    "bmi,gender,expected",
    [
        (19.5, Gender.MALE, Category.UNDERWEIGHT),
        (19.5, Gender.FEMALE, Category.NORMAL),
        (18.9, Gender.FEMALE, Category.UNDERWEIGHT),
        (20.0, Gender.MALE, Category.NORMAL),
        (24.0, Gender.MALE, Category.NORMAL),
        (24.0, Gender.FEMALE, Category.OVERWEIGHT),
        (24.9, Gender.MALE, Category.NORMAL),
        (25.0, Gender.MALE, Category.OVERWEIGHT),
        (29.9, Gender.FEMALE, Category.OVERWEIGHT),
        (30.0, 1, Category.OBESE_I),
        (35.0, 0, Category.OBESE_II),
        (40.0, Gender.FEMALE, Category.OBESE_III),
    ],
)
def test_dge_boundaries(bmi, gender, expected):
    assert dge_category(bmi, gender) is expected


def test_dge_female_gap_is_unclassified():
    assert dge_category(23.95, Gender.FEMALE) is None


def test_dge_rejects_unknown_gender():
    with pytest.raises(ValueError):
        dge_category(22.0, 5)


def test_marker_is_clamped():
    assert scale_marker_margin(0.0) == 0
    assert scale_marker_margin(100.0) == 310
    assert scale_marker_margin(math.inf) == 310


def test_marker_is_zero_when_unclassified():
    assert scale_marker_margin(24.95) == 0


def test_marker_is_monotonic_and_bounded():
    values = [round(i / 10, 1) for i in range(50, 800)]
    margins = [scale_marker_margin(v) for v in values if who_category(v) is not None]
    assert all(0 <= m <= 310 for m in margins)
    assert all(a <= b for a, b in zip(margins, margins[1:]))


def test_marker_continuity_between_neighbouring_categories():
    assert scale_marker_margin(18.5) == scale_marker_margin(24.9) - 56
    assert scale_marker_margin(24.9) == scale_marker_margin(25.0)
    assert scale_marker_margin(29.9) == scale_marker_margin(30.0)


def test_category_markup_matches_source_format():
    assert category_markup(Category.UNDERWEIGHT, "WHO") == (
        "<span color='#7c7cfc' weight='normal'>Underweight</span>\n"
        "<span size='x-small'>WHO</span>"
    )
    assert category_markup(Category.OBESE_III, "DGE") == (
        "<span color='#dd2599' weight='normal'>Obese (Class III)</span>\n"
        "<span size='x-small'>DGE</span>"
    )


def test_category_markup_empty_for_none():
    assert category_markup(None, "WHO") == ""


def test_category_css_classes():
    assert who_category(22.0).css_class == "normal_weight"
    assert who_category(37.0).css_class == "overweight2"
    assert assess(37, 100, Gender.MALE).css_classes == ("bmi_result", "overweight2")


def test_assess_is_consistent():
    result = assess(70, 175, Gender.FEMALE)
    assert result.bmi == calculate_bmi(70, 175)
    assert result.who is who_category(result.bmi)
    assert result.dge is dge_category(result.bmi, Gender.FEMALE)
    assert result.marker_margin == scale_marker_margin(result.bmi)
    assert result.css_classes == ("bmi_result", result.who.css_class)
    assert result.who_markup.endswith("<span size='x-small'>WHO</span>")
    assert result.dge_markup.endswith("<span size='x-small'>DGE</span>")


def test_assessment_without_category():
    result = Assessment(bmi=24.95, who=None, dge=None, marker_margin=0)
    assert result.css_classes == ("bmi_result", "")
    assert result.who_markup == ""