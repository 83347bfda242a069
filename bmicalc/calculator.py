"""Body-mass-index calculation and classification by WHO and DGE ranges."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum

SCALE_SEGMENT_WIDTH = 56.0
MARKER_OFFSET = 13.0
MAX_MARKER_MARGIN = 310.0


class Gender(IntEnum):
    """Gender choice as offered by the input form."""

    MALE = 0
    FEMALE = 1


class Category(Enum):
    """Weight category with its style class, label and colour."""

    UNDERWEIGHT = ("underweight", "Underweight", "#7c7cfc")
    NORMAL = ("normal_weight", "Normal range", "#00aa00")
    OVERWEIGHT = ("overweight", "Overweight", "#e7b632")
    OBESE_I = ("overweight1", "Obese (Class I)", "#ff8b66")
    OBESE_II = ("overweight2", "Obese (Class II)", "#ee6080")
    OBESE_III = ("overweight3", "Obese (Class III)", "#dd2599")

    def __init__(self, css_class: str, label: str, color: str) -> None:
        self.css_class = css_class
        self.label = label
        self.color = color


# Lower bound, width of the range and scale segment for each WHO category.
_SCALE = {
    Category.UNDERWEIGHT: (18.5, 8.0, 1),
    Category.NORMAL: (18.5, 24.9 - 18.5, 1),
    Category.OVERWEIGHT: (25.0, 29.9 - 25.0, 2),
    Category.OBESE_I: (30.0, 34.9 - 30.0, 3),
    Category.OBESE_II: (35.0, 39.9 - 35.0, 4),
    Category.OBESE_III: (40.0, 60.0 - 40.0, 5),
}


def calculate_bmi(weight: float, height: float) -> float:
    """Return the BMI for a weight in kg and a height in cm, floored to one decimal."""
    if height <= 0:
        raise ValueError(f"height must be positive, got {height!r}")
    metres = height / 100.0
    return math.floor(weight / (metres * metres) * 10.0) / 10.0


def who_category(bmi: float) -> Category | None:
    """Classify a BMI by the WHO ranges; None if it falls between ranges."""
    if bmi < 18.5:
        return Category.UNDERWEIGHT
    if 18.5 <= bmi <= 24.9:
        return Category.NORMAL
    if 25.0 <= bmi <= 29.9:
        return Category.OVERWEIGHT
    if 30.0 <= bmi <= 34.9:
        return Category.OBESE_I
    if 35.0 <= bmi <= 39.9:
        return Category.OBESE_II
    if bmi >= 40.0:
        return Category.OBESE_III
    return None


def dge_category(bmi: float, gender: Gender | int) -> Category | None:
    """Classify a BMI by the gender-specific DGE ranges; None if unclassified."""
    gender = Gender(gender)
    male = gender is Gender.MALE
    female = gender is Gender.FEMALE
    if (bmi < 20.0 and male) or (bmi < 19.0 and female):
        return Category.UNDERWEIGHT
    if (20.0 <= bmi <= 24.9 and male) or (19.0 <= bmi <= 23.9 and female):
        return Category.NORMAL
    if (25.0 <= bmi <= 29.9 and male) or (24.0 <= bmi <= 29.9 and female):
        return Category.OVERWEIGHT
    if 30.0 <= bmi <= 34.9:
        return Category.OBESE_I
    if 35.0 <= bmi <= 39.9:
        return Category.OBESE_II
    if bmi >= 40.0:
        return Category.OBESE_III
    return None


def scale_marker_margin(bmi: float) -> int:
    """Return the horizontal offset of the marker on the BMI scale."""
    category = who_category(bmi)
    if category is None:
        return 0
    low, span, segment = _SCALE[category]
    margin = (
        SCALE_SEGMENT_WIDTH / span * (bmi - low)
        + SCALE_SEGMENT_WIDTH * segment
        - MARKER_OFFSET
    )
    if category is Category.UNDERWEIGHT:
        margin = max(margin, 0.0)
    elif category is Category.OBESE_III:
        margin = min(margin, MAX_MARKER_MARGIN)
    return int(math.floor(margin))


def category_markup(category: Category | None, standard: str) -> str:
    """Return the markup describing a category under a named standard."""
    if category is None:
        return ""
    return (
        f"<span color='{category.color}' weight='normal'>{category.label}</span>\n"
        f"<span size='x-small'>{standard}</span>"
    )


@dataclass(frozen=True)
class Assessment:
    """Result of evaluating one weight, height and gender."""

    bmi: float
    who: Category | None
    dge: Category | None
    marker_margin: int

    @property
    def css_classes(self) -> tuple[str, str]:
        return ("bmi_result", self.who.css_class if self.who else "")

    @property
    def who_markup(self) -> str:
        return category_markup(self.who, "WHO")

    @property
    def dge_markup(self) -> str:
        return category_markup(self.dge, "DGE")


def assess(weight: float, height: float, gender: Gender | int = Gender.MALE) -> Assessment:
    """Compute the BMI and classify it by both standards."""
    bmi = calculate_bmi(weight, height)
    return Assessment(
        bmi=bmi,
        who=who_category(bmi),
        dge=dge_category(bmi, gender),
        marker_margin=scale_marker_margin(bmi),
    )