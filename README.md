# bmicalc

bmicalc works out a body mass index (BMI) from a weight in kilograms and a height in
centimetres. It also tells you which weight category the result falls into under two
standards:

- **WHO**: underweight, normal range, overweight, and obese classes I to III.
- **DGE**: the same categories, except that the underweight, normal and overweight
  limits depend on gender.

The BMI is rounded down to one decimal place. Some values fall in the gaps between
ranges, for example 24.95. Such a value has no category and is shown as
"unclassified".

## Installation

```
pip install .
```

## Command line

Give the weight in kilograms and the height in centimetres:

```
bmicalc 70 175
```

This prints:

```
BMI: 22.8
WHO: Normal range
DGE: Normal range
```

Options:

- `--gender {male,female}` chooses the gender for the DGE classification. The default
  is `male`.
- `--version` prints the version.
- `--help` lists the arguments.

bmicalc reports an error and exits if the weight or the height is not a number, or if
the height is zero or negative.

## Library

```python
from bmicalc.calculator import Gender, assess, calculate_bmi, who_category

bmi = calculate_bmi(70, 175)        # 22.8
category = who_category(bmi)        # Category.NORMAL

assessment = assess(70, 175, Gender.FEMALE)
assessment.bmi            # 22.8
assessment.who            # Category.NORMAL
assessment.dge            # Category.NORMAL
assessment.marker_margin  # position of the result on a graphical scale
```

`calculate_bmi` raises `ValueError` if the height is not positive.

The `bmicalc.calculator` module contains:

- `Gender`, which has the members `MALE` (0) and `FEMALE` (1).
- `Category`, one member for each weight category. Each member has `css_class`, `label`
  and `color`.
- `who_category(bmi)` and `dge_category(bmi, gender)`. Each returns a `Category`, or
  `None` for a value between ranges.
- `scale_marker_margin(bmi)`, the horizontal offset in pixels of a marker on a BMI
  scale of 56-pixel segments, limited to 0–310.
- `category_markup(category, standard)`, which returns a coloured Pango-style markup
  label such as `"WHO"` or `"DGE"`.
- `Assessment`, a frozen dataclass. Besides its fields it has the properties
  `css_classes`, `who_markup` and `dge_markup`.

`bmicalc.cli.format_report(assessment)` turns an assessment into the text that the
command prints.

To check what a user typed before you calculate, use `bmicalc.validation`:

- `parse_number(text)` returns an `int` or a `float`, or `None` if the text is not a
  number. It does not accept surrounding whitespace.
- `is_valid_entry(text)` returns whether the text is a number.
- `can_calculate(weight_text, height_text)` returns whether both entries are non-empty
  numbers.

## What it does not do

bmicalc has no graphical window. It is a command-line tool and a library. The
calculation, the validation and the scale-marker position are there for a front end to
use, but the package does not include one.

## Running the tests

```
pip install .[test]
pytest
```