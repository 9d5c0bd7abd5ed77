"""Harris-Benedict BMR: input parsing, validation and calculation."""
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

# -------- Accepted ranges (inclusive; metric) --------
RANGES = {
    "age": (1, 120),         # years
    "height": (50.0, 250.0),  # cm
    "weight": (20.0, 300.0),  # kg
}

MESSAGES = {
    "age": "please enter a valid age (1–120)",
    "height": "please enter a valid height (50–250 cm)",
    "weight": "please enter a valid weight (20–300 kg)",
}


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"

    @classmethod
    def from_raw(cls, raw) -> "Gender":
        # Two-way branch: anything that is not exactly "male" is female.
        return cls.MALE if raw == cls.MALE.value else cls.FEMALE


@dataclass(frozen=True)
class Measurement:
    gender: Gender
    age: int
    height: float
    weight: float


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    message: str = ""


@dataclass(frozen=True)
class Calculated:
    bmr: int
    ok: bool = True


@dataclass(frozen=True)
class InvalidInput:
    """Rejected input; ``message`` is one of the fixed MESSAGES."""
    message: str
    ok: bool = False


# -------- Raw form parsing --------
_INT_PREFIX = re.compile(r"[+-]?[0-9]+")
_FLOAT_PREFIX = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?", re.ASCII)


def parse_int(raw) -> Optional[int]:
    """Leading integer of ``raw`` ("30" and "30.7" -> 30), else None."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return None if not math.isfinite(raw) else int(raw)
    m = _INT_PREFIX.match(str(raw).strip())
    if not m:
        return None
    try:
        return int(m.group(0))
    except ValueError:
        # past the interpreter's int-from-str digit limit
        return None


def parse_float(raw) -> Optional[float]:
    """Leading decimal number of ``raw`` ("175cm" -> 175.0), else None."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return None
        return None if math.isnan(value) else value
    m = _FLOAT_PREFIX.match(str(raw).strip())
    # Out-of-range exponents come back as inf and fail the range check.
    return float(m.group(0)) if m else None


# -------- Validation --------
def _present(value) -> bool:
    return value is not None and not (isinstance(value, float) and math.isnan(value))


def _in_range(name, value) -> bool:
    lo, hi = RANGES[name]
    return _present(value) and lo <= value <= hi


def validate_inputs(age, height, weight) -> ValidationResult:
    """Check age, height and weight in that order; the first failure wins."""
    for name, value in (("age", age), ("height", height), ("weight", weight)):
        if not _in_range(name, value):
            return ValidationResult(False, MESSAGES[name])
    return ValidationResult(True, "")


# -------- Calculation --------
def round_half_up(x: float) -> int:
    # Ties go toward +infinity; the builtin round() would round ties to even.
    return int(math.floor(x + 0.5))


def calculate_bmr(gender: Union[Gender, str], age: float, height: float, weight: float) -> int:
    """
    Harris-Benedict BMR in kcal/day, rounded to the nearest integer.

    male:   88.362 + 13.397*weight + 4.799*height - 5.677*age
    female: 447.593 + 9.247*weight + 3.098*height - 4.330*age
    """
    if Gender.from_raw(gender) is Gender.MALE:
        bmr = 88.362 + (13.397 * weight) + (4.799 * height) - (5.677 * age)
    else:
        bmr = 447.593 + (9.247 * weight) + (3.098 * height) - (4.330 * age)
    return round_half_up(bmr)


def perform_calculation(raw_gender, raw_age, raw_height, raw_weight) -> Union[Calculated, InvalidInput]:
    age = parse_int(raw_age)
    height = parse_float(raw_height)
    weight = parse_float(raw_weight)

    validation = validate_inputs(age, height, weight)
    if not validation.is_valid:
        return InvalidInput(validation.message)

    m = Measurement(Gender.from_raw(raw_gender), age, height, weight)
    return Calculated(calculate_bmr(m.gender, m.age, m.height, m.weight))
