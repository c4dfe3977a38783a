"""
Tests for form input validation.
"""

import pytest
from pydantic import ValidationError

from src.schemas.iris_features import IrisFeatures, MeasurementForm
from src.utils.validation import (
    INVALID_NOTICE,
    MISSING_NOTICE,
    NON_POSITIVE_NOTICE,
    InvalidMeasurementError,
    MeasurementValidationError,
    MissingMeasurementError,
    NonPositiveMeasurementError,
    error_from_field_errors,
    parse_measurements,
)


def _form(sl="5.1", sw="3.5", pl="1.4", pw="0.2"):
    return {
        "sepal_length": sl,
        "sepal_width": sw,
        "petal_length": pl,
        "petal_width": pw,
    }


def test_parse_valid_form():
    """Test that well-formed text becomes an IrisFeatures."""
    features = parse_measurements(_form(pw=" 0.2 "))

    assert features == IrisFeatures(
        sepal_length=5.1, sepal_width=3.5, petal_length=1.4, petal_width=0.2
    )


def test_parse_accepts_measurement_form_model():
    form = MeasurementForm(**_form())

    assert parse_measurements(form).petal_length == pytest.approx(1.4)


@pytest.mark.parametrize("value", ["", "   ", None])
def test_missing_field(value):
    """Test that an empty field gives the fill-in notice."""
    with pytest.raises(MissingMeasurementError) as exc_info:
        parse_measurements(_form(sl=value))

    assert exc_info.value.notice == MISSING_NOTICE
    assert exc_info.value.fields == ["sepal_length"]


def test_absent_key_counts_as_missing():
    form = _form()
    del form["petal_width"]

    with pytest.raises(MissingMeasurementError):
        parse_measurements(form)


@pytest.mark.parametrize("value", ["abc", "1.2.3", "nan", "inf", "-inf"])
def test_invalid_number(value):
    """Test that text that is not a finite number gives the valid-numbers notice."""
    with pytest.raises(InvalidMeasurementError) as exc_info:
        parse_measurements(_form(pl=value))

    assert exc_info.value.notice == INVALID_NOTICE
    assert exc_info.value.fields == ["petal_length"]


@pytest.mark.parametrize("value", ["0", "-1.5", "0.0"])
def test_non_positive(value):
    """Test that zero or negative values give the positive-values notice."""
    with pytest.raises(NonPositiveMeasurementError) as exc_info:
        parse_measurements(_form(sw=value))

    assert exc_info.value.notice == NON_POSITIVE_NOTICE


def test_zero_sepal_length_rejected():
    with pytest.raises(NonPositiveMeasurementError):
        parse_measurements(_form(sl="0", sw="3.0", pl="1.0", pw="0.2"))


def test_missing_reported_before_invalid():
    """Test that an empty field wins over a malformed one elsewhere."""
    with pytest.raises(MissingMeasurementError):
        parse_measurements(_form(sl="", pw="abc"))


def test_invalid_reported_before_non_positive():
    with pytest.raises(InvalidMeasurementError):
        parse_measurements(_form(sl="-1", pw="abc"))


def test_all_offending_fields_reported():
    with pytest.raises(NonPositiveMeasurementError) as exc_info:
        parse_measurements(_form(sl="0", pl="-2"))

    assert exc_info.value.fields == ["sepal_length", "petal_length"]


def test_errors_are_value_errors():
    assert issubclass(MeasurementValidationError, ValueError)


@pytest.mark.parametrize("value", [0, -1.0, float("nan"), float("inf")])
def test_iris_features_rejects_bad_numbers(value):
    """Test that the numeric model enforces the same contract."""
    with pytest.raises(ValidationError):
        IrisFeatures(
            sepal_length=value, sepal_width=3.0, petal_length=1.0, petal_width=0.2
        )


def test_field_errors_map_to_notices():
    """Test that pydantic field errors become the matching form error."""
    errors = [
        {"type": "greater_than", "loc": ("body", "petal_width")},
        {"type": "greater_than", "loc": ("body", "sepal_length")},
    ]

    error = error_from_field_errors(errors)

    assert isinstance(error, NonPositiveMeasurementError)
    assert error.fields == ["sepal_length", "petal_width"]


def test_field_errors_rank_missing_first():
    errors = [
        {"type": "float_parsing", "loc": ("body", "sepal_width")},
        {"type": "missing", "loc": ("body", "petal_length")},
        {"type": "greater_than", "loc": ("body", "sepal_length")},
    ]

    error = error_from_field_errors(errors)

    assert isinstance(error, MissingMeasurementError)
    assert error.fields == ["petal_length"]


@pytest.mark.parametrize(
    "errors",
    [
        [],
        [{"type": "model_attributes_type", "loc": ("body",)}],
        [{"type": "greater_than", "loc": ("body", "stem_length")}],
        [{"type": "less_than", "loc": ("body", "sepal_length")}],
    ],
)
def test_field_errors_not_mapped(errors):
    assert error_from_field_errors(errors) is None
