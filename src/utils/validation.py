# Apache Software License 2.0
#
# Copyright (c) ZenML GmbH 2025. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""Validation of form text into classifier-ready measurements."""

import logging
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from src.constants import MEASUREMENT_FIELDS
from src.schemas.iris_features import IrisFeatures, MeasurementForm

logger = logging.getLogger(__name__)

MISSING_NOTICE = "Please fill in all measurements"
INVALID_NOTICE = "Please enter valid numbers"
NON_POSITIVE_NOTICE = "Please enter positive values"


class MeasurementValidationError(ValueError):
    """Raised when form input cannot be turned into a measurement."""

    notice = "Invalid measurements"

    def __init__(self, fields: List[str]):
        self.fields = list(fields)
        super().__init__(f"{self.notice}: {', '.join(self.fields)}")


class MissingMeasurementError(MeasurementValidationError):
    notice = MISSING_NOTICE


class InvalidMeasurementError(MeasurementValidationError):
    notice = INVALID_NOTICE


class NonPositiveMeasurementError(MeasurementValidationError):
    notice = NON_POSITIVE_NOTICE


def _parse_float(text: str) -> Optional[float]:
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_measurements(
    form: Union[MeasurementForm, Mapping[str, Optional[str]]],
) -> IrisFeatures:
    """Turn the four text fields of the form into an IrisFeatures.

    Each check runs over all four fields before the next one starts, so
    an empty field is always reported ahead of a malformed one.

    Args:
        form: A MeasurementForm or a mapping of field name to text.

    Returns:
        The validated measurement.

    Raises:
        MissingMeasurementError: If any field is empty.
        InvalidMeasurementError: If any field is not a finite number.
        NonPositiveMeasurementError: If any value is zero or negative.
    """
    raw = form.model_dump() if isinstance(form, MeasurementForm) else dict(form)

    texts: Dict[str, str] = {}
    missing = []
    for field in MEASUREMENT_FIELDS:
        value = raw.get(field)
        text = "" if value is None else str(value).strip()
        if not text:
            missing.append(field)
        texts[field] = text
    if missing:
        raise MissingMeasurementError(missing)

    values: Dict[str, float] = {}
    invalid = []
    for field, text in texts.items():
        parsed = _parse_float(text)
        if parsed is None:
            invalid.append(field)
        else:
            values[field] = parsed
    if invalid:
        raise InvalidMeasurementError(invalid)

    non_positive = [field for field, value in values.items() if value <= 0]
    if non_positive:
        raise NonPositiveMeasurementError(non_positive)

    logger.debug(f"Parsed measurements: {values}")
    return IrisFeatures(**values)


# pydantic error types for IrisFeatures fields, grouped by the notice they map to
_ERROR_TYPES = (
    (MissingMeasurementError, {"missing"}),
    (InvalidMeasurementError, {"float_parsing", "float_type", "finite_number"}),
    (NonPositiveMeasurementError, {"greater_than"}),
)


def error_from_field_errors(
    errors: Iterable[Mapping[str, Any]],
) -> Optional[MeasurementValidationError]:
    """Map pydantic errors on IrisFeatures fields to a form validation error.

    Errors are ranked like parse_measurements ranks its checks, so a missing
    field wins over a malformed one. Returns None when any error does not
    concern a single measurement field, e.g. a body that is not an object.
    """
    by_type: Dict[str, List[str]] = {}
    for error in errors:
        loc = error.get("loc") or ()
        field = loc[-1] if loc else None
        if field not in MEASUREMENT_FIELDS:
            return None
        by_type.setdefault(error.get("type"), []).append(field)

    known = set().union(*(types for _, types in _ERROR_TYPES))
    if not by_type or set(by_type) - known:
        return None

    for error_cls, types in _ERROR_TYPES:
        fields = [field for t in types if t in by_type for field in by_type[t]]
        if fields:
            ordered = [field for field in MEASUREMENT_FIELDS if field in fields]
            return error_cls(ordered)
    return None
