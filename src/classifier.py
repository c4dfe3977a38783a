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

"""Rule-based Iris species classifier."""

import logging
from typing import List

import numpy as np

from src.constants import (
    DISPLAY_CATEGORIES,
    DISPLAY_STYLES,
    SETOSA,
    SETOSA_CONFIDENCE,
    SETOSA_MAX_PETAL_LENGTH,
    SETOSA_MAX_PETAL_WIDTH,
    VERSICOLOR,
    VERSICOLOR_CONFIDENCE,
    VERSICOLOR_MAX_PETAL_LENGTH,
    VERSICOLOR_MAX_PETAL_WIDTH,
    VERSICOLOR_TYPICAL_CONFIDENCE,
    VERSICOLOR_TYPICAL_MAX_SEPAL_LENGTH,
    VERSICOLOR_TYPICAL_MIN_SEPAL_WIDTH,
    VIRGINICA,
    VIRGINICA_CONFIDENCE,
)
from src.schemas.iris_features import (
    ClassificationResult,
    IrisFeatures,
    PredictionResponse,
)

logger = logging.getLogger(__name__)


def _result(species: str, confidence: int) -> ClassificationResult:
    return ClassificationResult(
        species=species,
        confidence=confidence,
        category=DISPLAY_CATEGORIES[species],
    )


def classify(
    sepal_length: float,
    sepal_width: float,
    petal_length: float,
    petal_width: float,
) -> ClassificationResult:
    """Classify a flower from its four measurements (cm).

    Branches are checked in order and the first match wins. The function
    does not validate its inputs; callers are expected to reject
    non-positive values beforehand.

    Args:
        sepal_length: Sepal length in cm.
        sepal_width: Sepal width in cm.
        petal_length: Petal length in cm.
        petal_width: Petal width in cm.

    Returns:
        The species label, its fixed confidence and display category.
    """
    if petal_length < SETOSA_MAX_PETAL_LENGTH and petal_width < SETOSA_MAX_PETAL_WIDTH:
        logger.debug("Matched setosa branch")
        return _result(SETOSA, SETOSA_CONFIDENCE)

    if (
        petal_length < VERSICOLOR_MAX_PETAL_LENGTH
        and petal_width < VERSICOLOR_MAX_PETAL_WIDTH
    ):
        if (
            sepal_length < VERSICOLOR_TYPICAL_MAX_SEPAL_LENGTH
            and sepal_width > VERSICOLOR_TYPICAL_MIN_SEPAL_WIDTH
        ):
            logger.debug("Matched versicolor branch (typical sepals)")
            return _result(VERSICOLOR, VERSICOLOR_TYPICAL_CONFIDENCE)
        logger.debug("Matched versicolor branch")
        return _result(VERSICOLOR, VERSICOLOR_CONFIDENCE)

    logger.debug("Matched virginica branch")
    return _result(VIRGINICA, VIRGINICA_CONFIDENCE)


def classify_features(features: IrisFeatures) -> ClassificationResult:
    """Classify a validated measurement."""
    return classify(*features.as_list())


def classify_batch(rows) -> List[ClassificationResult]:
    """Classify every row of an (n, 4) array-like of measurements.

    Columns are sepal length, sepal width, petal length, petal width.
    """
    data = np.asarray(rows, dtype=float)
    if data.ndim != 2 or data.shape[1] != 4:
        raise ValueError(
            f"Expected an array of shape (n, 4), got {data.shape}"
        )
    return [classify(*(float(value) for value in row)) for row in data]


def build_response(features: IrisFeatures) -> PredictionResponse:
    """Classify a measurement and wrap the result with its input echo."""
    result = classify_features(features)
    return PredictionResponse(
        species=result.species,
        confidence=result.confidence,
        category=result.category,
        style=DISPLAY_STYLES[result.category],
        measurements=features,
    )
