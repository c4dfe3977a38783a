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

"""State of the predictor form: four text fields and the latest result."""

import asyncio
import logging
import time
from typing import Dict, List, Optional

from src.classifier import build_response
from src.constants import MEASUREMENT_FIELDS
from src.schemas.iris_features import PredictionResponse
from src.utils.validation import parse_measurements

logger = logging.getLogger(__name__)


class PredictionInProgressError(RuntimeError):
    """Raised when a prediction is requested while another is running."""


class PredictorSession:
    """Holds the form values and the most recent prediction.

    Args:
        delay_seconds: Artificial pause before a result is stored. Zero
            disables it.
    """

    def __init__(self, delay_seconds: float = 1.0):
        if delay_seconds < 0:
            raise ValueError(f"delay_seconds must be >= 0, got {delay_seconds}")
        self.delay_seconds = delay_seconds
        self.measurements: Dict[str, str] = {field: "" for field in MEASUREMENT_FIELDS}
        self.prediction: Optional[PredictionResponse] = None
        self.is_loading = False

    def update_field(self, field: str, value: str) -> None:
        """Replace the text of one measurement field."""
        if field not in self.measurements:
            raise KeyError(f"Unknown measurement field: {field}")
        self.measurements[field] = value

    def _begin(self):
        if self.is_loading:
            raise PredictionInProgressError("A prediction is already in progress")
        # Validation errors leave the previous prediction in place
        features = parse_measurements(self.measurements)
        self.is_loading = True
        return features

    def _finish(self, features) -> PredictionResponse:
        response = build_response(features)
        self.prediction = response
        logger.info(
            f"Predicted {response.species} with {response.confidence}% confidence"
        )
        return response

    def predict(self) -> PredictionResponse:
        """Validate the form, wait for the configured delay and classify."""
        features = self._begin()
        try:
            if self.delay_seconds:
                time.sleep(self.delay_seconds)
            return self._finish(features)
        finally:
            self.is_loading = False

    async def predict_async(self) -> PredictionResponse:
        """Async variant of predict that awaits the delay instead of blocking."""
        features = self._begin()
        try:
            if self.delay_seconds:
                await asyncio.sleep(self.delay_seconds)
            return self._finish(features)
        finally:
            self.is_loading = False

    def reset(self) -> None:
        """Clear all fields and discard the current prediction."""
        self.measurements = {field: "" for field in MEASUREMENT_FIELDS}
        self.prediction = None
        logger.debug("Form reset")

    def summary(self) -> List[str]:
        """Echo of the inputs as entered, one line per measurement."""
        return [
            f"{label}: {self.measurements[field]} cm"
            for field, label in MEASUREMENT_FIELDS.items()
        ]
