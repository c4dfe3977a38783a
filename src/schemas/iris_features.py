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

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class IrisFeatures(BaseModel):
    """Request model for iris classification."""

    sepal_length: float = Field(..., gt=0, allow_inf_nan=False, description="Sepal length in cm")
    sepal_width: float = Field(..., gt=0, allow_inf_nan=False, description="Sepal width in cm")
    petal_length: float = Field(..., gt=0, allow_inf_nan=False, description="Petal length in cm")
    petal_width: float = Field(..., gt=0, allow_inf_nan=False, description="Petal width in cm")

    def as_list(self) -> List[float]:
        """Return the measurements in classifier column order."""
        return [
            self.sepal_length,
            self.sepal_width,
            self.petal_length,
            self.petal_width,
        ]


class MeasurementForm(BaseModel):
    """Raw form input, as typed by the user."""

    sepal_length: Optional[str] = ""
    sepal_width: Optional[str] = ""
    petal_length: Optional[str] = ""
    petal_width: Optional[str] = ""


class ClassificationResult(BaseModel):
    """Outcome of a single classifier call."""

    model_config = ConfigDict(frozen=True)

    species: str
    confidence: int = Field(..., ge=0, le=100)
    category: str


class PredictionResponse(BaseModel):
    """Response model for iris classification."""

    species: str
    confidence: int
    category: str
    style: str
    measurements: IrisFeatures
