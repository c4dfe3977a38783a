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

from typing import List

from pydantic import BaseModel


class ApiEndpoints(BaseModel):
    """URLs for the API endpoints."""

    root: str
    health: str
    species: str
    predict: str
    predict_form: str
    predict_batch: str


class ApiInfo(BaseModel):
    """Response model for the root endpoint."""

    message: str
    endpoints: ApiEndpoints
    model: str
    version: str
    environment: str
    timestamp: str


class SpeciesInfo(BaseModel):
    """A species the classifier can return, with its branch confidences."""

    species: str
    confidences: List[int]
    category: str
    style: str


class ValidationNotice(BaseModel):
    """Body returned when form input is rejected."""

    detail: str
    fields: List[str]
