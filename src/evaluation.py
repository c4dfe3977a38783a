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

import logging
from typing import Optional, Tuple

import numpy as np
from sklearn.datasets import load_iris
from sklearn.metrics import accuracy_score, confusion_matrix, recall_score

from src.classifier import classify_batch
from src.constants import SPECIES_LABELS, SPECIES_MAPPING
from src.schemas.evaluation import EvaluationReport

logger = logging.getLogger(__name__)


def load_reference_dataset() -> Tuple[np.ndarray, np.ndarray]:
    """Load the Iris dataset bundled with scikit-learn."""
    X, y = load_iris(return_X_y=True)
    return X, y


def evaluate_rules(
    X: Optional[np.ndarray] = None,
    y: Optional[np.ndarray] = None,
) -> EvaluationReport:
    """Score the rule-based classifier against labelled measurements.

    Args:
        X: Measurements of shape (n, 4). Defaults to the Iris dataset.
        y: Target indices (0 setosa, 1 versicolor, 2 virginica).

    Returns:
        Accuracy, per-species recall and the confusion matrix.

    Raises:
        ValueError: If only one of X and y is given, or their lengths differ.
    """
    if X is None and y is None:
        X, y = load_reference_dataset()
    elif X is None or y is None:
        raise ValueError("X and y must be given together")
    y = np.asarray(y, dtype=int)
    if len(X) != len(y):
        raise ValueError(
            f"X and y must have the same length, got {len(X)} and {len(y)}"
        )

    label_to_index = {label: index for index, label in SPECIES_MAPPING.items()}
    y_pred = np.array([label_to_index[r.species] for r in classify_batch(X)])

    labels = list(SPECIES_MAPPING)
    accuracy = float(accuracy_score(y, y_pred))
    recalls = recall_score(y, y_pred, labels=labels, average=None, zero_division=0)
    matrix = confusion_matrix(y, y_pred, labels=labels)

    logger.info(f"Rule-based classifier accuracy: {accuracy:.3f} on {len(y)} samples")

    return EvaluationReport(
        n_samples=int(len(y)),
        accuracy=accuracy,
        recall={SPECIES_MAPPING[i]: float(r) for i, r in zip(labels, recalls)},
        species=list(SPECIES_LABELS),
        confusion_matrix=matrix.astype(int).tolist(),
    )
