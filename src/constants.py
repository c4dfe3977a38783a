# Species labels returned by the rule-based classifier
SETOSA = "Iris Setosa"
VERSICOLOR = "Iris Versicolor"
VIRGINICA = "Iris Virginica"

SPECIES_LABELS = (SETOSA, VERSICOLOR, VIRGINICA)

# Map dataset target indices to species labels - matches sklearn's load_iris ordering.
SPECIES_MAPPING = {0: SETOSA, 1: VERSICOLOR, 2: VIRGINICA}

# Decision thresholds in centimeters. These are fixed, not tunable.
SETOSA_MAX_PETAL_LENGTH = 2.5
SETOSA_MAX_PETAL_WIDTH = 1.0
VERSICOLOR_MAX_PETAL_LENGTH = 5.0
VERSICOLOR_MAX_PETAL_WIDTH = 1.8
VERSICOLOR_TYPICAL_MAX_SEPAL_LENGTH = 6.0
VERSICOLOR_TYPICAL_MIN_SEPAL_WIDTH = 2.8

# Confidence percentage attached to each decision branch
SETOSA_CONFIDENCE = 95
VERSICOLOR_TYPICAL_CONFIDENCE = 88
VERSICOLOR_CONFIDENCE = 82
VIRGINICA_CONFIDENCE = 90

# Every confidence a species can be returned with, in branch order
BRANCH_CONFIDENCES = {
    SETOSA: [SETOSA_CONFIDENCE],
    VERSICOLOR: [VERSICOLOR_TYPICAL_CONFIDENCE, VERSICOLOR_CONFIDENCE],
    VIRGINICA: [VIRGINICA_CONFIDENCE],
}

# Display category per species, used only for styling the result badge
DISPLAY_CATEGORIES = {
    SETOSA: "setosa",
    VERSICOLOR: "versicolor",
    VIRGINICA: "virginica",
}

DISPLAY_STYLES = {
    "setosa": "bg-green-100 text-green-800 border-green-200",
    "versicolor": "bg-blue-100 text-blue-800 border-blue-200",
    "virginica": "bg-purple-100 text-purple-800 border-purple-200",
}

# Form field names in input order, with their human-readable labels
MEASUREMENT_FIELDS = {
    "sepal_length": "Sepal Length",
    "sepal_width": "Sepal Width",
    "petal_length": "Petal Length",
    "petal_width": "Petal Width",
}

MODEL_NAME = "iris-rule-classifier"
