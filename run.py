"""Entrypoint script to classify iris measurements, score the rules, or serve the API."""

import argparse
import logging
import sys

from src.evaluation import evaluate_rules
from src.session import PredictorSession
from src.utils.constants import ENVIRONMENTS, load_settings
from src.utils.validation import MeasurementValidationError

logger = logging.getLogger(__name__)


def non_negative_float(text: str) -> float:
    """argparse type for a float that must be zero or more."""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{text}'")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Predict Iris species from flower measurements"
    )
    parser.add_argument(
        "--classify",
        nargs=4,
        metavar=("SEPAL_LENGTH", "SEPAL_WIDTH", "PETAL_LENGTH", "PETAL_WIDTH"),
        help="Classify one flower from its measurements in cm",
    )
    parser.add_argument(
        "--evaluate",
        action="store_true",
        help="Score the rules against the reference Iris dataset",
    )
    parser.add_argument("--serve", action="store_true", help="Run the HTTP API")
    parser.add_argument(
        "-e",
        "--environment",
        type=str,
        default=None,
        choices=list(ENVIRONMENTS),
        help="Config environment to load (defaults to APP_ENVIRONMENT or the common config).",
    )
    parser.add_argument(
        "--delay",
        type=non_negative_float,
        default=None,
        help="Override the artificial delay before a result is shown, in seconds",
    )
    parser.add_argument("--host", type=str, default=None, help="API host")
    parser.add_argument("--port", type=int, default=None, help="API port")
    return parser


def classify_command(values, delay_seconds: float) -> int:
    """Run the form flow for one set of text measurements."""
    session = PredictorSession(delay_seconds=delay_seconds)
    for field, value in zip(session.measurements, values):
        session.update_field(field, value)

    try:
        result = session.predict()
    except MeasurementValidationError as e:
        logger.error(f"❌ {e.notice} ({', '.join(e.fields)})")
        return 1

    print(f"Species: {result.species}")
    print(f"Confidence: {result.confidence}%")
    print("Input Summary:")
    for line in session.summary():
        print(f"  {line}")
    return 0


def evaluate_command() -> int:
    report = evaluate_rules()
    print(f"Samples: {report.n_samples}")
    print(f"Accuracy: {report.accuracy:.3f}")
    for species, recall in report.recall.items():
        print(f"  {species} recall: {recall:.3f}")
    print("Confusion matrix (rows = true, columns = predicted):")
    for species, row in zip(report.species, report.confusion_matrix):
        print(f"  {species:<16} {row}")
    return 0


def main(argv=None) -> int:
    """Parse CLI args and dispatch to the requested command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(args.environment)
    logging.basicConfig(level=settings.log_level, format=settings.log_format)

    if not (args.classify or args.evaluate or args.serve):
        parser.print_help()
        return 2

    status = 0
    if args.classify:
        delay = settings.delay_seconds if args.delay is None else args.delay
        status = classify_command(args.classify, delay)
        if status:
            return status

    if args.evaluate:
        status = evaluate_command() or status

    if args.serve:
        from app.main import serve

        overrides = {}
        if args.host is not None:
            overrides["host"] = args.host
        if args.port is not None:
            overrides["port"] = args.port
        logger.info(f"Serving {settings.title} ({settings.environment})")
        serve(settings.model_copy(update=overrides))

    return status


if __name__ == "__main__":
    sys.exit(main())
