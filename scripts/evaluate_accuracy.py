#!/usr/bin/env python3
"""Accuracy evaluation script.

Runs the bundled labelled task set through the classification engine and
prints per-quadrant accuracy, a confusion matrix and latency figures.

Usage:
    python scripts/evaluate_accuracy.py [--min-accuracy 0.75] [--show-failures]
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from prio_core.config.logging_config import setup_logging
from prio_core.config.settings import get_settings
from prio_core.domain.exceptions import ConfigurationError
from prio_core.domain.models import AccuracyReport, Quadrant
from prio_core.engine import PriorityEngine
from prio_core.evaluation import evaluate


def print_report(report: AccuracyReport, show_failures: bool) -> None:
    """Print the report in a terminal-friendly layout."""
    print("\n====== ACCURACY REPORT ======")
    print(f"Total: {report.accuracy:.0%} ({report.correct}/{report.total})")

    print("\nBy quadrant:")
    for quadrant in Quadrant:
        accuracy = report.per_quadrant.get(quadrant, 0.0)
        print(f"  {quadrant.display_name:<10} {accuracy:.0%}")

    print("\nConfusion matrix (expected -> actual):")
    header = " ".join(f"{q.display_name[:8]:>8}" for q in Quadrant)
    print(f"  {'':<10} {header}")
    for expected in Quadrant:
        row = " ".join(f"{report.confusion[expected][actual]:>8}" for actual in Quadrant)
        print(f"  {expected.display_name:<10} {row}")

    print(
        f"\nLatency: avg {report.avg_latency_ms:.3f} ms, "
        f"max {report.max_latency_ms:.3f} ms"
    )

    if show_failures and report.failures:
        print("\nFailures:")
        for failure in report.failures:
            print(f"  - {failure}")
    print("=============================\n")


def main() -> None:
    """Run evaluation."""
    parser = argparse.ArgumentParser(description="Evaluate classification accuracy")
    parser.add_argument(
        "--min-accuracy",
        type=float,
        default=0.75,
        help="Exit with status 1 below this overall accuracy",
    )
    parser.add_argument(
        "--show-failures",
        action="store_true",
        help="List misclassified tasks",
    )
    args = parser.parse_args()

    try:
        settings = get_settings()
        setup_logging(log_level=settings.log_level, json_logs=settings.json_logs)
        engine = PriorityEngine.from_settings(settings)
    except ConfigurationError as e:
        print(f"❌ Configuration error: {e}")
        sys.exit(2)

    report = evaluate(engine.classifier)
    print_report(report, show_failures=args.show_failures)

    if report.accuracy < args.min_accuracy:
        print(f"❌ Accuracy {report.accuracy:.0%} below target {args.min_accuracy:.0%}")
        sys.exit(1)
    print("✅ Accuracy target met")


if __name__ == "__main__":
    main()
