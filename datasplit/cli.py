from __future__ import annotations

"""Command-line entry point: split a dataset (and optional labels) into
training and test sets.

Example, 40% of the points in the test set:

    datasplit -i X.csv -t X_train.csv -T X_test.csv -r 0.4

With labels, 30% in the test set:

    datasplit -i X.csv -I y.csv -r 0.3 -t X_train.csv -l y_train.csv \
        -T X_test.csv -L y_test.csv
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from datasplit import __version__
from datasplit.contracts.run_config import DataModel, OutputModel, RunConfig
from datasplit.contracts.split_configs import SplitModel
from datasplit.core.errors import SplitError
from datasplit.use_cases.split_run import run_split

logger = logging.getLogger("datasplit")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="datasplit",
        description=(
            "Split a dataset and optionally its labels into a training set and a test set. "
            "Points are randomly reordered before the split. The default test ratio is 0.2."
        ),
    )

    # ---- data ----
    parser.add_argument("-i", "--input", required=True, help="Matrix containing data.")
    parser.add_argument("-I", "--input_labels", default=None, help="Matrix containing labels.")
    parser.add_argument("--delimiter", default=None, help="Delimiter for text inputs (inferred if unset).")
    parser.add_argument("--points_as_columns", action="store_true",
                        help="Inputs and outputs store one point per column instead of per row.")

    # ---- outputs ----
    parser.add_argument("-t", "--training", default=None, help="Matrix to save training data to.")
    parser.add_argument("-T", "--test", default=None, help="Matrix to save test data to.")
    parser.add_argument("-l", "--training_labels", default=None, help="Matrix to save train labels to.")
    parser.add_argument("-L", "--test_labels", default=None, help="Matrix to save test labels to.")

    # ---- split ----
    parser.add_argument("-r", "--test_ratio", type=float, default=None,
                        help="Ratio of test set; if not set, the ratio defaults to 0.2.")
    parser.add_argument("-s", "--seed", type=int, default=0,
                        help="Random seed (0 for a fresh, non-reproducible seed).")

    parser.add_argument("-v", "--verbose", action="store_true", help="Display informational messages.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> RunConfig:
    return RunConfig(
        data=DataModel(
            x_path=args.input,
            y_path=args.input_labels,
            delimiter=args.delimiter,
            points_as_columns=args.points_as_columns,
        ),
        split=SplitModel(test_ratio=args.test_ratio, seed=args.seed),
        output=OutputModel(
            training=args.training,
            test=args.test,
            training_labels=args.training_labels,
            test_labels=args.test_labels,
            points_as_columns=args.points_as_columns,
        ),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    cfg = config_from_args(args)
    try:
        run_split(cfg)
    except SplitError as e:
        logger.error("%s", e)
        return 1
    except (OSError, KeyError, TypeError, ValueError, RuntimeError) as e:
        logger.error("Could not split '%s': %s", args.input, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
