from __future__ import annotations

import logging
from typing import Dict, List

from datasplit.contracts.results import SplitRunResult
from datasplit.contracts.run_config import RunConfig
from datasplit.contracts.split_configs import DEFAULT_TEST_RATIO
from datasplit.components.splitters.holdout import validate_test_ratio
from datasplit.factories.split_factory import make_splitter
from datasplit.io.export.array_export import save_array
from datasplit.io.readers.auto_reader import load_from_data_model
from datasplit.runtime.random.rng import resolve_seed

logger = logging.getLogger(__name__)


def collect_config_notes(cfg: RunConfig) -> List[str]:
    """Non-fatal configuration problems, in the order a user should read them."""
    out = cfg.output
    has_labels = cfg.data.has_labels
    notes: List[str] = []

    if not out.training:
        notes.append("--training (-t) is not specified; no training set will be saved!")
    if not out.test:
        notes.append("--test (-T) is not specified; no test set will be saved!")

    if has_labels:
        if not out.training_labels:
            notes.append(
                "--training_labels (-l) is not specified; no training set labels will be saved!"
            )
        if not out.test_labels:
            notes.append("--test_labels (-L) is not specified; no test set labels will be saved!")
    else:
        if out.training_labels:
            notes.append("--training_labels ignored because --input_labels is not specified.")
        if out.test_labels:
            notes.append("--test_labels ignored because --input_labels is not specified.")

    if cfg.split.test_ratio is None:
        notes.append(
            f"You did not specify --test_ratio, so it will be automatically set to {DEFAULT_TEST_RATIO}."
        )

    return notes


def run_split(cfg: RunConfig) -> SplitRunResult:
    """
    Load a dataset, shuffle-split it and write the requested outputs.

    The test ratio and seed are validated before anything is read, and every
    output is computed before the first file is written.
    """
    test_ratio = validate_test_ratio(cfg.split.effective_test_ratio)
    split_cfg = cfg.split.model_copy(update={"seed": resolve_seed(cfg.split.seed)})
    notes = collect_config_notes(cfg)
    for note in notes:
        logger.warning(note)

    X, y = load_from_data_model(cfg.data)
    logger.info("Loaded %d points with %d features.", X.shape[0], X.shape[1])

    splitter = make_splitter(split_cfg)
    split = splitter.split(X, y)

    logger.info("Using random seed %d.", split.seed)
    logger.info("Training data contains %d points.", split.n_train)
    logger.info("Test data contains %d points.", split.n_test)

    out = cfg.output
    targets = {
        "training": (out.training, split.train),
        "test": (out.test, split.test),
    }
    if split.has_labels:
        targets["training_labels"] = (out.training_labels, split.train_labels)
        targets["test_labels"] = (out.test_labels, split.test_labels)

    written: Dict[str, str] = {}
    for name, (dest, arr) in targets.items():
        if not dest:
            continue
        path = save_array(arr, dest, points_as_columns=out.points_as_columns)
        logger.info("Saved %s to '%s'.", name, path)
        written[name] = str(path)

    return SplitRunResult(
        n_points=int(X.shape[0]),
        n_features=int(X.shape[1]),
        n_train=split.n_train,
        n_test=split.n_test,
        test_ratio=test_ratio,
        seed=int(split.seed),
        has_labels=split.has_labels,
        written=written,
        notes=notes,
    )
