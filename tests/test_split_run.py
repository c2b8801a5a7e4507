import logging

import numpy as np
import pytest

from datasplit.contracts.run_config import DataModel, OutputModel, RunConfig
from datasplit.contracts.split_configs import SplitModel
from datasplit.core.errors import ConfigurationError, ShapeMismatchError
from datasplit.io.readers import read_array_auto
from datasplit.use_cases.split_run import collect_config_notes, run_split


@pytest.fixture
def dataset_files(tmp_path):
    X = np.column_stack([np.arange(20, dtype=float), np.arange(20, dtype=float) ** 2])
    y = np.arange(20) % 4
    np.save(tmp_path / "X.npy", X)
    np.save(tmp_path / "y.npy", y)
    return tmp_path, X, y


def _cfg(tmp_path, *, labels=True, ratio=0.25, seed=5, **outputs):
    return RunConfig(
        data=DataModel(
            x_path=str(tmp_path / "X.npy"),
            y_path=str(tmp_path / "y.npy") if labels else None,
        ),
        split=SplitModel(test_ratio=ratio, seed=seed),
        output=OutputModel(**outputs),
    )


def test_writes_all_requested_outputs(dataset_files):
    tmp_path, X, y = dataset_files
    cfg = _cfg(
        tmp_path,
        training=str(tmp_path / "train.csv"),
        test=str(tmp_path / "test.csv"),
        training_labels=str(tmp_path / "train_y.csv"),
        test_labels=str(tmp_path / "test_y.csv"),
    )
    result = run_split(cfg)

    assert (result.n_train, result.n_test) == (15, 5)
    assert result.seed == 5
    assert result.notes == []
    assert set(result.written) == {"training", "test", "training_labels", "test_labels"}

    train = read_array_auto(tmp_path / "train.csv")
    train_y = read_array_auto(tmp_path / "train_y.csv").ravel()
    test = read_array_auto(tmp_path / "test.csv")
    test_y = read_array_auto(tmp_path / "test_y.csv").ravel()

    assert train.shape == (15, 2)
    assert sorted(np.concatenate([train[:, 0], test[:, 0]]).tolist()) == X[:, 0].tolist()
    assert np.array_equal(train_y, y[train[:, 0].astype(int)])
    assert np.array_equal(test_y, y[test[:, 0].astype(int)])


def test_same_seed_same_files(dataset_files):
    tmp_path, _, _ = dataset_files
    run_split(_cfg(tmp_path, training=str(tmp_path / "a.npy")))
    run_split(_cfg(tmp_path, training=str(tmp_path / "b.npy")))
    assert np.array_equal(np.load(tmp_path / "a.npy"), np.load(tmp_path / "b.npy"))


def test_default_ratio_and_missing_outputs_are_noted(dataset_files, caplog):
    tmp_path, _, _ = dataset_files
    with caplog.at_level(logging.WARNING):
        result = run_split(_cfg(tmp_path, ratio=None))

    assert result.test_ratio == 0.2
    assert result.n_test == 4
    assert result.written == {}
    assert len(result.notes) == 5
    assert any("--test_ratio" in n for n in result.notes)
    assert any("no training set labels" in n for n in result.notes)
    assert "no test set will be saved" in caplog.text


def test_label_outputs_without_input_labels_are_ignored(dataset_files):
    tmp_path, _, _ = dataset_files
    cfg = _cfg(
        tmp_path,
        labels=False,
        training=str(tmp_path / "train.npy"),
        test=str(tmp_path / "test.npy"),
        training_labels=str(tmp_path / "train_y.npy"),
    )
    result = run_split(cfg)

    assert not result.has_labels
    assert result.notes == ["--training_labels ignored because --input_labels is not specified."]
    assert not (tmp_path / "train_y.npy").exists()


def test_unseeded_run_reports_seed(dataset_files):
    tmp_path, _, _ = dataset_files
    first = run_split(_cfg(tmp_path, seed=0, training=str(tmp_path / "a.npy")))
    assert first.seed != 0
    run_split(_cfg(tmp_path, seed=first.seed, training=str(tmp_path / "b.npy")))
    assert np.array_equal(np.load(tmp_path / "a.npy"), np.load(tmp_path / "b.npy"))


@pytest.mark.parametrize("ratio", [-0.1, 1.5])
def test_invalid_ratio_writes_nothing(dataset_files, ratio):
    tmp_path, _, _ = dataset_files
    with pytest.raises(ConfigurationError):
        run_split(_cfg(tmp_path, ratio=ratio, training=str(tmp_path / "train.npy")))
    assert not (tmp_path / "train.npy").exists()


def test_label_mismatch_writes_nothing(dataset_files):
    tmp_path, _, _ = dataset_files
    np.save(tmp_path / "y.npy", np.zeros(19))
    with pytest.raises(ShapeMismatchError):
        run_split(_cfg(tmp_path, training=str(tmp_path / "train.npy")))
    assert not (tmp_path / "train.npy").exists()


def test_labels_matching_columns_are_not_transposed(tmp_path):
    np.save(tmp_path / "X.npy", np.arange(90, dtype=float).reshape(9, 10))
    np.save(tmp_path / "y.npy", np.arange(10) % 3)
    with pytest.raises(ShapeMismatchError):
        run_split(_cfg(tmp_path, training=str(tmp_path / "train.npy")))
    assert not (tmp_path / "train.npy").exists()


@pytest.mark.parametrize("seed", [-1, 2**32])
def test_out_of_range_seed_writes_nothing(dataset_files, seed):
    tmp_path, _, _ = dataset_files
    with pytest.raises(ConfigurationError):
        run_split(_cfg(tmp_path, seed=seed, training=str(tmp_path / "train.npy")))
    assert not (tmp_path / "train.npy").exists()


def test_column_major_round_trip(tmp_path):
    (tmp_path / "X.csv").write_text("1,2,3,4\n5,6,7,8\n")
    cfg = RunConfig(
        data=DataModel(x_path=str(tmp_path / "X.csv"), points_as_columns=True),
        split=SplitModel(test_ratio=0.5, seed=1),
        output=OutputModel(training=str(tmp_path / "train.csv"), points_as_columns=True),
    )
    result = run_split(cfg)
    assert (result.n_points, result.n_features) == (4, 2)

    train = read_array_auto(tmp_path / "train.csv")
    assert train.shape == (2, 2)
    assert np.array_equal(train[1], train[0] + 4)


def test_collect_config_notes_all_outputs_given():
    cfg = RunConfig(
        data=DataModel(x_path="X.csv", y_path="y.csv"),
        split=SplitModel(test_ratio=0.3),
        output=OutputModel(training="a", test="b", training_labels="c", test_labels="d"),
    )
    assert collect_config_notes(cfg) == []
