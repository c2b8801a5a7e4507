import logging

import numpy as np
import pytest

from datasplit.cli import build_parser, config_from_args, main


@pytest.fixture
def inputs(tmp_path):
    X = np.column_stack([np.arange(10, dtype=float), np.ones(10)])
    np.savetxt(tmp_path / "X.csv", X, delimiter=",")
    np.savetxt(tmp_path / "y.csv", np.arange(10) % 2, fmt="%d")
    return tmp_path


def test_flags_map_onto_config():
    args = build_parser().parse_args(
        ["-i", "X.csv", "-I", "y.csv", "-t", "tr.csv", "-T", "te.csv",
         "-l", "trl.csv", "-L", "tel.csv", "-r", "0.3", "-s", "7"]
    )
    cfg = config_from_args(args)
    assert cfg.data.x_path == "X.csv"
    assert cfg.data.y_path == "y.csv"
    assert cfg.split.test_ratio == 0.3
    assert cfg.split.seed == 7
    assert cfg.output.training_labels == "trl.csv"
    assert cfg.output.test_labels == "tel.csv"


def test_defaults():
    cfg = config_from_args(build_parser().parse_args(["--input", "X.csv"]))
    assert cfg.split.test_ratio is None
    assert cfg.split.seed == 0
    assert cfg.output.training is None


def test_input_is_required():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_split_with_labels(inputs):
    rc = main([
        "-i", str(inputs / "X.csv"), "-I", str(inputs / "y.csv"),
        "-t", str(inputs / "tr.csv"), "-T", str(inputs / "te.csv"),
        "-l", str(inputs / "trl.csv"), "-L", str(inputs / "tel.csv"),
        "-r", "0.3", "-s", "42",
    ])
    assert rc == 0
    train = np.loadtxt(inputs / "tr.csv", delimiter=",", ndmin=2)
    train_y = np.loadtxt(inputs / "trl.csv", dtype=int, ndmin=1)
    test_y = np.loadtxt(inputs / "tel.csv", dtype=int, ndmin=1)
    assert train.shape == (7, 2)
    assert len(test_y) == 3
    assert np.array_equal(train_y, train[:, 0].astype(int) % 2)


def test_out_of_range_ratio_fails(inputs, caplog):
    with caplog.at_level(logging.ERROR):
        rc = main(["-i", str(inputs / "X.csv"), "-t", str(inputs / "tr.csv"), "-r", "1.5"])
    assert rc == 1
    assert "test_ratio" in caplog.text
    assert not (inputs / "tr.csv").exists()


def test_missing_input_file_fails(tmp_path):
    assert main(["-i", str(tmp_path / "missing.csv"), "-r", "0.2"]) == 1


def test_warnings_logged(inputs, caplog):
    with caplog.at_level(logging.WARNING):
        rc = main(["-i", str(inputs / "X.csv"), "-l", str(inputs / "trl.csv")])
    assert rc == 0
    assert "--training_labels ignored" in caplog.text
    assert "automatically set to 0.2" in caplog.text


@pytest.mark.parametrize("seed", ["-5", str(2**32)])
def test_out_of_range_seed_fails(inputs, caplog, seed):
    with caplog.at_level(logging.ERROR):
        rc = main(["-i", str(inputs / "X.csv"), "-t", str(inputs / "tr.csv"), "-s", seed])
    assert rc == 1
    assert "seed" in caplog.text
    assert not (inputs / "tr.csv").exists()
