# scripts/run_split_local.py
from __future__ import annotations

from datasplit.contracts.run_config import RunConfig, DataModel, OutputModel
from datasplit.contracts.split_configs import SplitModel
from datasplit.api import run_split

# ==== EDIT THESE AS YOU LIKE ==================================================
# Example A: NPZ bundle
# DATA = DataModel(npz_path=r"./data/bundle.npz", x_key="X", y_key="y")

# Example B: CSV pair, one point per row
DATA = DataModel(
    x_path=r"./data/X.csv",
    y_path=r"./data/y.csv",
)

SPLIT = SplitModel(
    test_ratio=0.3,
    seed=42,          # 0 or None -> fresh seed, reported in the result
)

OUTPUT = OutputModel(
    training=r"./data/split/X_train.csv",
    test=r"./data/split/X_test.csv",
    training_labels=r"./data/split/y_train.csv",
    test_labels=r"./data/split/y_test.csv",
)
# ============================================================================


def main():
    cfg = RunConfig(data=DATA, split=SPLIT, output=OUTPUT)
    result = run_split(cfg)

    print("\n=== SPLIT RESULT ===")
    print(f"Points: {result.n_points} ({result.n_features} features)")
    print(f"Train/Test: {result.n_train} / {result.n_test} (test_ratio={result.test_ratio})")
    print(f"Seed: {result.seed}")
    for name, path in result.written.items():
        print(f"- {name}: {path}")
    if result.notes:
        print("Notes:")
        for n in result.notes:
            print(f"- {n}")


if __name__ == "__main__":
    main()
