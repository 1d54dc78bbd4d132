# id3_tree/runner.py
"""
Runs the ID3 tree over a list of ARFF files and prints, for each one, a dataset summary,
the induced tree and its accuracy on the training data.

    python -m id3_tree.runner [-v] [file.arff ...]

Without file arguments the bundled datasets in DEFAULT_DATASETS are used.
"""
import argparse
import os
import sys
import time

from .arff import ArffFormatError, read_arff
from .tree import ID3DecisionTree

DATASETS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "datasets")

DEFAULT_DATASETS = [
    "contact-lenses.arff",
    "restaurant.arff",
    "weather.nominal.arff",
]


def resolve_dataset_path(name):
    """Returns `name` if it exists, otherwise the bundled dataset of that name."""
    if os.path.isfile(name):
        return name
    return os.path.join(DATASETS_DIR, name)


def format_dataset_summary(dataset):
    return (f"{dataset.class_attribute.name}\n"
            f"Attributes: {len(dataset.attributes)}\n"
            f"Examples: {len(dataset.rows)}\n")


def format_performance_summary(accuracy):
    return f"Performance Summary:\nAccuracy: {accuracy * 100:.2f}%"


def run_dataset(path, verbose=False):
    """
    Loads one ARFF file, builds the tree and prints the report.

    Returns:
        dict: dataset name, accuracy, tree size and training time.
    """
    dataset = read_arff(path)
    if not dataset.rows:
        raise ArffFormatError(f"No data rows in {path}.")
    print(format_dataset_summary(dataset))

    tree = ID3DecisionTree(verbose=verbose)
    tree.fit(dataset)
    print(tree.format_tree())
    print()

    accuracy = tree.evaluate()
    print(format_performance_summary(accuracy))
    print("\n")

    return {
        "dataset_name": os.path.basename(path),
        "accuracy": accuracy,
        "num_leaf_nodes": tree.count_leaves(),
        "max_depth_reached": tree.max_depth_reached(),
        "training_time_seconds": tree.training_time_seconds,
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Build and evaluate ID3 decision trees on nominal ARFF files.")
    parser.add_argument("datasets", nargs="*", help="ARFF files to process (default: bundled datasets).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print tree building progress.")
    args = parser.parse_args(argv)

    filenames = args.datasets or DEFAULT_DATASETS
    failures = 0
    start_time = time.time()

    for filename in filenames:
        path = resolve_dataset_path(filename)
        try:
            run_dataset(path, verbose=args.verbose)
        except (FileNotFoundError, ArffFormatError) as e:
            print(f"Failed to read ARFF file. {e}", file=sys.stderr)
            failures += 1

    if args.verbose:
        print(f"Processed {len(filenames)} dataset(s) in {time.time() - start_time:.2f}s.")
    return 1 if failures else 0


if __name__ == '__main__':
    sys.exit(main())
