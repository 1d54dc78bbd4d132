# id3_tree/utils.py
import numpy as np
import pandas as pd


class InvalidInputError(ValueError):
    """Raised when a core routine is called with input it cannot work on (e.g. no rows)."""


def require_rows(rows, caller):
    if len(rows) == 0:
        raise InvalidInputError(f"{caller} requires at least one row.")


def calculate_class_counts(rows, class_index):
    """
    Count class labels in `rows`.

    Returns:
        dict: label -> count, ordered by the first row in which each label appears.
    """
    counts = {}
    for row in rows:
        label = row[class_index]
        counts[label] = counts.get(label, 0) + 1
    return counts


def calculate_entropy(rows, class_index):
    """
    Shannon entropy (in bits) of the class-label distribution of `rows`.

    H = -sum(p_c * log2(p_c)) over the labels present, with p_c = count_c / len(rows).

    Args:
        rows (sequence of sequence of str): Rows to measure.
        class_index (int): Position of the class value in each row.

    Returns:
        float: Entropy in [0, log2(number of distinct labels)]; 0 when every row has the same label.

    Raises:
        InvalidInputError: If `rows` is empty.
    """
    require_rows(rows, "calculate_entropy")

    labels = np.array([row[class_index] for row in rows], dtype=object)
    _, counts = np.unique(labels, return_counts=True)
    probabilities = counts / labels.size
    return float(-np.sum(probabilities * np.log2(probabilities)))


def majority_label(rows, class_index):
    """
    Most frequent class label in `rows`.
    Ties go to the label that appears first in row order.
    """
    require_rows(rows, "majority_label")

    best_label, best_count = None, 0
    for label, count in calculate_class_counts(rows, class_index).items():
        if count > best_count: # Strict: earlier labels keep ties
            best_label, best_count = label, count
    return best_label


# --- Pandas DataFrame Utilities ---

def is_pandas_dataframe(data):
    """Checks if the provided data is a Pandas DataFrame."""
    return isinstance(data, pd.DataFrame)

def convert_pandas_to_rows(dataframe):
    """
    Converts a Pandas DataFrame to a list of rows of strings, one value per column.
    """
    if not is_pandas_dataframe(dataframe):
        raise TypeError("Input is not a Pandas DataFrame.")
    return [[str(value) for value in record] for record in dataframe.itertuples(index=False, name=None)]
