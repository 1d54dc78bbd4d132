# id3_tree/splitting.py
import time # For performance logging
from .utils import calculate_entropy, InvalidInputError


def partition_rows(rows, attribute_index):
    """
    Group rows by their value at `attribute_index`.

    Grouping is stable: groups are ordered by the first row carrying each value,
    and rows keep their relative order inside a group. Values are compared as exact strings.

    Returns:
        dict: attribute value -> list of rows.
    """
    partitions = {}
    for row in rows:
        partitions.setdefault(row[attribute_index], []).append(row)
    return partitions


def calculate_information_gain(rows, attribute_index: int, class_index: int) -> float:
    """
    Entropy reduction obtained by splitting `rows` on the attribute at `attribute_index`.

    gain = H(rows) - sum_v (|rows_v| / |rows|) * H(rows_v)

    The result is not clamped, so values a hair below zero from floating point noise are possible.

    Raises:
        InvalidInputError: If `rows` is empty.
    """
    if len(rows) == 0:
        raise InvalidInputError("calculate_information_gain requires at least one row.")

    entropy_before = calculate_entropy(rows, class_index)

    entropy_after = 0.0
    for group in partition_rows(rows, attribute_index).values():
        weight = len(group) / len(rows)
        entropy_after += weight * calculate_entropy(group, class_index)

    return entropy_before - entropy_after


def find_best_attribute(
    rows,
    candidate_attribute_indices,
    class_index: int,
    verbose: bool = False,
    node_id_for_logs = None,
    node_depth_for_logs: int = 0,
    attribute_names = None
):
    """
    Picks the candidate attribute with the highest information gain.

    Candidates are scanned in the given order and a candidate replaces the running best
    only when its gain is strictly greater, so the earliest candidate wins ties.

    Args:
        rows (sequence of rows): Rows routed to the node being split.
        candidate_attribute_indices (sequence of int): Attributes still available on this path.
        class_index (int): Position of the class value in each row.
        verbose (bool): Flag for detailed logging.
        node_id_for_logs: Identifier for the current node, for logging purposes.
        node_depth_for_logs (int): Depth of the node, for log indentation.
        attribute_names (sequence of str, optional): Names used in log lines instead of indices.

    Returns:
        tuple: (best attribute index, its information gain).

    Raises:
        InvalidInputError: If there are no candidates or no rows.
    """
    if len(candidate_attribute_indices) == 0:
        raise InvalidInputError("find_best_attribute requires at least one candidate attribute.")
    if len(rows) == 0:
        raise InvalidInputError("find_best_attribute requires at least one row.")

    indent = "  " * (node_depth_for_logs + 1)
    best_attribute_index = None
    best_gain = -float('inf')

    for attribute_index in candidate_attribute_indices:
        if verbose:
            t_attr_start = time.time()

        gain = calculate_information_gain(rows, attribute_index, class_index)

        if verbose:
            label = attribute_names[attribute_index] if attribute_names else f"#{attribute_index}"
            print(f"{indent}  Attribute '{label}' gain: {gain:.4f} (Node {node_id_for_logs}). Took {time.time() - t_attr_start:.4f}s")

        if gain > best_gain:
            best_gain = gain
            best_attribute_index = attribute_index

    if verbose:
        label = attribute_names[best_attribute_index] if attribute_names else f"#{best_attribute_index}"
        print(f"{indent}  Best attribute for Node {node_id_for_logs}: '{label}' (gain {best_gain:.4f})")

    return best_attribute_index, best_gain
