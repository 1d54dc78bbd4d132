# id3_tree/stopping.py
from .utils import require_rows

PURE_NODE = "pure_node"
ATTRIBUTES_EXHAUSTED = "attributes_exhausted"


def is_pure(rows, class_index):
    """True when every row carries the same class label as the first row."""
    require_rows(rows, "is_pure")
    first_label = rows[0][class_index]
    for row in rows:
        if row[class_index] != first_label:
            return False
    return True


def check_stopping_conditions(
    rows,
    candidate_attribute_indices,
    class_index,
    verbose=False,
    node_id_for_logs=None,
    node_depth_for_logs=0
):
    """
    Checks whether a node must become a leaf instead of being split.
    Conditions are checked in order: purity first, then attribute exhaustion.

    Args:
        rows (sequence of rows): Non-empty rows routed to the node.
        candidate_attribute_indices (sequence of int): Attributes still available on this path.
        class_index (int): Position of the class value in each row.
        verbose (bool): Flag for detailed logging.
        node_id_for_logs: Identifier for the current node, for logging purposes.
        node_depth_for_logs (int): Depth of the node, for log indentation.

    Returns:
        str or None: PURE_NODE or ATTRIBUTES_EXHAUSTED, or None if the node should be split.
    """
    indent = "  " * (node_depth_for_logs + 1)

    if is_pure(rows, class_index):
        reason = PURE_NODE
    elif len(candidate_attribute_indices) == 0:
        reason = ATTRIBUTES_EXHAUSTED
    else:
        reason = None

    if verbose and reason:
        print(f"{indent}  Stop Check (Node {node_id_for_logs}): {reason} ({len(rows)} rows).")
    return reason


if __name__ == '__main__':
    rows = [["sunny", "no"], ["rainy", "no"]]
    print(f"Pure rows: {check_stopping_conditions(rows, [0], 1)}") # Expected: pure_node

    rows = [["sunny", "no"], ["sunny", "yes"]]
    print(f"Exhausted: {check_stopping_conditions(rows, [], 1)}") # Expected: attributes_exhausted
    print(f"Splittable: {check_stopping_conditions(rows, [0], 1)}") # Expected: None
