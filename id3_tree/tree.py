# id3_tree/tree.py
import uuid
import time
import warnings

from .utils import (
    InvalidInputError,
    calculate_class_counts,
    majority_label,
    is_pandas_dataframe,
)
from .dataset import Attribute, Dataset
from .stopping import check_stopping_conditions, PURE_NODE
from .splitting import find_best_attribute, partition_rows


class UnseenValueWarning(UserWarning):
    """Emitted when a row carries an attribute value that has no branch in the tree."""


class LeafNode:
    is_leaf = True

    def __init__(self, decision, depth=0, num_samples=0, class_counts=None, leaf_reason=None, node_id=None):
        self.id = node_id or uuid.uuid4()
        self.decision = decision
        self.depth = depth
        self.num_samples = num_samples
        self.class_counts = class_counts or {}
        self.leaf_reason = leaf_reason

    def __repr__(self):
        return (f"LeafNode(id={self.id}, depth={self.depth}, samples={self.num_samples}, "
                f"decision='{self.decision}', reason='{self.leaf_reason}')")


class InternalNode:
    is_leaf = False

    def __init__(self, split_attribute_index, depth=0, num_samples=0, class_counts=None, information_gain=None, node_id=None):
        self.id = node_id or uuid.uuid4()
        self.split_attribute_index = split_attribute_index
        self.children = {} # attribute value -> child node, only for values seen while building
        self.depth = depth
        self.num_samples = num_samples
        self.class_counts = class_counts or {}
        self.information_gain = information_gain

    def __repr__(self):
        gain = "None" if self.information_gain is None else f"{self.information_gain:.4f}"
        return (f"InternalNode(id={self.id}, depth={self.depth}, samples={self.num_samples}, "
                f"split={self.split_attribute_index}, gain={gain}, branches={list(self.children)})")


def build_tree(
    rows,
    candidate_attribute_indices,
    class_index,
    verbose=False,
    attribute_names=None,
    _depth=0
):
    """
    Grows an ID3 tree over `rows`.

    A node becomes a leaf carrying the common label when all its rows agree, or a leaf carrying
    the majority label (first seen in row order on ties) when no candidate attributes remain.
    Otherwise it splits on the attribute with the highest information gain and recurses on one
    partition per observed value of that attribute, with the attribute removed from the candidates.

    Args:
        rows (sequence of rows): Non-empty training rows. They are never modified.
        candidate_attribute_indices (sequence of int): Attributes still available on this path.
        class_index (int): Position of the class value in each row.
        verbose (bool): Print build progress.
        attribute_names (sequence of str, optional): Names used in log lines.

    Returns:
        LeafNode or InternalNode: Root of the induced (sub)tree.

    Raises:
        InvalidInputError: If `rows` is empty.
    """
    if len(rows) == 0:
        raise InvalidInputError("build_tree requires at least one row.")

    node_id = uuid.uuid4()
    class_counts = calculate_class_counts(rows, class_index)
    indent = "  " * (_depth + 1)
    if verbose:
        print(f"{indent}Processing node {node_id} (Depth {_depth}): {len(rows)} rows, "
              f"{len(candidate_attribute_indices)} candidate attributes, classes {class_counts}.")

    stop_reason = check_stopping_conditions(
        rows, candidate_attribute_indices, class_index,
        verbose=verbose, node_id_for_logs=node_id, node_depth_for_logs=_depth
    )
    if stop_reason:
        if stop_reason == PURE_NODE:
            decision = rows[0][class_index]
        else:
            decision = majority_label(rows, class_index)
        if verbose: print(f"{indent}  Node becomes LEAF '{decision}'. Reason: {stop_reason}")
        return LeafNode(decision, depth=_depth, num_samples=len(rows),
                        class_counts=class_counts, leaf_reason=stop_reason, node_id=node_id)

    best_attribute_index, best_gain = find_best_attribute(
        rows, candidate_attribute_indices, class_index,
        verbose=verbose, node_id_for_logs=node_id, node_depth_for_logs=_depth,
        attribute_names=attribute_names
    )
    node = InternalNode(best_attribute_index, depth=_depth, num_samples=len(rows),
                        class_counts=class_counts, information_gain=best_gain, node_id=node_id)

    remaining_attributes = [i for i in candidate_attribute_indices if i != best_attribute_index]
    for value, partition in partition_rows(rows, best_attribute_index).items():
        if verbose: print(f"{indent}  Branch {best_attribute_index} = '{value}' ({len(partition)} rows)")
        node.children[value] = build_tree(
            partition, remaining_attributes, class_index,
            verbose=verbose, attribute_names=attribute_names, _depth=_depth + 1
        )
    return node


def predict_row(root, row, warn_unseen=False):
    """
    Walks the tree for one row and returns the predicted label.

    When the row's value at an internal node has no branch, descent stops there and None is
    returned: there is no fallback to the node's majority class.
    """
    current = root
    while not current.is_leaf:
        value = row[current.split_attribute_index]
        child = current.children.get(value)
        if child is None:
            if warn_unseen:
                warnings.warn(
                    f"Unseen value '{value}' for attribute {current.split_attribute_index}. No prediction made.",
                    UnseenValueWarning
                )
            return None
        current = child
    return current.decision


def evaluate_tree(root, rows, class_index):
    """
    Share of `rows` whose predicted label equals the value at `class_index`.
    Rows that reach an unseen branch count as misses.

    Raises:
        InvalidInputError: If `rows` is empty.
    """
    if len(rows) == 0:
        raise InvalidInputError("evaluate_tree requires at least one row.")

    correct = 0
    for row in rows:
        if predict_row(root, row) == row[class_index]:
            correct += 1
    return correct / len(rows)


def iter_nodes(root):
    """Yields every node of the tree, parents before children."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if not node.is_leaf:
            stack.extend(reversed(list(node.children.values())))


def format_tree(root, attributes, prefix=""):
    """
    Renders the tree as indented text, one line per branch:

        outlook = sunny
        | humidity = high: no
        | humidity = normal: yes
        outlook = overcast: yes

    A tree made of a single leaf renders as its decision.
    """
    if root.is_leaf:
        return f"{prefix}{root.decision}"

    lines = []
    name = attributes[root.split_attribute_index].name
    for value, child in root.children.items():
        if child.is_leaf:
            lines.append(f"{prefix}{name} = {value}: {child.decision}")
        else:
            lines.append(f"{prefix}{name} = {value}")
            lines.append(format_tree(child, attributes, prefix + "| "))
    return "\n".join(lines)


class ID3DecisionTree:
    def __init__(self, verbose=False):
        self.verbose = verbose

        self.root = None
        self.attributes = []
        self.rows = []
        self.class_index = None
        self.candidate_attribute_indices = []
        self.training_time_seconds = None

    def _as_dataset(self, data, attributes):
        if isinstance(data, Dataset):
            return data
        if is_pandas_dataframe(data):
            return Dataset.from_dataframe(data)
        if isinstance(data, list):
            if attributes is None:
                raise ValueError("Attributes must be provided when fitting on a list of rows.")
            attrs = [a if isinstance(a, Attribute) else Attribute(a) for a in attributes]
            return Dataset(attrs, data, strict=True)
        raise TypeError("Input data must be a Dataset, a Pandas DataFrame or a list of rows.")

    def fit(self, data, attributes=None, class_index=None):
        """
        Induces the tree.

        Args:
            data (Dataset, pandas.DataFrame or list of rows): Training data.
            attributes (list of Attribute or str, optional): Required when `data` is a list of rows.
            class_index (int, optional): Class position; defaults to the last attribute.
        """
        if self.verbose:
            fit_start_time = time.time()
            print(f"ID3DecisionTree.fit started. Data has {len(data)} rows.")

        dataset = self._as_dataset(data, attributes)
        if not dataset.rows: raise ValueError("Training data cannot be empty.")

        self.attributes, self.rows = dataset.attributes, dataset.rows
        self.class_index = dataset.class_index if class_index is None else class_index
        if not 0 <= self.class_index < len(self.attributes):
            raise ValueError(f"class_index {self.class_index} out of range for {len(self.attributes)} attributes.")
        self.candidate_attribute_indices = [i for i in range(len(self.attributes)) if i != self.class_index]

        start_time = time.time()
        self.root = build_tree(
            self.rows, self.candidate_attribute_indices, self.class_index,
            verbose=self.verbose, attribute_names=[a.name for a in self.attributes]
        )
        self.training_time_seconds = time.time() - start_time

        if self.verbose:
            print(f"ID3DecisionTree.fit completed in {time.time() - fit_start_time:.4f}s. "
                  f"Total nodes: {sum(1 for _ in iter_nodes(self.root))}")
        return self

    def _check_fitted(self):
        if self.root is None: raise ValueError("Tree has not been fitted yet.")

    def predict(self, rows):
        """Predicted label per row, None where an unseen value blocks the descent."""
        self._check_fitted()
        return [predict_row(self.root, row, warn_unseen=True) for row in rows]

    def evaluate(self, rows=None):
        """Accuracy on `rows`, or on the training rows when omitted."""
        self._check_fitted()
        return evaluate_tree(self.root, self.rows if rows is None else rows, self.class_index)

    def count_leaves(self):
        self._check_fitted()
        return sum(1 for node in iter_nodes(self.root) if node.is_leaf)

    def max_depth_reached(self):
        self._check_fitted()
        return max(node.depth for node in iter_nodes(self.root))

    def get_params(self, deep=True):
        return {'verbose': self.verbose}

    def format_tree(self):
        self._check_fitted()
        return format_tree(self.root, self.attributes)

    def print_tree(self):
        print(self.format_tree())
