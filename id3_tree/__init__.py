# id3_tree/__init__.py

"""
ID3 Decision Tree Package
"""

from .dataset import Attribute, Dataset, MalformedRowError, MalformedRowWarning
from .arff import read_arff, parse_arff, ArffFormatError
from .utils import InvalidInputError, calculate_entropy
from .splitting import calculate_information_gain, find_best_attribute, partition_rows
from .tree import (
    ID3DecisionTree,
    LeafNode,
    InternalNode,
    UnseenValueWarning,
    build_tree,
    predict_row,
    evaluate_tree,
    format_tree,
)

VERSION = "0.1.0"
