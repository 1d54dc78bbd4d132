# id3_tree/dataset.py
import warnings

from .utils import is_pandas_dataframe, convert_pandas_to_rows


class MalformedRowError(ValueError):
    """Raised in strict mode when a row's length does not match the attribute count."""


class MalformedRowWarning(UserWarning):
    """Emitted when a row with the wrong number of values is dropped."""


class Attribute:
    def __init__(self, name, domain=None):
        self.name = name
        self.domain = list(domain) if domain else []

    def __eq__(self, other):
        if not isinstance(other, Attribute):
            return NotImplemented
        return self.name == other.name and self.domain == other.domain

    def __repr__(self):
        return f"Attribute(name='{self.name}', domain={self.domain})"


class Dataset:
    """
    Nominal attributes plus rows of string values aligned to them.
    The last attribute is the class attribute.
    """

    def __init__(self, attributes, rows=None, relation=None, strict=False):
        self.attributes = list(attributes)
        self.rows = []
        self.relation = relation
        for row in rows or []:
            self.add_row(row, strict=strict)

    @property
    def class_index(self):
        return len(self.attributes) - 1

    @property
    def class_attribute(self):
        return self.attributes[self.class_index]

    @property
    def candidate_attribute_indices(self):
        return [i for i in range(len(self.attributes)) if i != self.class_index]

    @property
    def attribute_names(self):
        return [attr.name for attr in self.attributes]

    def add_row(self, values, strict=False):
        """
        Appends a row if it has one value per attribute.

        Rows of the wrong length are dropped with a MalformedRowWarning, or raise
        MalformedRowError when `strict` is set.

        Returns:
            bool: True if the row was added.
        """
        row = [str(v) for v in values]
        if len(row) != len(self.attributes):
            message = f"Data row has {len(row)} values, expected {len(self.attributes)}."
            if strict:
                raise MalformedRowError(message)
            warnings.warn(message, MalformedRowWarning)
            return False
        self.rows.append(row)
        return True

    @classmethod
    def from_dataframe(cls, dataframe, class_column=None):
        """
        Builds a Dataset from a Pandas DataFrame.
        Cells are converted with str(); each domain lists the observed values in first-seen order.
        `class_column` is moved to the last position (defaults to the last column).
        """
        if not is_pandas_dataframe(dataframe):
            raise TypeError("Input is not a Pandas DataFrame.")
        if dataframe.empty:
            raise ValueError("Training data cannot be empty.")

        columns = [str(c) for c in dataframe.columns]
        if class_column is not None:
            if class_column not in dataframe.columns:
                raise ValueError(f"Class column '{class_column}' not found in DataFrame.")
            ordered = [c for c in dataframe.columns if c != class_column] + [class_column]
            dataframe = dataframe[ordered]
            columns = [str(c) for c in ordered]

        rows = convert_pandas_to_rows(dataframe)
        attributes = []
        for j, name in enumerate(columns):
            domain = list(dict.fromkeys(row[j] for row in rows))
            attributes.append(Attribute(name, domain))
        return cls(attributes, rows)

    def __len__(self):
        return len(self.rows)

    def __repr__(self):
        return (f"Dataset(relation={self.relation!r}, attributes={len(self.attributes)}, "
                f"rows={len(self.rows)}, class='{self.class_attribute.name if self.attributes else None}')")
