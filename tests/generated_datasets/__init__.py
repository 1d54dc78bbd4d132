# tests/generated_datasets/__init__.py

"""
Generated Datasets Sub-Package for ID3 Decision Tree Tests
"""

# Dataset generators live in their own modules, e.g.
# from .dataset_generator_categorical import generate_categorical_label_data
