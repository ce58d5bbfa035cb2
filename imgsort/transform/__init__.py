from .sort import ALGORITHMS, brightness, is_column_sorted, sort_columns

__all__ = ["ALGORITHMS", "brightness", "is_column_sorted", "sort_columns"]
