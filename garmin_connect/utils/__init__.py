"""Utility modules for the client."""

from .conversions import convert_ml_to_ounces, convert_ounces_to_ml, grams_to_pounds, pounds_to_grams
from .date_utils import calculate_time_difference, get_local_timestamp, to_date_string, to_gmt_timestamp
from .file_utils import check_is_directory, create_directory, ensure_directory, read_text_file, write_to_file

__all__ = [
    "convert_ml_to_ounces", "convert_ounces_to_ml", "grams_to_pounds", "pounds_to_grams",
    "calculate_time_difference", "get_local_timestamp", "to_date_string", "to_gmt_timestamp",
    "check_is_directory", "create_directory", "ensure_directory", "read_text_file", "write_to_file",
]
