from .csv_writer import to_csv_string, write_document

__all__ = [
    "to_csv_string",
    "write_document",
]
