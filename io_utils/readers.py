import csv
import os
import pandas as pd

from matching.errors import InputAccessError, RowShapeError

def read_table(handle, validate_header=None):
    """
    Read a people CSV from an open text stream into a frame of raw strings.
    The header is checked (validate_header(headers)) before any data row;
    a data row with the wrong number of values stops the read, blank lines
    included. Blank lines before the header are skipped.
    Row errors cite the physical line the bad row ends on.
    """
    reader = csv.reader(handle)
    headers = None
    rows = []
    for row in reader:
        if headers is None:
            if not row:
                continue
            headers = row
            if validate_header is not None:
                validate_header(headers)
            continue
        if len(row) != len(headers):
            raise RowShapeError(reader.line_num, len(row), len(headers))
        rows.append(row)

    if headers is None:
        raise InputAccessError("The input file is empty")

    return pd.DataFrame(rows, columns=headers, dtype=object)

def load_table(path, validate_header=None):
    if path is None or not os.path.isfile(path):
        raise InputAccessError(f"Input file not found: {path}")
    if os.path.getsize(path) == 0:
        raise InputAccessError("The input file is empty")
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        return read_table(f, validate_header=validate_header)
