# matching/pipeline.py
"""
File-level driver: read -> validate header -> group -> write.
Everything is read before anything is written, and the write is staged,
so an error anywhere leaves no output file.
"""
import io
import logging
import pandas as pd

from matching.schema import validate_headers, validate_mode
from matching.cluster import cluster_people
from matching.audit import find_split_groups
from matching.errors import InputAccessError
from io_utils.readers import load_table, read_table
from io_utils.writers import output_path_for, write_outputs_people

logger = logging.getLogger(__name__)


def group_records(df: pd.DataFrame, mode: str, audit: bool = False) -> pd.DataFrame:
    """Copy of `df` with `person_id` as the first column."""
    validate_mode(mode)
    if len(df) == 0:
        logger.info("No records found to process (file only contains headers)")
    else:
        logger.info("Found %d records to process", len(df))

    _, grouped = cluster_people(df, mode)

    if audit and len(df):
        # person_id is always column 0, even if the input had its own person_id
        for ids in find_split_groups(df, grouped.iloc[:, 0], mode):
            logger.warning("person_ids %s are linked by shared keys but were not merged", ", ".join(map(str, ids)))
    return grouped


def process_file(input_path, mode: str, outdir=None, audit: bool = False) -> str:
    """
    Group one CSV file and write <stem>_output.csv.
    Returns the output path.
    """
    validate_mode(mode)
    logger.info("Processing %s using %s matching...", input_path, mode)

    df = load_table(input_path, validate_header=lambda headers: validate_headers(headers, mode))
    grouped = group_records(df, mode, audit=audit)

    out_path = write_outputs_people(grouped, output_path_for(input_path, outdir))
    logger.info("Output written to %s", out_path)
    return out_path


def group_uploaded_csv(data: bytes, mode: str, audit: bool = False) -> pd.DataFrame:
    """Same as process_file, for in-memory uploads (no file written)."""
    validate_mode(mode)
    if not data:
        raise InputAccessError("The input file is empty")
    text = io.StringIO(data.decode("utf-8-sig"), newline="")
    df = read_table(text, validate_header=lambda headers: validate_headers(headers, mode))
    return group_records(df, mode, audit=audit)
