# matching/normalize.py
import pandas as pd

from matching.schema import email_columns, phone_columns

# --------- helpers ---------
def _norm_str(x) -> str:
    return str(x).strip() if isinstance(x, str) else ""

def _norm_lower(x) -> str:
    return _norm_str(x).lower()

def _normalize_email(email) -> str:
    """
    Trim + lowercase. No format checks:
      ' John@Example.COM ' -> 'john@example.com'
    """
    return _norm_lower(email)

def _normalize_phone(phone) -> str:
    """
    Trim only. '(555) 123-4567' stays '(555) 123-4567'.
    """
    return _norm_str(phone)

# --------- key extraction ---------
def extract_keys(values, positions, normalizer) -> list[str]:
    """
    Normalized, non-blank values at `positions`, in header order.
    Duplicates inside one record are kept.
    """
    keys = []
    for pos in positions:
        key = normalizer(values[pos])
        if key:
            keys.append(key)
    return keys

def email_keys(values, headers) -> list[str]:
    return extract_keys(values, email_columns(headers), _normalize_email)

def phone_keys(values, headers) -> list[str]:
    return extract_keys(values, phone_columns(headers), _normalize_phone)

# --------- PEOPLE ---------
def normalize_people_df(df: pd.DataFrame) -> pd.DataFrame:
    """
    Per-record match keys for a raw people frame.
    Columns are looked up by position so repeated header names still work.
    Returns a frame indexed like `df` with list columns: emails, phones
    """
    headers = list(df.columns)
    e_pos = email_columns(headers)
    p_pos = phone_columns(headers)

    emails, phones = [], []
    for values in df.itertuples(index=False, name=None):
        emails.append(extract_keys(values, e_pos, _normalize_email))
        phones.append(extract_keys(values, p_pos, _normalize_phone))

    return pd.DataFrame({"emails": emails, "phones": phones}, index=df.index)
