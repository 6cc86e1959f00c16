# matching/schema.py
from matching.errors import ConfigurationError, SchemaError

FIRST_NAME = "FirstName"
LAST_NAME = "LastName"
EMAIL_PREFIX = "Email"
PHONE_PREFIX = "Phone"

MATCHING_TYPES = {
    "email": "same_email",
    "phone": "same_phone",
    "email_or_phone": "same_email_or_phone",
}

def uses_email(mode: str) -> bool:
    return mode in (MATCHING_TYPES["email"], MATCHING_TYPES["email_or_phone"])

def uses_phone(mode: str) -> bool:
    return mode in (MATCHING_TYPES["phone"], MATCHING_TYPES["email_or_phone"])

# --------- header predicates ---------
def _is_prefixed(name, prefix: str) -> bool:
    """
    'Email' -> True, 'Email10' -> True, 'Email_2' / 'email' / 'Emails' -> False
    """
    if not isinstance(name, str) or not name.startswith(prefix):
        return False
    suffix = name[len(prefix):]
    return all(c in "0123456789" for c in suffix)

def is_email_header(name) -> bool:
    return _is_prefixed(name, EMAIL_PREFIX)

def is_phone_header(name) -> bool:
    return _is_prefixed(name, PHONE_PREFIX)

def email_columns(headers) -> list[int]:
    return [i for i, h in enumerate(headers) if is_email_header(h)]

def phone_columns(headers) -> list[int]:
    return [i for i, h in enumerate(headers) if is_phone_header(h)]

# --------- validation ---------
def validate_mode(mode: str) -> str:
    if mode not in MATCHING_TYPES.values():
        raise ConfigurationError(
            f"Invalid matching type. Must be one of: {', '.join(MATCHING_TYPES.values())}"
        )
    return mode

def validate_headers(headers, mode: str) -> None:
    """
    Check the header row before any data row is read.
      - FirstName and LastName must both be present (reported together)
      - the mode decides which of Email*/Phone* must exist
    """
    validate_mode(mode)
    headers = list(headers)

    missing = [name for name in (FIRST_NAME, LAST_NAME) if name not in headers]
    if missing:
        raise SchemaError(f"Required fields missing: {', '.join(missing)}")

    has_email = bool(email_columns(headers))
    has_phone = bool(phone_columns(headers))

    if mode == MATCHING_TYPES["email"] and not has_email:
        raise SchemaError("No email field found")
    if mode == MATCHING_TYPES["phone"] and not has_phone:
        raise SchemaError("No phone field found")
    if mode == MATCHING_TYPES["email_or_phone"] and not (has_email or has_phone):
        raise SchemaError("No email or phone fields found")
