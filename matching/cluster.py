# matching/cluster.py
import time
import logging
import pandas as pd

from matching.schema import validate_mode, uses_email, uses_phone
from matching.normalize import normalize_people_df, email_keys, phone_keys

logger = logging.getLogger(__name__)


def _first_hit(keys, index: dict):
    for key in keys:
        if key in index:
            return index[key]
    return None


class PersonGrouper:
    """
    Assigns person ids one record at a time, in file order.

    Each key maps straight to a group id. A record joins the group of its
    first known key (emails before phones) and then registers all of its
    keys under that id, re-pointing any that belonged to another group.
    Earlier records are never revisited, so ids are stable once written.
    """

    def __init__(self, mode: str):
        self.mode = validate_mode(mode)
        self.email_index: dict[str, int] = {}
        self.phone_index: dict[str, int] = {}
        self.next_id = 1

    def assign(self, emails=(), phones=()) -> int:
        emails = list(emails) if uses_email(self.mode) else []
        phones = list(phones) if uses_phone(self.mode) else []

        group = _first_hit(emails, self.email_index)
        if group is None:
            group = _first_hit(phones, self.phone_index)

        if group is None:
            group = self.next_id
            self.next_id += 1

        for email in emails:
            self.email_index[email] = group
        for phone in phones:
            self.phone_index[phone] = group
        return group


def assign_person_ids(headers, rows, mode: str) -> list[int]:
    """Person id for every raw row, in row order."""
    grouper = PersonGrouper(mode)
    headers = list(headers)
    return [grouper.assign(email_keys(row, headers), phone_keys(row, headers)) for row in rows]


# --------- PEOPLE ---------
def cluster_people(df: pd.DataFrame, mode: str):
    """
    Group raw people rows by shared email / phone keys.
    Returns: (clusters: list[set[int]], df_with_person_id)
      - clusters hold row positions, one set per person_id in ascending order
      - df_with_person_id is a copy with `person_id` as the first column
    """
    start = time.time()
    grouper = PersonGrouper(mode)
    keys = normalize_people_df(df)

    person_ids = [
        grouper.assign(emails, phones)
        for emails, phones in zip(keys["emails"], keys["phones"])
    ]

    out = df.copy()
    out.insert(0, "person_id", pd.Series(person_ids, index=df.index, dtype="int64"), allow_duplicates=True)

    members: dict[int, set[int]] = {}
    for pos, pid in enumerate(person_ids):
        members.setdefault(pid, set()).add(pos)
    clusters = [members[pid] for pid in sorted(members)]

    logger.info("[cluster_people] time: %.2fs, clusters: %d", time.time() - start, len(clusters))
    return clusters, out
