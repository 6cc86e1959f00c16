# matching/audit.py
import logging
import networkx as nx
import pandas as pd

from matching.schema import validate_mode, uses_email, uses_phone
from matching.normalize import normalize_people_df

logger = logging.getLogger(__name__)


def find_split_groups(df: pd.DataFrame, person_ids, mode: str) -> list[list[int]]:
    """
    Person ids that share keys through some chain of records but were
    still handed out separately, e.g.
        row 1: a@x.com          -> 1
        row 2: b@x.com          -> 2
        row 3: a@x.com, b@x.com -> 1   (row 2 keeps 2)
    gives [[1, 2]]. Only reports; ids are left as they are.
    """
    validate_mode(mode)
    keys = normalize_people_df(df)
    person_ids = list(person_ids)
    if len(person_ids) != len(keys):
        raise ValueError("person_ids/rows length mismatch for split-group audit")

    G = nx.Graph()
    for pos, (emails, phones) in enumerate(zip(keys["emails"], keys["phones"])):
        node = ("row", pos)
        G.add_node(node)
        if uses_email(mode):
            for email in emails:
                G.add_edge(node, ("email", email))
        if uses_phone(mode):
            for phone in phones:
                G.add_edge(node, ("phone", phone))

    splits = []
    for comp in nx.connected_components(G):
        ids = sorted({person_ids[pos] for kind, pos in comp if kind == "row"})
        if len(ids) > 1:
            splits.append(ids)
    splits.sort()

    if splits:
        logger.warning("audit: %d person_id set(s) connected through shared keys", len(splits))
    return splits
