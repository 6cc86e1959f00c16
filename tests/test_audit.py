import pandas as pd
import pytest

from matching.audit import find_split_groups
from matching.cluster import cluster_people
from matching.errors import ConfigurationError

HEADERS = ["FirstName", "LastName", "Email", "Phone"]


def _frame(rows):
    return pd.DataFrame(rows, columns=HEADERS, dtype=object)


def test_reports_ids_linked_through_a_later_record():
    df = pd.DataFrame(
        [
            ["A", "A", "a@x.com", ""],
            ["B", "B", "b@x.com", ""],
            ["C", "C", "a@x.com", "b@x.com"],
        ],
        columns=["FirstName", "LastName", "Email", "Email2"],
        dtype=object,
    )
    _, out = cluster_people(df, "same_email")
    assert out["person_id"].tolist() == [1, 2, 1]
    assert find_split_groups(df, out["person_id"], "same_email") == [[1, 2]]


def test_no_splits_for_clean_grouping():
    df = _frame(
        [
            ["A", "A", "a@x.com", ""],
            ["B", "B", "b@x.com", ""],
            ["C", "C", "a@x.com", ""],
        ]
    )
    _, out = cluster_people(df, "same_email")
    assert find_split_groups(df, out["person_id"], "same_email") == []


def test_mode_limits_which_keys_link_records():
    df = _frame(
        [
            ["A", "A", "a@x.com", "111"],
            ["B", "B", "b@x.com", "222"],
            ["C", "C", "c@x.com", "111"],
        ]
    )
    # ids from email mode: all different, but phone 111 links rows 0 and 2
    ids = [1, 2, 3]
    assert find_split_groups(df, ids, "same_email") == []
    assert find_split_groups(df, ids, "same_phone") == [[1, 3]]
    assert find_split_groups(df, ids, "same_email_or_phone") == [[1, 3]]


def test_cross_type_split_in_combined_mode():
    df = _frame(
        [
            ["A", "A", "a@x.com", ""],
            ["B", "B", "", "555"],
            ["C", "C", "a@x.com", "555"],
        ]
    )
    _, out = cluster_people(df, "same_email_or_phone")
    assert out["person_id"].tolist() == [1, 2, 1]
    assert find_split_groups(df, out["person_id"], "same_email_or_phone") == [[1, 2]]


def test_unknown_mode_is_rejected():
    df = _frame([["A", "A", "a@x.com", "111"]])
    with pytest.raises(ConfigurationError):
        find_split_groups(df, [1], "same_name")
