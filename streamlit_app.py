import streamlit as st
import pandas as pd
import time
import logging

# Suppress tornado WebSocketClosedError logs
logging.getLogger("tornado.application").setLevel(logging.ERROR)

from matching.schema import MATCHING_TYPES
from matching.errors import InvalidDataFormat
from matching.audit import find_split_groups
from matching.pipeline import group_uploaded_csv

st.set_page_config(layout="wide", page_title="Person Grouping Dashboard")
st.title("🧹 Person Grouping Dashboard")

st.sidebar.header("📁 Upload People CSV")
people_file = st.sidebar.file_uploader("Upload People CSV", type=["csv"])
matching_type = st.sidebar.selectbox("Matching type", list(MATCHING_TYPES.values()), index=2)
run_audit = st.sidebar.checkbox("🔍 Check for linked but unmerged person_ids", value=False)

# Main button to run grouping
if st.sidebar.button("🚀 Run Grouping"):
    if people_file is None:
        st.warning("⚠️ Upload a CSV first.")
    else:
        total_start = time.time()
        with st.spinner("Grouping people..."):
            try:
                grouped_df = group_uploaded_csv(people_file.getvalue(), matching_type)
            except InvalidDataFormat as e:
                st.error(f"Invalid data format - {e}")
                grouped_df = None
            except UnicodeDecodeError as e:
                st.error(f"Could not read file: {e}")
                grouped_df = None

        if grouped_df is not None:
            splits = []
            if run_audit and len(grouped_df):
                raw_df = grouped_df.iloc[:, 1:]
                splits = find_split_groups(raw_df, grouped_df.iloc[:, 0], matching_type)
            st.session_state.update({
                "grouped_df": grouped_df,
                "splits": splits,
                "source_name": people_file.name,
            })
            st.info(f"⏱️ Total grouping time: {time.time() - total_start:.2f} seconds")

# ---- DISPLAY RESULTS ----

grouped_df = st.session_state.get("grouped_df")
splits = st.session_state.get("splits") or []
source_name = st.session_state.get("source_name") or "people.csv"

if grouped_df is not None:
    person_ids = grouped_df.iloc[:, 0]
    st.subheader(f"📋 Grouped People ({len(grouped_df)} rows, {person_ids.nunique()} people)")
    st.dataframe(grouped_df)

    out_name = source_name[:-4] + "_output.csv" if source_name.lower().endswith(".csv") else source_name + "_output.csv"
    st.download_button(
        label="⬇️ Download Output CSV",
        data=grouped_df.to_csv(index=False),
        file_name=out_name,
        mime="text/csv",
    )

    for ids in splits:
        st.warning(f"person_ids {', '.join(map(str, ids))} are linked by shared keys but were not merged")

    counts = person_ids.value_counts()
    dupe_ids = counts[counts > 1].index
    st.subheader(f"🔗 People With Several Rows ({len(dupe_ids)} groups)")

    # Wrap all groups inside one big expander
    with st.expander("🔽 Expand All Groups"):
        for person_id in sorted(dupe_ids):
            group_rows = grouped_df[person_ids == person_id]
            first = group_rows.iloc[0]
            label = " ".join(str(first[c]) for c in ("FirstName", "LastName") if c in grouped_df.columns)
            with st.expander(f"Person {person_id} - {label} ({len(group_rows)} records)"):
                st.dataframe(group_rows)
