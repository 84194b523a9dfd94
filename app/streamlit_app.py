import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import io
import time

import requests
import streamlit as st

from freeroom.config import get_active_config
from freeroom.index_build import build_index
from freeroom.io_utils import availability_to_frame, fetch_feed, load_feed
from freeroom.models import DayCode, Query
from freeroom.querying.evaluation import summary
from freeroom.querying.free_rooms import find_free_rooms

config = get_active_config()

# ---------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------
st.set_page_config(page_title="FreeRoom", layout="centered")
st.title("FreeRoom – Free Classrooms")

# ---------------------------------------------------------------------
# Caching
# ---------------------------------------------------------------------
@st.cache_data
def fetch_index_cached(semester: str, base_url: str):
    return build_index(fetch_feed(semester, base_url))

@st.cache_data
def load_index_cached(feed_bytes: bytes):
    return build_index(load_feed(io.BytesIO(feed_bytes)))

# ---------------------------------------------------------------------
# Form Inputs
# ---------------------------------------------------------------------
with st.form("controls"):
    c1, c2 = st.columns(2)
    semester = c1.text_input("Semester", config["current_semester"])
    feed_file = c2.file_uploader("(Optional) courses JSON", type=["json"])

    day_name = st.selectbox("יום", config["days"], index=0)
    c3, c4 = st.columns(2)
    start_time = c3.time_input("התחלה", step=3600)
    end_time = c4.time_input("סיום", step=3600)

    submitted = st.form_submit_button("חיפוש")

# ---------------------------------------------------------------------
# Run on Submit
# ---------------------------------------------------------------------
if submitted:
    t0 = time.perf_counter()
    # minutes are dropped; only whole hours are compared
    query = Query(day=DayCode.parse(day_name), start_hour=start_time.hour, end_hour=end_time.hour)

    try:
        if feed_file is not None:
            index = load_index_cached(feed_file.getvalue())
        else:
            index = fetch_index_cached(semester, config["feed_base_url"])
    except (OSError, ValueError, requests.RequestException) as e:
        st.error(f"Could not load the timetable: {e}")
        st.stop()

    result = find_free_rooms(index.universe, index.records, query)

    with st.expander("Summary"):
        st.text(summary(index, query, result))
        st.caption(f"Total time: {time.perf_counter() - t0:.3f}s")

    if not result:
        st.info("No free rooms in this window.")
    for building, rooms in result.items():
        st.subheader(building)
        st.markdown(" ".join(f"`{room}`" for room in rooms))

    if result:
        frame = availability_to_frame(result)
        st.download_button("Download free_rooms.csv", frame.to_csv(index=False),
                           file_name="free_rooms.csv", mime="text/csv")
