"""Simple Streamlit dashboard to peek at a walk in progress.

The app polls the server's `/state` endpoint and renders the pending queue
and counters, which makes it easy to watch visits rotate through the queue.
Start the server with `graphwalk-server`, then `streamlit run` this file.
"""

import time

import requests
import streamlit as st

st.set_page_config(page_title="Graph Walk Dashboard", layout="wide")
server_url = st.text_input("Server URL", "http://localhost:8000")
interval = st.slider("Refresh interval (sec)", 0.2, 2.0, 0.5)
placeholder = st.empty()
while True:
    with placeholder.container():
        try:
            r = requests.get(server_url + "/state", timeout=0.3)
            state = r.json()
            if "error" in state:
                st.info("No walk has run yet.")
            else:
                cols = st.columns(2)
                cols[0].metric("Announced", state["stats"]["announced"])
                cols[1].metric("Ticks", state["stats"]["ticks"])
                st.subheader(f"Pending ({len(state['pending'])})")
                st.table(state["pending"])
        except requests.RequestException as e:
            st.error(str(e))
    time.sleep(interval)
