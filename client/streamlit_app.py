"""Client-side Streamlit UI for the simchat backend.

Features
--------
* Chat interface built on `st.chat_message` elements.
* Sidebar to configure the **API base URL**.
* Chat history lives in `st.session_state`; the whole history is posted to
  `/api/chat` on every turn since the backend keeps no session.

Run with:
    $ streamlit run client/streamlit_app.py

Make sure the backend is up (default http://localhost:8000, or
SIMCHAT_API_URL) or change the "API Base URL" in the sidebar.
"""

from __future__ import annotations

from typing import Dict, List

import streamlit as st

from simchat.client import ChatClient, ChatSession
from simchat.config import get_settings

st.set_page_config(page_title="LLM Chat", page_icon="🤖")

###############################################################################
# Session-state helpers
###############################################################################

if "messages" not in st.session_state:
    # Each message is a {"role": "user"|"assistant", "content": str}
    st.session_state.messages: List[Dict[str, str]] = []

###############################################################################
# Sidebar - configuration
###############################################################################

st.sidebar.header("Server configuration")
API_BASE_URL: str = st.sidebar.text_input(
    "API Base URL", value=get_settings().api_url, help="Where the simchat backend lives"
)
if st.sidebar.button("Clear conversation"):
    st.session_state.messages = []
    st.rerun()

###############################################################################
# Page header
###############################################################################

st.title("LLM Chat")
st.caption("Powered by AI")

session = ChatSession(ChatClient(API_BASE_URL), st.session_state.messages)

###############################################################################
# Display chat history
###############################################################################

if not session.messages:
    st.info("👋 Welcome! Start a conversation by typing a message below.")

for msg in session.messages:
    with st.chat_message(msg["role"]):
        st.markdown(msg["content"])

###############################################################################
# Chat input
###############################################################################

user_prompt = st.chat_input("Type your message...")
if user_prompt:
    with st.spinner("Thinking…"):
        session.submit(user_prompt)
    st.rerun()
