# app/ui/home.py

import streamlit as st
from ui.button import SIGNUP_TRANSPORT
from services import actions, api


def home_page():
    st.title("🏠 Home")

    if SIGNUP_TRANSPORT == "http":
        user = api.get_user_details()
    else:
        user = actions.get_user_details()

    if user is None:
        st.info("No users have signed up yet.")
    else:
        st.write(user["email"])

    if st.button("← Back to sign up"):
        st.session_state["page"] = "signup"
        st.session_state["signup_status"] = "idle"
        st.rerun()
