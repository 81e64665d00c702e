# app/ui/signup.py

import streamlit as st
from ui.button import signup_button, IDLE, ERROR


def signup_page():
    st.title("📝 Sign Up")

    if "signup_status" not in st.session_state:
        st.session_state["signup_status"] = IDLE

    username = st.text_input("Username", key="signup_username")
    password = st.text_input("Password", type="password", key="signup_password")

    if signup_button("Sign Up", username, password):
        st.rerun()

    if st.session_state["signup_status"] == ERROR:
        st.error(f"❌ {st.session_state['signup_error']}")
