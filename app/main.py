# app/main.py

import streamlit as st
from dotenv import load_dotenv
import config
from ui.signup import signup_page
from ui.home import home_page


load_dotenv()
config.setup_logging()


page = st.session_state.get("page", "signup")
if page == "home":
    home_page()
else:
    signup_page()
