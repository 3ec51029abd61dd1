#!/usr/bin/env python3
"""
Coach Program Builder - Streamlit Web Interface
Main entry point for the web application.
"""

import streamlit as st

from pages import generate_block
from program_builder.config import load_config
from program_builder.logging_setup import setup_logger


st.set_page_config(
    page_title="Coach's Program Builder",
    page_icon="🏋️",
    layout="wide",
)

config = load_config()
setup_logger(level=config["logging"]["level"], log_file=config["logging"].get("file"))

generate_block.show()
