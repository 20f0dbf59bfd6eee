"""Streamlit web interface for Hogar."""
