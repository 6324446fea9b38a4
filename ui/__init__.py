"""UI package for the User Directory Streamlit application.

Having this file ensures `ui` is treated as a proper Python package in
all execution contexts (Streamlit, pytest), avoiding import errors
when `ui.*` modules are referenced from within `ui/app.py`.
"""
