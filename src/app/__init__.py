# app/__init__.py

"""
Streamlit front end for the Org Chart Cleaner.

Launch with:

    streamlit run src/app/main.py
"""
