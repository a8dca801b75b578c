"""
Pages package for the Org Chart Cleaner wizard.

Each module in this package implements one step of the multi-step UI:

    - page_upload.py    (Step 1 — Upload Org Chart)
    - page_explore.py   (Step 2 — Explore Cleaned Tree)
    - page_download.py  (Step 3 — Download)
"""
