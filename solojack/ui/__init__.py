"""Presentation layer: card assets, the table view model and the Streamlit page."""
