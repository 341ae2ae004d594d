"""Feature modules: catalog aggregation, upload signing, accounts and orders."""
