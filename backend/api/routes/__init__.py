"""Application-level routers."""
