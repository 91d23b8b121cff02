"""
Presentation Layer - HTTP surface (FastAPI routers and dependencies).
"""
