"""HTTP routers, one per finance module."""
