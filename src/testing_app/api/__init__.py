"""HTTP layer: routers, contracts, dependency wiring and error mapping."""
