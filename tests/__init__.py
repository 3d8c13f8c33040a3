"""
Test suite for the Testing App health service.

Demonstrates testing patterns for a stateless health endpoint:
- Domain snapshot behavior (not Pydantic validation itself)
- Service policy: healthy by default, degraded on failing checks
- Error mapping at the HTTP boundary
- Integration tests for the critical path
"""
