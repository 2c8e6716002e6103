"""modelrpc — typed client for the remote model ("object") RPC endpoint.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, e.g.
      `from modelrpc.client import build_model_dispatch`
"""
