"""Infrastructure Layer — XML-RPC transport, service locator, logging setup.

Invariants:
    - Infrastructure imports core/ types only, never services/
    - Remote outcomes are captured as RawResult, not interpreted here
"""
