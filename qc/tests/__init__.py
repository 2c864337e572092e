"""
Test suite for the quick-check engine.

Focus areas:
- Lazy sequence ordering and single traversal
- Shrink candidate order and termination per domain
- Driver outcomes: pass, falsified, witness, no witness
- Registry, decorators, logging and CLI
"""
