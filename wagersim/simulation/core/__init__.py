"""
Core Match Model (FINAL / FROZEN)

Invariants:
- Record is an immutable historical fact.
- A shuffled Record is a new derived value, never a mutation.
- The core never validates bet amounts; callers guarantee positive pools.
"""
