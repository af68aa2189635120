"""
Candidate records.

Responsibilities:
- Define the normalized BusinessCandidate record the engine works on.
- Convert loosely typed provider records into candidates at the boundary.
- Reject malformed records before they reach any scoring code.
"""
