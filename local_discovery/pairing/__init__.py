"""
Proximity pairing.

Responsibilities:
- Suggest complementary venues within an easy walk of a given business.
- Chain suggestions into short 2-3 stop walking routes within a distance limit.
"""
