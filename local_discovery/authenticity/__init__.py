"""
Authenticity classifier.

Responsibilities:
- Score a candidate for chain likelihood, business size and locality.
- Combine the sub-scores into the Local Business Authenticity Index (LBAI).
- Apply provider-type and review-volume hard filters.
- Keep every word list and constant in a swappable ScoringConfig preset.
"""
