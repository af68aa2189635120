"""
Great-circle distance helpers (Haversine, miles).
"""
