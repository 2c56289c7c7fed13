"""
Business logic layer.

Services return ``ServiceResult`` objects and never raise for expected
failures; the API layer turns failed results into HTTP errors.
"""
