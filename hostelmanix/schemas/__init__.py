"""
Request and response schemas.

Field names are snake_case on the wire. Create and update bodies forbid
unknown fields.
"""
