"""
Column types shared across models.
"""
from sqlalchemy import JSON, String
from sqlalchemy.dialects.postgresql import ARRAY


# text[] on PostgreSQL; JSON list elsewhere (SQLite in tests).
# Order is preserved and duplicates are allowed.
StringArray = ARRAY(String).with_variant(JSON(), "sqlite")
