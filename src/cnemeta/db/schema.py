# ABOUTME: SQL DDL statements for the cnemeta record store.
# ABOUTME: Defines the records table holding each record's title and shared extra field.

SCHEMA_V1 = """
-- Bibliographic records; extra is the shared freeform field
CREATE TABLE records (
    id            INTEGER PRIMARY KEY AUTOINCREMENT,
    title         TEXT NOT NULL,
    extra         TEXT NOT NULL DEFAULT '',
    date_added    TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now')),
    date_modified TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

CREATE INDEX idx_records_title ON records(title);

-- Schema version of the database file
CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

INSERT INTO schema_version (version) VALUES (1);
"""
