"""DDL statements for the jobly database.

All statements use IF NOT EXISTS so init_db() is idempotent.
"""

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS companies (
    handle        TEXT PRIMARY KEY,
    name          TEXT NOT NULL UNIQUE,
    num_employees INTEGER CHECK (num_employees IS NULL OR num_employees >= 0),
    description   TEXT NOT NULL DEFAULT '',
    logo_url      TEXT
);

CREATE TABLE IF NOT EXISTS jobs (
    id             INTEGER PRIMARY KEY AUTOINCREMENT,
    title          TEXT NOT NULL,
    salary         INTEGER CHECK (salary IS NULL OR salary >= 0),
    equity         REAL CHECK (equity IS NULL OR (equity >= 0 AND equity <= 1.0)),
    company_handle TEXT NOT NULL
                       REFERENCES companies(handle) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS users (
    username   TEXT PRIMARY KEY,
    password   TEXT NOT NULL,
    first_name TEXT NOT NULL,
    last_name  TEXT NOT NULL,
    email      TEXT NOT NULL CHECK (instr(email, '@') > 1),
    is_admin   INTEGER NOT NULL DEFAULT 0 CHECK (is_admin IN (0, 1))
);

-- Users applying to jobs
CREATE TABLE IF NOT EXISTS applications (
    username TEXT NOT NULL REFERENCES users(username) ON DELETE CASCADE,
    job_id   INTEGER NOT NULL REFERENCES jobs(id) ON DELETE CASCADE,
    PRIMARY KEY (username, job_id)
);

CREATE INDEX IF NOT EXISTS idx_jobs_company_handle ON jobs (company_handle);
CREATE INDEX IF NOT EXISTS idx_jobs_title          ON jobs (title);
CREATE INDEX IF NOT EXISTS idx_applications_job_id ON applications (job_id);
"""
