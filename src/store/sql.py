"""SQL commands used by credential store.

SQLite and PostgreSQL drivers use different placeholders in parametrized
statements, so each statement exists in two variants.

Table with credentials:

```
     Column      |  Type           | Nullable |
-----------------+-----------------+----------+
 account_id      | text            | not null |
 token           | blob/bytea      | not null |
 quota           | int             | not null |
 quota_usage     | int             | not null |
Indexes:
    "credentials_pkey" PRIMARY KEY, btree (account_id)
    "credentials_token" UNIQUE, btree (token)
```
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SQLStatements:
    """All statements needed by credential store for one database dialect."""

    create_table: str
    create_index: str
    select_by_token: str
    select_by_account: str
    select_all: str
    insert: str
    delete: str
    increment_usage: str
    reset_usage: str


CREATE_CREDENTIALS_TABLE_SQLITE = """
    CREATE TABLE IF NOT EXISTS credentials (
        account_id      text NOT NULL,
        token           blob NOT NULL,
        quota           int NOT NULL CHECK (quota >= 0),
        quota_usage     int NOT NULL DEFAULT 0,
        PRIMARY KEY(account_id)
    );
    """

CREATE_CREDENTIALS_TABLE_PG = """
    CREATE TABLE IF NOT EXISTS credentials (
        account_id      text NOT NULL,
        token           bytea NOT NULL,
        quota           int NOT NULL CHECK (quota >= 0),
        quota_usage     int NOT NULL DEFAULT 0,
        PRIMARY KEY(account_id)
    );
    """

CREATE_TOKEN_INDEX = """
    CREATE UNIQUE INDEX IF NOT EXISTS credentials_token
        ON credentials (token)
    """

SELECT_CREDENTIAL_BY_TOKEN_SQLITE = """
    SELECT account_id, token, quota, quota_usage
      FROM credentials
     WHERE token=?
    """

SELECT_CREDENTIAL_BY_TOKEN_PG = """
    SELECT account_id, token, quota, quota_usage
      FROM credentials
     WHERE token=%s
    """

SELECT_CREDENTIAL_BY_ACCOUNT_SQLITE = """
    SELECT account_id, token, quota, quota_usage
      FROM credentials
     WHERE account_id=?
    """

SELECT_CREDENTIAL_BY_ACCOUNT_PG = """
    SELECT account_id, token, quota, quota_usage
      FROM credentials
     WHERE account_id=%s
    """

SELECT_ALL_CREDENTIALS = """
    SELECT account_id, token, quota, quota_usage
      FROM credentials
     ORDER BY account_id
    """

INSERT_CREDENTIAL_SQLITE = """
    INSERT INTO credentials (account_id, token, quota, quota_usage)
    VALUES (?, ?, ?, 0)
    """

INSERT_CREDENTIAL_PG = """
    INSERT INTO credentials (account_id, token, quota, quota_usage)
    VALUES (%s, %s, %s, 0)
    """

DELETE_CREDENTIAL_SQLITE = """
    DELETE FROM credentials
     WHERE account_id=?
    """

DELETE_CREDENTIAL_PG = """
    DELETE FROM credentials
     WHERE account_id=%s
    """

# check and increment has to be done in one statement, otherwise concurrent
# requests could both see available quota
INCREMENT_QUOTA_USAGE_SQLITE = """
    UPDATE credentials
       SET quota_usage=quota_usage+1
     WHERE token=?
       AND quota > 0
       AND quota_usage < quota
    """

INCREMENT_QUOTA_USAGE_PG = """
    UPDATE credentials
       SET quota_usage=quota_usage+1
     WHERE token=%s
       AND quota > 0
       AND quota_usage < quota
    """

RESET_QUOTA_USAGE = """
    UPDATE credentials
       SET quota_usage=0
     WHERE quota_usage <> 0
    """


SQLITE_STATEMENTS = SQLStatements(
    create_table=CREATE_CREDENTIALS_TABLE_SQLITE,
    create_index=CREATE_TOKEN_INDEX,
    select_by_token=SELECT_CREDENTIAL_BY_TOKEN_SQLITE,
    select_by_account=SELECT_CREDENTIAL_BY_ACCOUNT_SQLITE,
    select_all=SELECT_ALL_CREDENTIALS,
    insert=INSERT_CREDENTIAL_SQLITE,
    delete=DELETE_CREDENTIAL_SQLITE,
    increment_usage=INCREMENT_QUOTA_USAGE_SQLITE,
    reset_usage=RESET_QUOTA_USAGE,
)

POSTGRES_STATEMENTS = SQLStatements(
    create_table=CREATE_CREDENTIALS_TABLE_PG,
    create_index=CREATE_TOKEN_INDEX,
    select_by_token=SELECT_CREDENTIAL_BY_TOKEN_PG,
    select_by_account=SELECT_CREDENTIAL_BY_ACCOUNT_PG,
    select_all=SELECT_ALL_CREDENTIALS,
    insert=INSERT_CREDENTIAL_PG,
    delete=DELETE_CREDENTIAL_PG,
    increment_usage=INCREMENT_QUOTA_USAGE_PG,
    reset_usage=RESET_QUOTA_USAGE,
)
