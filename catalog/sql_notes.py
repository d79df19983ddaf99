"""Frequently used SQL statements."""
from __future__ import annotations

from core.models import SqlStatement

SQL_STATEMENTS: tuple[SqlStatement, ...] = (
    SqlStatement(
        statement="SELECT",
        description="Retrieves rows from one or more tables.",
        example="SELECT name, age FROM users WHERE age > 18;",
    ),
    SqlStatement(
        statement="INSERT INTO",
        description="Adds new rows to a table.",
        example="INSERT INTO users (name, age) VALUES ('Ada', 36);",
    ),
    SqlStatement(
        statement="UPDATE",
        description="Modifies existing rows that match a condition.",
        example="UPDATE users SET age = 37 WHERE name = 'Ada';",
    ),
    SqlStatement(
        statement="DELETE",
        description="Removes rows that match a condition.",
        example="DELETE FROM users WHERE age < 18;",
    ),
    SqlStatement(
        statement="CREATE TABLE",
        description="Defines a new table and its columns.",
        example="CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT NOT NULL, age INTEGER);",
    ),
    SqlStatement(
        statement="ALTER TABLE",
        description="Changes the structure of an existing table.",
        example="ALTER TABLE users ADD COLUMN email TEXT;",
    ),
    SqlStatement(
        statement="DROP TABLE",
        description="Deletes a table and all of its data.",
        example="DROP TABLE users;",
    ),
    SqlStatement(
        statement="INNER JOIN",
        description="Combines rows from two tables where the join condition matches.",
        example="SELECT u.name, o.total FROM users u INNER JOIN orders o ON o.user_id = u.id;",
    ),
    SqlStatement(
        statement="LEFT JOIN",
        description="Keeps every row from the left table, filling missing matches with NULL.",
        example="SELECT u.name, o.total FROM users u LEFT JOIN orders o ON o.user_id = u.id;",
    ),
    SqlStatement(
        statement="GROUP BY",
        description="Groups rows sharing a value so aggregates can be computed per group.",
        example="SELECT age, COUNT(*) FROM users GROUP BY age;",
    ),
    SqlStatement(
        statement="HAVING",
        description="Filters groups after aggregation.",
        example="SELECT age, COUNT(*) FROM users GROUP BY age HAVING COUNT(*) > 1;",
    ),
    SqlStatement(
        statement="ORDER BY",
        description="Sorts the result set by one or more columns.",
        example="SELECT name FROM users ORDER BY age DESC;",
    ),
    SqlStatement(
        statement="CREATE INDEX",
        description="Builds an index to speed up lookups on a column.",
        example="CREATE INDEX idx_users_name ON users (name);",
    ),
    SqlStatement(
        statement="UNION",
        description="Combines the result sets of two queries, removing duplicates.",
        example="SELECT name FROM users UNION SELECT name FROM admins;",
    ),
)
