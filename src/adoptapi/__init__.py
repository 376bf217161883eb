"""adoptapi - normalized, queryable view over OpenJDK binary releases."""
