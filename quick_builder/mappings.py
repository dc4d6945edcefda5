"""Operator whitelist and dialect specific SQL fragments."""

# Query types the builder knows how to assemble
query_types = ('SELECT', 'INSERT', 'UPDATE', 'DELETE')

# Operators accepted inside {column: {operator: value}} conditions. They are
# spliced into the SQL text, so anything not listed here is refused.
valid_operators = frozenset(('=', '!=', '<', '>', '<=', '>=', 'LIKE'))

# Identifier delimiters used when no connection is available to quote for us
quote_chars = {
    'default': ('"', '"'),
    'postgresql': ('"', '"'),
    'sqlite': ('"', '"'),
    'oracle': ('"', '"'),
    'mysql': ('`', '`'),
    'mariadb': ('`', '`'),
    'mssql': ('[', ']'),
}

# DBAPI paramstyle of the usual driver for each dialect
paramstyles = {
    'default': 'qmark',
    'sqlite': 'qmark',
    'mssql': 'qmark',
    'postgresql': 'pyformat',
    'mysql': 'format',
    'mariadb': 'format',
    'oracle': 'named',
}

# Clause capping a SELECT at one row
limit_one = {
    'oracle': ' FETCH FIRST 1 ROWS ONLY',
}
