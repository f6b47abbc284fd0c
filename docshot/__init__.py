"""Documentation screenshot toolkit for Operaton."""
