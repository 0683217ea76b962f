"""List helpers: editing, searching, aggregating and set operations."""