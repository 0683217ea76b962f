"""Thread synchronisation primitives: condition variable, map, pool and atomic value."""