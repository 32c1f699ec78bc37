"""Loading of imported Ember source files."""
