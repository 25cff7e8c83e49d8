"""Developer and command line tooling."""
