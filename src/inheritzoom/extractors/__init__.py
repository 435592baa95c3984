"""Source extractors that turn source text into type declarations."""
