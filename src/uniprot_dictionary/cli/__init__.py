"""Command-line interface for uniprot-dictionary."""
