"""Core building blocks shared by the API and the CLI."""
